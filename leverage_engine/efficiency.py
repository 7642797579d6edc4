"""Leverage score formula and tier classification.

Efficiency points = (impact x 2) / hours spent.
"""

from __future__ import annotations

import logging
import math

from leverage_engine.schema import Activity, EfficiencyTier

_LOGGER = logging.getLogger(__name__)

IMPACT_MULTIPLIER = 2

EXCELLENT = EfficiencyTier(
    level="excellent",
    label="Excellent",
    color="#10b981",
    description="High leverage - prioritize activities like this!",
)
GOOD = EfficiencyTier(
    level="good",
    label="Good",
    color="#3b82f6",
    description="Good efficiency - productive activity",
)
MODERATE = EfficiencyTier(
    level="moderate",
    label="Moderate",
    color="#f59e0b",
    description="Moderate efficiency - room to improve",
)
LOW = EfficiencyTier(
    level="low",
    label="Low",
    color="#ef4444",
    description="Low efficiency - consider alternatives",
)

# Inclusive lower bounds, highest first.
TIER_THRESHOLDS = ((15.0, EXCELLENT), (10.0, GOOD), (5.0, MODERATE))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative inputs (2.345 -> 2.35)."""

    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def _is_missing(value) -> bool:
    if not value:
        return True
    return isinstance(value, float) and not math.isfinite(value)


def calculate_efficiency(activity: Activity) -> float:
    """Return the leverage score of an activity, or 0.0 when it cannot be scored."""

    impact = activity.impact
    duration = activity.duration_minutes
    if _is_missing(impact) or _is_missing(duration):
        _LOGGER.warning("Cannot score activity %r: missing impact or duration", activity.id or activity.description)
        return 0.0

    if duration <= 0 or impact <= 0:
        return 0.0

    hours = duration / 60
    efficiency = (impact * IMPACT_MULTIPLIER) / hours
    return round_half_up(efficiency, 2)


def classify_efficiency(score: float) -> EfficiencyTier:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return LOW
