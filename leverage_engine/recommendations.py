"""Opportunity-cost recommendation flow for a single activity."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from leverage_engine.config import Config
from leverage_engine.efficiency import calculate_efficiency, classify_efficiency
from leverage_engine.opportunity_cost import calculate_opportunity_cost, should_alert
from leverage_engine.schema import Activity, EfficiencyTier, OpportunityCostReport, naive_utc

_LOGGER = logging.getLogger(__name__)


@dataclass
class Recommendation:
    should_alert: bool
    message: str
    current_efficiency: float
    tier: EfficiencyTier
    report: Optional[OpportunityCostReport] = None


def select_candidate_pool(
    history: list[Activity],
    now: datetime,
    exclude: Optional[Activity] = None,
    config: Optional[Config] = None,
) -> list[Activity]:
    """Recent, high-impact activities worth comparing against, most recent first."""

    config = config or Config()
    since = naive_utc(now) - timedelta(days=config.candidate_lookback_days)

    pool = [
        activity
        for activity in history
        if activity is not exclude
        and (exclude is None or exclude.id is None or activity.id != exclude.id)
        and activity.created_at is not None
        and naive_utc(activity.created_at) >= since
        and (activity.duration_minutes or 0) > 0
        and (activity.impact or 0) >= config.candidate_min_impact
    ]
    pool.sort(key=lambda activity: naive_utc(activity.created_at), reverse=True)
    return pool[: config.candidate_pool_limit]


def recommend_alternatives(
    current: Activity,
    history: list[Activity],
    now: datetime,
    config: Optional[Config] = None,
) -> Recommendation:
    """Decide whether ``current`` deserves an opportunity-cost alert and build it."""

    config = config or Config()
    efficiency = calculate_efficiency(current)
    tier = classify_efficiency(efficiency)

    if not should_alert(current):
        return Recommendation(
            should_alert=False,
            message="Activity has acceptable efficiency",
            current_efficiency=efficiency,
            tier=tier,
        )

    pool = select_candidate_pool(history, now, exclude=current, config=config)
    _LOGGER.debug("Analyzing activity %r against %d candidates", current.id or current.description, len(pool))
    report = calculate_opportunity_cost(current, pool, config.max_alternatives)

    if not report.has_opportunity_cost:
        return Recommendation(
            should_alert=False,
            message="No significant opportunity cost found",
            current_efficiency=efficiency,
            tier=tier,
            report=report,
        )

    return Recommendation(
        should_alert=True,
        message=(
            f"This activity has low efficiency. You could gain {report.opportunity_cost:.1f} impact points "
            "by focusing on high-leverage alternatives."
        ),
        current_efficiency=efficiency,
        tier=tier,
        report=report,
    )
