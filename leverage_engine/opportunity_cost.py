"""Opportunity cost of low-leverage activities against proven alternatives."""

from __future__ import annotations

import math

from leverage_engine.efficiency import IMPACT_MULTIPLIER, LOW, calculate_efficiency, classify_efficiency, round_half_up
from leverage_engine.schema import Activity, Alternative, OpportunityCostReport

# Candidates must beat the current score by this factor to count as alternatives.
BETTER_FACTOR = 1.5


def should_alert(activity: Activity) -> bool:
    """Low tier, or low impact paired with high effort, warrants analysis."""

    is_low_efficiency = classify_efficiency(calculate_efficiency(activity)) is LOW
    impact = activity.impact or 0
    effort = activity.effort or 0
    return is_low_efficiency or (impact < 5 and effort > 5)


def _finite_or_zero(value) -> float:
    if not value or not math.isfinite(value):
        return 0.0
    return float(value)


def _hours(activity: Activity) -> float:
    """Duration in hours; missing, non-finite or negative durations count as 0."""

    return max(0.0, _finite_or_zero(activity.duration_minutes)) / 60


def generate_reasoning(alternative: Activity, alternative_efficiency: float, current: Activity) -> str:
    reasons: list[str] = []

    current_efficiency = calculate_efficiency(current)
    if current_efficiency > 0:
        ratio = alternative_efficiency / current_efficiency
        if ratio >= 2:
            reasons.append(f"{int(round_half_up(ratio))}x more efficient")

    if (alternative.impact or 0) > (current.impact or 0):
        reasons.append("Higher impact on the goal")

    if alternative.effort is not None and current.effort is not None and alternative.effort < current.effort:
        reasons.append("Less effort required")

    if _hours(alternative) < _hours(current):
        reasons.append("Takes less time")

    return " • ".join(reasons) if reasons else "High-leverage activity"


def calculate_opportunity_cost(
    current: Activity,
    candidates: list[Activity],
    max_alternatives: int = 3,
) -> OpportunityCostReport:
    """Compare ``current`` against ``candidates`` and estimate the impact forgone."""

    current_efficiency = calculate_efficiency(current)
    threshold = current_efficiency * BETTER_FACTOR

    scored = [(candidate, calculate_efficiency(candidate)) for candidate in candidates or []]
    better = [(candidate, efficiency) for candidate, efficiency in scored if efficiency > threshold]
    better = sorted(better, key=lambda item: item[1], reverse=True)[: max(0, max_alternatives)]

    if not better:
        return OpportunityCostReport(current_efficiency=current_efficiency)

    best, best_efficiency = better[0]
    current_hours = _hours(current)
    repetitions = math.floor(current_hours / _hours(best))

    potential_impact = repetitions * best.impact * IMPACT_MULTIPLIER
    actual_impact = max(0.0, _finite_or_zero(current.impact)) * IMPACT_MULTIPLIER
    opportunity_cost = round_half_up(max(0.0, potential_impact - actual_impact), 2)

    alternatives = [
        Alternative(
            title=candidate.description,
            impact=candidate.impact,
            effort=candidate.effort,
            duration=candidate.duration_minutes,
            efficiency=efficiency,
            improvement_potential=round_half_up(efficiency - current_efficiency, 2),
            reasoning=generate_reasoning(candidate, efficiency, current),
        )
        for candidate, efficiency in better
    ]

    return OpportunityCostReport(
        current_efficiency=current_efficiency,
        alternatives=alternatives,
        opportunity_cost=opportunity_cost,
        has_opportunity_cost=opportunity_cost > 0,
        metrics={
            "current_efficiency": current_efficiency,
            "best_alternative_efficiency": best_efficiency,
            "efficiency_gap": round_half_up(best_efficiency - current_efficiency, 2),
            "time_invested": current_hours,
            "potential_impact": potential_impact,
            "actual_impact": actual_impact,
        },
    )
