"""Efficiency ranking of activities."""

from __future__ import annotations

from leverage_engine.efficiency import calculate_efficiency, classify_efficiency
from leverage_engine.schema import Activity, ScoredActivity


def score_activity(activity: Activity) -> ScoredActivity:
    efficiency = calculate_efficiency(activity)
    return ScoredActivity(activity=activity, efficiency=efficiency, tier=classify_efficiency(efficiency))


def create_ranking(activities: list[Activity], limit: int = 10) -> list[ScoredActivity]:
    """Rank scorable activities by efficiency, best first, keeping input order on ties."""

    scored = [score_activity(activity) for activity in activities]
    scored = [entry for entry in scored if entry.efficiency > 0]
    ranked = sorted(scored, key=lambda entry: entry.efficiency, reverse=True)[: max(0, limit)]

    for position, entry in enumerate(ranked, start=1):
        entry.rank = position
    return ranked
