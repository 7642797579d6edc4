"""Pattern detection and insights over ranked high-efficiency activities."""

from __future__ import annotations

import numpy as np

from leverage_engine.schema import ScoredActivity

REPEATABLE_KEYWORDS = (
    "reunião",
    "meeting",
    "call",
    "café",
    "coffee",
    "feedback",
    "revisão",
    "review",
    "estudo",
    "study",
)


def _is_repeatable(description: str) -> bool:
    text = (description or "").lower()
    return any(keyword in text for keyword in REPEATABLE_KEYWORDS)


def identify_activity_patterns(ranking: list[ScoredActivity]) -> dict[str, list[dict]]:
    """Group ranked activities into Q1, quick-win, strategic and repeatable buckets."""

    patterns: dict[str, list[dict]] = {
        "high_impact_low_effort": [],
        "quick_wins": [],
        "strategic_moves": [],
        "repeatable": [],
    }

    for entry in ranking:
        activity = entry.activity
        impact = activity.impact or 0
        effort = activity.effort if activity.effort is not None else float("inf")
        duration = activity.duration_minutes or 0

        if impact >= 7 and effort <= 3:
            patterns["high_impact_low_effort"].append(
                {
                    "id": activity.id,
                    "description": activity.description,
                    "impact": activity.impact,
                    "effort": activity.effort,
                    "efficiency": entry.efficiency,
                }
            )

        if duration <= 30 and entry.efficiency >= 10:
            patterns["quick_wins"].append(
                {
                    "id": activity.id,
                    "description": activity.description,
                    "duration": activity.duration_minutes,
                    "efficiency": entry.efficiency,
                }
            )

        if impact >= 9:
            patterns["strategic_moves"].append(
                {
                    "id": activity.id,
                    "description": activity.description,
                    "impact": activity.impact,
                    "efficiency": entry.efficiency,
                }
            )

        if _is_repeatable(activity.description) and entry.efficiency >= 10:
            patterns["repeatable"].append(
                {
                    "id": activity.id,
                    "description": activity.description,
                    "efficiency": entry.efficiency,
                    "suggestion": "Consider scheduling this regularly",
                }
            )

    return patterns


def generate_insights(ranking: list[ScoredActivity], patterns: dict[str, list[dict]]) -> list[dict]:
    insights: list[dict] = []

    q1 = patterns["high_impact_low_effort"]
    if len(q1) >= 3:
        insights.append(
            {
                "type": "opportunity",
                "title": "You have proven Q1 activities",
                "description": f"{len(q1)} high-impact, low-effort activities identified. Always prioritize these!",
                "priority": "high",
                "actionable": True,
            }
        )

    quick_wins = patterns["quick_wins"]
    if len(quick_wins) >= 5:
        insights.append(
            {
                "type": "strategy",
                "title": "Quick wins work for you",
                "description": (
                    f"You have {len(quick_wins)} short (<30min) activities with high efficiency. "
                    "Use them to keep momentum."
                ),
                "priority": "medium",
                "actionable": True,
            }
        )

    strategic = patterns["strategic_moves"]
    if len(strategic) >= 2:
        avg_efficiency = float(np.mean([item["efficiency"] for item in strategic]))
        insights.append(
            {
                "type": "impact",
                "title": "High-impact strategic activities",
                "description": (
                    f"{len(strategic)} activities with impact 9-10 and average efficiency of "
                    f"{avg_efficiency:.1f}. Keep prioritizing these!"
                ),
                "priority": "high",
                "actionable": False,
            }
        )

    repeatable = patterns["repeatable"]
    if len(repeatable) >= 3:
        insights.append(
            {
                "type": "habit",
                "title": "Repeatable high-efficiency activities",
                "description": f"{len(repeatable)} efficient activities could become routines. Consider recurring slots.",
                "priority": "medium",
                "actionable": True,
                "suggestions": [item["description"] for item in repeatable[:3]],
            }
        )

    if ranking:
        scores = np.asarray([entry.efficiency for entry in ranking], dtype=float)
        mean = float(scores.mean())
        std_dev = float(scores.std())
        if std_dev < 3 and mean >= 12:
            insights.append(
                {
                    "type": "performance",
                    "title": "Exceptional consistency",
                    "description": f"Your high-efficiency activities are consistent (std dev: {std_dev:.1f}). Keep it up!",
                    "priority": "low",
                    "actionable": False,
                }
            )

    return insights
