"""Ideal path assembly and the rule-based fallback plan."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from leverage_engine.milestones import generate_milestones
from leverage_engine.schema import IdealPath, PathActivity

DEFAULT_CONFIDENCE = 0.85


def fallback_path_activities(goal_title: str, today: date) -> list[PathActivity]:
    """Generic three-step plan used when no planner output is available."""

    first_deadline = today + timedelta(days=14)
    return [
        PathActivity(
            id="fallback-1",
            title=f'Define a detailed action plan for "{goal_title}"',
            description="Build a structured plan with clear, measurable steps",
            impact=8,
            effort=3,
            estimated_duration=90,
            deadline=first_deadline,
            order=1,
        ),
        PathActivity(
            id="fallback-2",
            title="Identify the resources and tools needed",
            description="List everything required to carry out the plan",
            impact=7,
            effort=2,
            estimated_duration=60,
            deadline=first_deadline + timedelta(days=7),
            order=2,
        ),
        PathActivity(
            id="fallback-3",
            title="Execute the first high-impact action",
            description="Complete the most important activity identified",
            impact=9,
            effort=6,
            estimated_duration=180,
            deadline=first_deadline + timedelta(days=14),
            order=3,
        ),
    ]


def build_ideal_path(
    path_activities: list[PathActivity],
    created_at: datetime,
    ai_generated: bool = True,
    confidence_score: float = DEFAULT_CONFIDENCE,
    based_on_templates: Optional[list[str]] = None,
) -> IdealPath:
    ordered = sorted(path_activities, key=lambda activity: activity.order)
    return IdealPath(
        activities=ordered,
        milestones=generate_milestones(ordered),
        metadata={
            "ai_generated": ai_generated,
            "confidence_score": confidence_score,
            "created_at": created_at.isoformat(),
            "based_on_templates": list(based_on_templates or []),
        },
    )
