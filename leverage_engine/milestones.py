"""Milestone generation and linear expected-progress interpolation."""

from __future__ import annotations

from datetime import date

from leverage_engine.efficiency import round_half_up
from leverage_engine.schema import Milestone, PathActivity


def generate_milestones(path_activities: list[PathActivity]) -> list[Milestone]:
    """One milestone per planned activity, evenly splitting 0-100%."""

    count = len(path_activities)
    return [
        Milestone(
            percentage=round_half_up((index + 1) / count * 100),
            date=activity.deadline,
            description=f"{activity.title} completed",
            activity_id=activity.id,
        )
        for index, activity in enumerate(path_activities)
    ]


def expected_progress_today(milestones: list[Milestone], today: date) -> float:
    """Expected completion percentage on ``today``, interpolated between milestones.

    Before the first milestone the expectation is 0, after the last it is 100.
    """

    ordered = sorted(milestones, key=lambda milestone: milestone.date)
    next_milestone = next((m for m in ordered if m.date >= today), None)
    prev_milestone = next((m for m in reversed(ordered) if m.date <= today), None)

    if prev_milestone is None:
        return 0.0
    if next_milestone is None:
        return 100.0

    total_days = (next_milestone.date - prev_milestone.date).days
    if total_days == 0:
        return float(next_milestone.percentage)

    days_passed = (today - prev_milestone.date).days
    progress_diff = next_milestone.percentage - prev_milestone.percentage
    return round_half_up(prev_milestone.percentage + progress_diff * days_passed / total_days)
