"""Step-function deviation of actual progress from an ideal path."""

from __future__ import annotations

from datetime import date
from typing import Optional

from leverage_engine.schema import DeviationReport, Goal, IdealPath


def _format_pct(value: float) -> str:
    return f"{value:g}%"


def calculate_deviation(goal: Goal, ideal_path: Optional[IdealPath], today: date) -> Optional[DeviationReport]:
    """Compare the goal's progress with the target of the next pending milestone.

    Milestones are scanned in path order. Returns ``None`` when there is no path
    to compare against.
    """

    if ideal_path is None or not ideal_path.milestones:
        return None

    next_milestone = next((m for m in ideal_path.milestones if m.date >= today), None)
    if next_milestone is None:
        return DeviationReport(
            status="completed",
            message="Path completed or deadline passed",
            deviation_percentage=0.0,
        )

    current_progress = goal.progress_percentage or 0
    expected_progress = next_milestone.percentage
    deviation = current_progress - expected_progress

    if deviation >= 0:
        status = "ahead"
        message = f"You are {_format_pct(abs(deviation))} ahead of the ideal path"
    else:
        status = "behind"
        message = f"You are {_format_pct(abs(deviation))} behind the ideal path"

    return DeviationReport(
        status=status,
        message=message,
        deviation_percentage=deviation,
        current_progress=current_progress,
        expected_progress=expected_progress,
        next_milestone=next_milestone,
    )
