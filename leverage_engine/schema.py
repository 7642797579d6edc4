"""Core data schema for activities, goals and ideal paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Optional


def naive_utc(moment: Optional[datetime]) -> Optional[datetime]:
    """Convert offset-aware timestamps to naive UTC; naive ones are returned unchanged."""

    if moment is None or moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass
class Activity:
    """Activity record supplied by the caller.

    Impact and effort are expected on a 1-10 scale; ranges are not checked here.
    """

    description: str
    impact: Optional[float]
    effort: Optional[float]
    duration_minutes: Optional[float]
    created_at: Optional[datetime] = None
    id: Optional[str] = None
    goal_id: Optional[str] = None


@dataclass(frozen=True)
class EfficiencyTier:
    level: str
    label: str
    color: str
    description: str


@dataclass
class ScoredActivity:
    """Activity plus its efficiency score, tier and (when ranked) position."""

    activity: Activity
    efficiency: float
    tier: EfficiencyTier
    rank: Optional[int] = None


@dataclass
class Alternative:
    title: str
    impact: Optional[float]
    effort: Optional[float]
    duration: Optional[float]
    efficiency: float
    improvement_potential: float
    reasoning: str


@dataclass
class OpportunityCostReport:
    current_efficiency: float
    alternatives: list[Alternative] = field(default_factory=list)
    opportunity_cost: float = 0.0
    has_opportunity_cost: bool = False
    metrics: Optional[dict[str, float]] = None


@dataclass
class Milestone:
    percentage: float
    date: date
    description: str = ""
    activity_id: Optional[str] = None


@dataclass
class PathActivity:
    """Planned step on an ideal path."""

    id: str
    title: str
    deadline: date
    order: int
    description: str = ""
    impact: Optional[float] = None
    effort: Optional[float] = None
    estimated_duration: Optional[float] = None
    status: str = "pending"


@dataclass
class IdealPath:
    milestones: list[Milestone]
    activities: list[PathActivity] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Goal:
    id: str
    title: str
    progress_percentage: float = 0.0
    ideal_path: Optional[IdealPath] = None


@dataclass
class DeviationReport:
    status: str
    message: str
    deviation_percentage: float
    current_progress: Optional[float] = None
    expected_progress: Optional[float] = None
    next_milestone: Optional[Milestone] = None
