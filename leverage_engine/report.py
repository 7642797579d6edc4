"""Efficiency and top-efficient reports assembled from the core functions."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Optional

from leverage_engine.config import Config
from leverage_engine.efficiency import round_half_up
from leverage_engine.patterns import generate_insights, identify_activity_patterns
from leverage_engine.ranking import create_ranking
from leverage_engine.schema import Activity, naive_utc
from leverage_engine.stats import compute_stats

TIMEFRAMES = ("day", "week", "month", "all")
TOP_ACTIVITY_WINDOW = 100


def _one_month_before(moment: datetime) -> datetime:
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def timeframe_start(timeframe: str, now: datetime) -> Optional[datetime]:
    """Return the earliest creation time included by ``timeframe`` (None = no bound)."""

    if timeframe == "day":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if timeframe == "week":
        return now - timedelta(days=7)
    if timeframe == "month":
        return _one_month_before(now)
    return None


def filter_by_timeframe(activities: list[Activity], timeframe: str, now: datetime) -> list[Activity]:
    start = timeframe_start(timeframe, naive_utc(now))
    if start is None:
        return list(activities)
    return [a for a in activities if a.created_at is not None and naive_utc(a.created_at) >= start]


def _is_scorable(activity: Activity) -> bool:
    return (activity.duration_minutes or 0) > 0 and (activity.impact or 0) > 0


def build_efficiency_report(
    activities: list[Activity],
    now: datetime,
    timeframe: str = "week",
    limit: Optional[int] = None,
    config: Optional[Config] = None,
) -> dict:
    """Ranking and stats for scorable activities inside ``timeframe``."""

    config = config or Config()
    limit = config.ranking_limit if limit is None else limit

    selected = [a for a in filter_by_timeframe(activities, timeframe, now) if _is_scorable(a)]
    return {
        "ranking": create_ranking(selected, limit),
        "stats": compute_stats(selected),
        "timeframe": timeframe,
        "total": len(selected),
    }


def build_top_efficient_report(
    activities: list[Activity],
    goal_id: Optional[str] = None,
    limit: Optional[int] = None,
    min_impact: Optional[float] = None,
    config: Optional[Config] = None,
) -> dict:
    """Best recent activities plus the patterns and insights they reveal."""

    config = config or Config()
    limit = config.ranking_limit if limit is None else limit
    min_impact = config.top_min_impact if min_impact is None else min_impact

    selected = [
        a
        for a in activities
        if (goal_id is None or a.goal_id == goal_id)
        and (a.duration_minutes or 0) > 0
        and (a.impact or 0) >= min_impact
    ]
    # Undated activities sort last.
    selected.sort(key=lambda a: (a.created_at is not None, naive_utc(a.created_at) or 0), reverse=True)
    selected = selected[:TOP_ACTIVITY_WINDOW]

    ranking = create_ranking(selected, limit)
    patterns = identify_activity_patterns(ranking)
    average = sum(entry.efficiency for entry in ranking) / len(ranking) if ranking else 0.0

    return {
        "top_activities": ranking,
        "patterns": patterns,
        "insights": generate_insights(ranking, patterns),
        "total": len(selected),
        "average_efficiency": round_half_up(average, 2),
    }
