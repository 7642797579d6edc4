"""Demo script for leverage-engine."""

import sys
from datetime import date, datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from leverage_engine.adapters.csv_adapter import parse
from leverage_engine.deviation import calculate_deviation
from leverage_engine.ideal_path import build_ideal_path, fallback_path_activities
from leverage_engine.milestones import expected_progress_today
from leverage_engine.recommendations import recommend_alternatives
from leverage_engine.report import build_efficiency_report
from leverage_engine.schema import Goal


def main() -> None:
    activities = parse("examples/sample_activities.csv")
    now = datetime(2025, 3, 31, 12)

    report = build_efficiency_report(activities, now, timeframe="all", limit=5)
    for entry in report["ranking"]:
        print(f"#{entry.rank} {entry.activity.description}: {entry.efficiency} ({entry.tier.label})")
    print("Stats:", report["stats"])

    triage = next(a for a in activities if a.id == "a3")
    recommendation = recommend_alternatives(triage, activities, now)
    print("Opportunity cost:", recommendation.message)

    today = date(2025, 3, 31)
    path = build_ideal_path(fallback_path_activities("Close seed round", date(2025, 3, 20)), created_at=now)
    print("Expected progress today:", expected_progress_today(path.milestones, today))
    goal = Goal(id="g1", title="Close seed round", progress_percentage=20, ideal_path=path)
    print("Deviation:", calculate_deviation(goal, goal.ideal_path, today))


if __name__ == "__main__":
    main()
