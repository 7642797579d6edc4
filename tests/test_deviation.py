from datetime import date

from leverage_engine.deviation import calculate_deviation
from leverage_engine.schema import Goal, IdealPath, Milestone


def sample_path():
    return IdealPath(
        milestones=[
            Milestone(percentage=50, date=date(2025, 2, 1), description="half"),
            Milestone(percentage=100, date=date(2025, 3, 1), description="done"),
        ]
    )


def test_behind_next_milestone():
    goal = Goal(id="g1", title="Launch", progress_percentage=40)
    report = calculate_deviation(goal, sample_path(), date(2025, 1, 15))
    assert report.status == "behind"
    assert report.deviation_percentage == -10
    assert report.expected_progress == 50
    assert report.next_milestone.description == "half"
    assert "10% behind" in report.message


def test_ahead_uses_next_milestone_not_interpolation():
    goal = Goal(id="g1", title="Launch", progress_percentage=60)
    report = calculate_deviation(goal, sample_path(), date(2025, 2, 2))
    assert report.status == "behind"
    assert report.expected_progress == 100

    report = calculate_deviation(goal, sample_path(), date(2025, 2, 1))
    assert report.status == "ahead"
    assert report.deviation_percentage == 10


def test_completed_when_all_milestones_passed():
    goal = Goal(id="g1", title="Launch", progress_percentage=80)
    report = calculate_deviation(goal, sample_path(), date(2025, 4, 1))
    assert report.status == "completed"
    assert report.deviation_percentage == 0
    assert report.next_milestone is None


def test_no_path_returns_none():
    goal = Goal(id="g1", title="Launch")
    assert calculate_deviation(goal, None, date(2025, 1, 1)) is None
    assert calculate_deviation(goal, IdealPath(milestones=[]), date(2025, 1, 1)) is None
