from datetime import date

from leverage_engine.milestones import expected_progress_today, generate_milestones
from leverage_engine.schema import Milestone, PathActivity


def sample_milestones():
    # Deliberately out of order.
    return [
        Milestone(percentage=100, date=date(2025, 3, 31), description="done"),
        Milestone(percentage=25, date=date(2025, 1, 31), description="start"),
        Milestone(percentage=50, date=date(2025, 2, 10), description="half"),
    ]


def test_expected_progress_on_milestone_date():
    assert expected_progress_today(sample_milestones(), date(2025, 2, 10)) == 50


def test_expected_progress_interpolates_and_rounds():
    # 4 of 10 days between 25% and 50%.
    assert expected_progress_today(sample_milestones(), date(2025, 2, 4)) == 35
    # 1 of 10 days: 27.5 rounds up.
    assert expected_progress_today(sample_milestones(), date(2025, 2, 1)) == 28


def test_expected_progress_outside_path():
    assert expected_progress_today(sample_milestones(), date(2024, 12, 1)) == 0
    assert expected_progress_today(sample_milestones(), date(2025, 5, 1)) == 100
    assert expected_progress_today([], date(2025, 5, 1)) == 0


def test_expected_progress_same_day_milestones():
    milestones = [
        Milestone(percentage=40, date=date(2025, 1, 10)),
        Milestone(percentage=60, date=date(2025, 1, 10)),
    ]
    assert expected_progress_today(milestones, date(2025, 1, 10)) == 40


def test_generate_milestones_splits_evenly():
    steps = [
        PathActivity(id=f"s{i}", title=f"Step {i}", deadline=date(2025, 1, i * 7), order=i) for i in (1, 2, 3)
    ]
    milestones = generate_milestones(steps)
    assert [m.percentage for m in milestones] == [33, 67, 100]
    assert milestones[0].description == "Step 1 completed"
    assert milestones[2].activity_id == "s3"
    assert milestones[1].date == date(2025, 1, 14)
    assert generate_milestones([]) == []
