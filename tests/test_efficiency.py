from leverage_engine.efficiency import calculate_efficiency, classify_efficiency, round_half_up
from leverage_engine.schema import Activity


def make_activity(impact, duration, effort=5):
    return Activity(description="work", impact=impact, effort=effort, duration_minutes=duration)


def test_efficiency_formula_examples():
    assert calculate_efficiency(make_activity(8, 60)) == 16
    assert calculate_efficiency(make_activity(9, 30)) == 36
    assert calculate_efficiency(make_activity(7, 45)) == 18.67


def test_efficiency_fails_soft_on_missing_or_degenerate_inputs():
    assert calculate_efficiency(make_activity(0, 60)) == 0
    assert calculate_efficiency(make_activity(None, 60)) == 0
    assert calculate_efficiency(make_activity(8, None)) == 0
    assert calculate_efficiency(make_activity(8, 0)) == 0
    assert calculate_efficiency(make_activity(8, -30)) == 0
    assert calculate_efficiency(make_activity(float("nan"), 60)) == 0


def test_efficiency_monotonic_in_duration_and_impact():
    by_duration = [calculate_efficiency(make_activity(6, d)) for d in (15, 30, 45, 60, 120)]
    assert by_duration == sorted(by_duration, reverse=True)

    by_impact = [calculate_efficiency(make_activity(i, 40)) for i in range(1, 11)]
    assert by_impact == sorted(by_impact)


def test_tier_boundaries_are_inclusive():
    assert classify_efficiency(15).level == "excellent"
    assert classify_efficiency(14.99).level == "good"
    assert classify_efficiency(10).level == "good"
    assert classify_efficiency(9.99).level == "moderate"
    assert classify_efficiency(5).level == "moderate"
    assert classify_efficiency(4.99).level == "low"
    assert classify_efficiency(0).level == "low"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.125, 2) == 0.13
