from leverage_engine.patterns import generate_insights, identify_activity_patterns
from leverage_engine.ranking import create_ranking
from leverage_engine.schema import Activity


def test_identify_patterns_buckets():
    ranking = create_ranking(
        [
            Activity("Investor pitch", impact=9, effort=3, duration_minutes=30, id="p"),
            Activity("Weekly review", impact=7, effort=5, duration_minutes=60, id="r"),
            Activity("Slow report", impact=7, effort=8, duration_minutes=120, id="s"),
        ]
    )
    patterns = identify_activity_patterns(ranking)

    assert [item["id"] for item in patterns["high_impact_low_effort"]] == ["p"]
    assert [item["id"] for item in patterns["quick_wins"]] == ["p"]
    assert [item["id"] for item in patterns["strategic_moves"]] == ["p"]
    assert [item["id"] for item in patterns["repeatable"]] == ["r"]


def test_insights_for_consistent_q1_activities():
    ranking = create_ranking(
        [Activity(f"Client call {i}", impact=9, effort=2, duration_minutes=30, id=str(i)) for i in range(5)]
    )
    patterns = identify_activity_patterns(ranking)
    insights = generate_insights(ranking, patterns)
    types = [insight["type"] for insight in insights]

    assert types == ["opportunity", "strategy", "impact", "habit", "performance"]
    assert "36.0" in insights[2]["description"]
    assert len(insights[3]["suggestions"]) == 3


def test_insights_empty_ranking():
    patterns = identify_activity_patterns([])
    assert generate_insights([], patterns) == []
