import json

import pytest

from leverage_engine.adapters.csv_adapter import parse as parse_csv
from leverage_engine.adapters.json_adapter import parse as parse_json
from leverage_engine.adapters.json_adapter import parse_milestones


def test_csv_parse_success(tmp_path):
    path = tmp_path / "activities.csv"
    path.write_text(
        "id,description,impact,effort,duration_minutes,created_at,goal_id\n"
        "a,Sales call,8,3,60,2025-01-01T09:00:00,g1\n"
        "b,Inbox zero,2,6,,2025-01-01T10:00:00,\n",
        encoding="utf-8",
    )
    activities = parse_csv(str(path))
    assert len(activities) == 2
    assert activities[0].impact == 8
    assert activities[0].goal_id == "g1"
    assert activities[1].duration_minutes is None
    assert activities[1].goal_id is None


def test_csv_duration_alias(tmp_path):
    path = tmp_path / "activities.csv"
    path.write_text("description,impact,effort,duration\nWrite spec,7,4,45\n", encoding="utf-8")
    assert parse_csv(str(path))[0].duration_minutes == 45


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "activities.csv"
    path.write_text("description,impact,effort,duration_minutes\nWork,high,3,30\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_csv(str(path))


def test_json_parse_success(tmp_path):
    path = tmp_path / "activities.json"
    payload = [
        {"id": 1, "description": "Sales call", "impact": 8, "effort": 3, "duration": 30},
        {"description": "Planning", "impact": 6, "effort": 4, "duration_minutes": 60, "created_at": "2025-01-01"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    activities = parse_json(str(path))
    assert len(activities) == 2
    assert activities[0].id == "1"
    assert activities[0].duration_minutes == 30
    assert activities[1].created_at.year == 2025


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "activities.json"
    path.write_text(json.dumps([{"description": "x", "created_at": "bad"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))

    path.write_text(json.dumps({"description": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_parse_milestones(tmp_path):
    path = tmp_path / "milestones.json"
    payload = [
        {"percentage": 50, "date": "2025-02-01", "description": "half", "activityId": "a1"},
        {"percentage": 100, "date": "2025-03-01T00:00:00Z"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    milestones = parse_milestones(str(path))
    assert milestones[0].activity_id == "a1"
    assert milestones[1].date.month == 3

    path.write_text(json.dumps([{"percentage": 10, "date": "soon"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_milestones(str(path))


def test_json_offset_timestamps_become_naive_utc(tmp_path):
    path = tmp_path / "activities.json"
    payload = [{"description": "Sync", "impact": 5, "effort": 3, "duration": 30, "created_at": "2025-01-01T09:30:00Z"}]
    path.write_text(json.dumps(payload), encoding="utf-8")
    activity = parse_json(str(path))[0]
    assert activity.created_at.tzinfo is None
    assert activity.created_at.hour == 9
