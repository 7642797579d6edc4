"""JSON adapter for activity records and milestone lists."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Optional

from leverage_engine.schema import Activity, Milestone, naive_utc


def _parse_number(raw: Any, field: str, index: int) -> Optional[float]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValueError(f"Item {index}: invalid {field}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: invalid {field}") from exc


def _optional_str(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def _iso_text(raw: str) -> str:
    # fromisoformat only accepts a trailing "Z" from Python 3.11.
    return raw[:-1] + "+00:00" if raw.endswith("Z") else raw


def activity_from_dict(item: dict, index: int = 1) -> Activity:
    """Build an activity from a JSON object, accepting ``duration`` as an alias."""

    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    description = str(item.get("description") or "").strip()
    if not description:
        raise ValueError(f"Item {index}: missing required field 'description'")

    duration_raw = item.get("duration_minutes") or item.get("duration")

    created_raw = item.get("created_at")
    created_at = None
    if created_raw:
        try:
            created_at = naive_utc(datetime.fromisoformat(_iso_text(str(created_raw))))
        except ValueError as exc:
            raise ValueError(f"Item {index}: malformed created_at") from exc

    return Activity(
        description=description,
        impact=_parse_number(item.get("impact"), "impact", index),
        effort=_parse_number(item.get("effort"), "effort", index),
        duration_minutes=_parse_number(duration_raw, "duration_minutes", index),
        created_at=created_at,
        id=_optional_str(item.get("id")),
        goal_id=_optional_str(item.get("goal_id")),
    )


def milestone_from_dict(item: dict, index: int = 1) -> Milestone:
    if not isinstance(item, dict):
        raise ValueError(f"Milestone {index}: expected an object")

    percentage = _parse_number(item.get("percentage"), "percentage", index)
    if percentage is None:
        raise ValueError(f"Milestone {index}: missing required field 'percentage'")

    try:
        milestone_date = date.fromisoformat(str(item.get("date"))[:10])
    except ValueError as exc:
        raise ValueError(f"Milestone {index}: malformed date") from exc

    return Milestone(
        percentage=percentage,
        date=milestone_date,
        description=str(item.get("description") or ""),
        activity_id=_optional_str(item.get("activity_id", item.get("activityId"))),
    )


def _load_list(file_path: str) -> list:
    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")
    return payload


def parse(file_path: str) -> list[Activity]:
    """Parse JSON file into activities."""

    return [activity_from_dict(item, i) for i, item in enumerate(_load_list(file_path), start=1)]


def parse_milestones(file_path: str) -> list[Milestone]:
    """Parse JSON file into milestones."""

    return [milestone_from_dict(item, i) for i, item in enumerate(_load_list(file_path), start=1)]
