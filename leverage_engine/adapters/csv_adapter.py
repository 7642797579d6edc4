"""CSV adapter for activity records."""

from __future__ import annotations

import csv
from datetime import datetime
from typing import Optional

from leverage_engine.schema import Activity, naive_utc

_NUMERIC_FIELDS = ("impact", "effort", "duration_minutes")


def _parse_number(raw: Optional[str], field: str, row_number: int) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid {field}") from exc


def _iso_text(raw: str) -> str:
    # fromisoformat only accepts a trailing "Z" from Python 3.11.
    return raw[:-1] + "+00:00" if raw.endswith("Z") else raw


def _parse_row(row: dict, row_number: int) -> Activity:
    description = (row.get("description") or "").strip()
    if not description:
        raise ValueError(f"Row {row_number}: missing required field 'description'")

    if not row.get("duration_minutes") and row.get("duration"):
        row = {**row, "duration_minutes": row["duration"]}
    values = {field: _parse_number(row.get(field), field, row_number) for field in _NUMERIC_FIELDS}

    created_raw = (row.get("created_at") or "").strip()
    created_at = None
    if created_raw:
        try:
            created_at = naive_utc(datetime.fromisoformat(_iso_text(created_raw)))
        except ValueError as exc:
            raise ValueError(f"Row {row_number}: malformed created_at") from exc

    return Activity(
        description=description,
        impact=values["impact"],
        effort=values["effort"],
        duration_minutes=values["duration_minutes"],
        created_at=created_at,
        id=(row.get("id") or "").strip() or None,
        goal_id=(row.get("goal_id") or "").strip() or None,
    )


def parse(file_path: str) -> list[Activity]:
    """Parse CSV file into a list of activities."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        activities: list[Activity] = []
        for row_number, row in enumerate(reader, start=2):
            activities.append(_parse_row(row, row_number))
        return activities
