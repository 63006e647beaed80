"""JSON adapter for dated count records."""

from __future__ import annotations

import json

from activity_dashboard.dates import InvalidDateError, coerce_count, normalize_day
from activity_dashboard.schema import EventRecord


def _parse_item(item: dict, index: int, default_count: int | None) -> EventRecord:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")
    if not item.get("date"):
        raise ValueError(f"Item {index}: missing required field 'date'")

    try:
        day = normalize_day(item["date"])
    except InvalidDateError as exc:
        raise ValueError(f"Item {index}: malformed date") from exc

    count_raw = item.get("count", default_count)
    if count_raw is None:
        raise ValueError(f"Item {index}: missing required field 'count'")
    return EventRecord(date=day, count=coerce_count(count_raw, f"Item {index}"))


def parse(file_path: str, default_count: int | None = None) -> list[EventRecord]:
    """Parse a JSON list of ``{"date": ..., "count": ...}`` objects."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i, default_count) for i, item in enumerate(payload, start=1)]
