"""CSV adapter for dated count records."""

from __future__ import annotations

import csv

from activity_dashboard.dates import InvalidDateError, coerce_count, normalize_day
from activity_dashboard.schema import EventRecord


def _parse_row(row: dict, row_number: int, default_count: int | None) -> EventRecord:
    if not row.get("date"):
        raise ValueError(f"Row {row_number}: missing required field 'date'")

    try:
        day = normalize_day(row["date"])
    except InvalidDateError as exc:
        raise ValueError(f"Row {row_number}: malformed date") from exc

    count_raw = (row.get("count") or "").strip()
    if not count_raw:
        if default_count is None:
            raise ValueError(f"Row {row_number}: missing required field 'count'")
        return EventRecord(date=day, count=default_count)

    return EventRecord(date=day, count=coerce_count(count_raw, f"Row {row_number}"))


def parse(file_path: str, default_count: int | None = None) -> list[EventRecord]:
    """Parse a CSV file with ``date`` and optional ``count`` columns."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        records: list[EventRecord] = []
        for row_number, row in enumerate(reader, start=2):
            records.append(_parse_row(row, row_number, default_count))
        return records
