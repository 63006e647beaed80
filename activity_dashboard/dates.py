"""Day-granularity normalization helpers."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timezone, tzinfo
from typing import Any, Iterable

from activity_dashboard.schema import EventRecord


class InvalidDateError(ValueError):
    """Raised when a value cannot be reduced to a calendar day."""


def _parse_text(value: str) -> date | datetime:
    text = value.strip()
    if not text:
        raise InvalidDateError("empty date string")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateError(f"unparseable date {value!r}") from exc


def normalize_day(value: Any, tz: tzinfo | None = None) -> date:
    """Reduce ``value`` to its calendar day.

    Aware datetimes are converted to ``tz`` first when it is given; naive
    datetimes and plain dates are truncated as they are.
    """

    if isinstance(value, str):
        value = _parse_text(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            value = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidDateError(f"timestamp out of range: {value!r}") from exc

    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidDateError(f"cannot interpret {value!r} as a date")


def coerce_count(raw: Any, where: str) -> int:
    """Validate a day count; ``where`` prefixes error messages (e.g. ``Row 2``)."""

    if isinstance(raw, str):
        text = raw.strip()
        try:
            raw = int(text)
        except ValueError as exc:
            raise ValueError(f"{where}: invalid count '{text}'") from exc
    if isinstance(raw, bool):
        raise ValueError(f"{where}: invalid count {raw!r}")
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    if not isinstance(raw, int):
        raise ValueError(f"{where}: invalid count {raw!r}")
    if raw < 0:
        raise ValueError(f"{where}: negative count {raw}")
    return raw


def preprocess_records(items: Iterable[Any], tz: tzinfo | None = None) -> list[EventRecord]:
    """Normalize mappings or records to day-granular ``EventRecord`` values."""

    records: list[EventRecord] = []
    for index, item in enumerate(items, start=1):
        if isinstance(item, EventRecord):
            raw_date, raw_count = item.date, item.count
        else:
            raw_date, raw_count = item["date"], item.get("count", 1)
        records.append(EventRecord(date=normalize_day(raw_date, tz), count=coerce_count(raw_count, f"Record {index}")))
    return records


def group_by_day(records: Iterable[EventRecord]) -> list[EventRecord]:
    """Merge same-day records by summing counts, newest day first."""

    totals: dict[date, int] = defaultdict(int)
    for record in records:
        totals[normalize_day(record.date)] += record.count
    return [EventRecord(date=day, count=count) for day, count in sorted(totals.items(), reverse=True)]
