"""Day-scoped cache for fetched record lists."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable

from activity_dashboard.schema import EventRecord

logger = logging.getLogger(__name__)


@dataclass
class CachedDayList:
    """Records together with the day they were fetched on."""

    data: list[EventRecord]
    fetched_on: date


class DayListCache:
    """JSON file cache that stays valid until the clock's date changes."""

    def __init__(self, path: str | Path, clock: Callable[[], date] = date.today) -> None:
        self.path = Path(path)
        self.clock = clock

    def load(self) -> CachedDayList | None:
        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return CachedDayList(
                data=[
                    EventRecord(date=date.fromisoformat(item["date"]), count=int(item["count"]))
                    for item in payload["data"]
                ],
                fetched_on=date.fromisoformat(payload["fetched_on"]),
            )
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable cache file %s: %s", self.path, exc)
            return None

    def store(self, records: list[EventRecord]) -> CachedDayList:
        entry = CachedDayList(data=list(records), fetched_on=self.clock())
        payload = {
            "fetched_on": entry.fetched_on.isoformat(),
            "data": [{"date": r.date.isoformat(), "count": r.count} for r in entry.data],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload), encoding="utf-8")
        return entry

    def is_fresh(self, entry: CachedDayList | None) -> bool:
        return entry is not None and entry.fetched_on == self.clock()

    def get_or_fetch(self, fetch: Callable[[], list[EventRecord]]) -> list[EventRecord]:
        """Return today's cached records, calling ``fetch`` on a miss."""

        entry = self.load()
        if self.is_fresh(entry):
            logger.debug("Cache hit for %s", self.path)
            return entry.data

        logger.info("Cache miss for %s, fetching", self.path)
        return self.store(fetch()).data

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
