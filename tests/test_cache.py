from datetime import date

from activity_dashboard.cache import DayListCache
from activity_dashboard.schema import EventRecord


class Clock:
    def __init__(self, today):
        self.today = today

    def __call__(self):
        return self.today


def test_get_or_fetch_uses_cache_until_day_changes(tmp_path):
    clock = Clock(date(2025, 1, 5))
    cache = DayListCache(tmp_path / "github.json", clock=clock)
    calls = []

    def fetch():
        calls.append(clock.today)
        return [EventRecord(clock.today, len(calls))]

    assert cache.get_or_fetch(fetch) == [EventRecord(date(2025, 1, 5), 1)]
    assert cache.get_or_fetch(fetch) == [EventRecord(date(2025, 1, 5), 1)]
    assert len(calls) == 1

    clock.today = date(2025, 1, 6)
    assert cache.get_or_fetch(fetch) == [EventRecord(date(2025, 1, 6), 2)]
    assert len(calls) == 2


def test_store_and_load_round_trip(tmp_path):
    cache = DayListCache(tmp_path / "nested" / "cache.json", clock=lambda: date(2025, 1, 5))
    cache.store([EventRecord(date(2025, 1, 4), 3)])
    entry = cache.load()
    assert entry.fetched_on == date(2025, 1, 5)
    assert entry.data == [EventRecord(date(2025, 1, 4), 3)]
    assert cache.is_fresh(entry)


def test_missing_and_corrupt_files_are_misses(tmp_path):
    path = tmp_path / "cache.json"
    cache = DayListCache(path, clock=lambda: date(2025, 1, 5))
    assert cache.load() is None
    assert not cache.is_fresh(None)

    path.write_text("{not json", encoding="utf-8")
    assert cache.load() is None
    assert cache.get_or_fetch(lambda: []) == []


def test_clear(tmp_path):
    cache = DayListCache(tmp_path / "cache.json", clock=lambda: date(2025, 1, 5))
    cache.store([])
    cache.clear()
    assert cache.load() is None
    cache.clear()
