from datetime import date

import pytest

from activity_dashboard.adapters.errors import FetchError
from activity_dashboard.config import Settings
from activity_dashboard.schema import EventRecord
from activity_dashboard.sources import load_source
from tests.fakes import FakeResponse, FakeSession
from tests.test_github_adapter import calendar_payload


def test_reading_source_counts_each_entry_once(tmp_path):
    path = tmp_path / "reading.csv"
    path.write_text("date\n2025-01-01\n2025-01-02\n", encoding="utf-8")
    records = load_source("reading", Settings(reading_log_path=path))
    assert records == [EventRecord(date(2025, 1, 1), 1), EventRecord(date(2025, 1, 2), 1)]


def test_reading_source_requires_path(tmp_path):
    with pytest.raises(FetchError):
        load_source("reading", Settings())
    with pytest.raises(FetchError, match="not found"):
        load_source("reading", Settings(reading_log_path=tmp_path / "missing.csv"))


def test_github_source_is_cached_per_day(tmp_path):
    settings = Settings(github_token="t", cache_dir=tmp_path)
    session = FakeSession(FakeResponse(calendar_payload()))
    clock = lambda: date(2025, 1, 5)  # noqa: E731

    first = load_source("github", settings, session=session, clock=clock)
    second = load_source("github", settings, session=session, clock=clock)

    assert first == second
    assert len(session.calls) == 1
    assert (tmp_path / "github_contributions.json").exists()


def test_twitter_source(tmp_path):
    settings = Settings(twitter_bearer_token="t", twitter_username="someone")
    session = FakeSession(
        FakeResponse({"data": {"id": "1"}}),
        FakeResponse({"data": [{"id": "9", "text": "hi", "created_at": "2025-01-05T10:00:00Z"}]}),
    )
    assert load_source("twitter", settings, session=session) == [EventRecord(date(2025, 1, 5), 1)]


def test_unknown_source():
    with pytest.raises(ValueError):
        load_source("mastodon", Settings())
