"""Load records for each dashboard source."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable

import requests

from activity_dashboard.adapters import csv_adapter, github_adapter, json_adapter, twitter_adapter
from activity_dashboard.adapters.errors import FetchError
from activity_dashboard.cache import DayListCache
from activity_dashboard.config import Settings
from activity_dashboard.schema import EventRecord

logger = logging.getLogger(__name__)


def load_records_file(path: str | Path, default_count: int | None = None) -> list[EventRecord]:
    """Parse a ``.csv`` or ``.json`` record file."""

    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path), default_count=default_count)
    if suffix == ".json":
        return json_adapter.parse(str(path), default_count=default_count)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def load_source(
    source: str,
    settings: Settings,
    session: requests.Session | None = None,
    clock: Callable[[], date] = date.today,
) -> list[EventRecord]:
    """Return the records for ``source`` using the configured credentials.

    GitHub calendars are cached per day under ``settings.cache_dir``.
    Reading log entries count one each.
    """

    if source == "github":
        cache = DayListCache(settings.cache_dir / "github_contributions.json", clock=clock)
        return cache.get_or_fetch(lambda: github_adapter.fetch_contributions(settings.github_token or "", session=session))

    if source == "twitter":
        tweets = twitter_adapter.fetch_user_tweets(
            settings.twitter_username or "",
            settings.twitter_bearer_token or "",
            session=session,
        )
        return twitter_adapter.tweets_to_records(tweets, settings.tzinfo)

    if source == "reading":
        if settings.reading_log_path is None:
            raise FetchError("READING_LOG_PATH is not set")
        if not settings.reading_log_path.exists():
            raise FetchError(f"Reading log not found: {settings.reading_log_path}")
        records = load_records_file(settings.reading_log_path, default_count=1)
        logger.info("Loaded %d reading entries from %s", len(records), settings.reading_log_path)
        return records

    raise ValueError(f"Unknown source '{source}'")
