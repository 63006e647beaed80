"""Twitter/X v2 client turning a user's posts into per-day counts."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Any

import requests

from activity_dashboard.adapters.errors import FetchError
from activity_dashboard.dates import InvalidDateError, group_by_day, normalize_day
from activity_dashboard.schema import EventRecord
from activity_dashboard.windows import subtract_years

logger = logging.getLogger(__name__)

API_BASE = "https://api.twitter.com/2"


def _get(http: requests.Session, url: str, bearer_token: str, timeout: float, params: dict | None = None) -> dict:
    try:
        response = http.get(
            url,
            headers={"Authorization": f"Bearer {bearer_token}"},
            params=params,
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        logger.error("Twitter request to %s failed: %s", url, exc)
        raise FetchError("Failed to fetch tweets") from exc
    except ValueError as exc:
        raise FetchError("Twitter returned a non-JSON response") from exc


def fetch_user_tweets(
    username: str,
    bearer_token: str,
    session: requests.Session | None = None,
    timeout: float = 10,
    max_results: int = 100,
    since: date | None = None,
) -> list[dict[str, Any]]:
    """Return the user's posts, each with ``id``, ``text`` and ``created_at``.

    Timeline pages are followed through ``meta.next_token`` until the API
    has no further page or a page reaches back before ``since`` (default
    one year ago, the longest view window).
    """

    if not bearer_token:
        raise FetchError("TWITTER_BEARER_TOKEN is not set")
    if not username:
        raise FetchError("TWITTER_USERNAME is not set")

    if since is None:
        since = subtract_years(datetime.now(timezone.utc).date(), 1)

    http = session or requests.Session()
    user = _get(http, f"{API_BASE}/users/by/username/{username}", bearer_token, timeout)
    try:
        user_id = user["data"]["id"]
    except (KeyError, TypeError) as exc:
        raise FetchError(f"Twitter user '{username}' not found") from exc

    tweets: list[dict[str, Any]] = []
    params: dict[str, Any] = {"tweet.fields": "created_at", "max_results": max_results}
    pages = 0
    while True:
        payload = _get(http, f"{API_BASE}/users/{user_id}/tweets", bearer_token, timeout, params=dict(params))
        pages += 1
        page = payload.get("data", [])
        if not isinstance(page, list):
            raise FetchError("Unexpected Twitter response: 'data' is not a list")
        tweets.extend(page)

        next_token = (payload.get("meta") or {}).get("next_token")
        if not page or not next_token:
            break
        stamps = [normalize_day(tweet["created_at"]) for tweet in page if "created_at" in tweet]
        if stamps and min(stamps) < since:
            break
        params["pagination_token"] = next_token

    logger.info("Fetched %d tweets for %s over %d page(s)", len(tweets), username, pages)
    return tweets


def tweets_to_records(tweets: list[dict[str, Any]], tz: tzinfo | None = None) -> list[EventRecord]:
    """Count posts per calendar day in ``tz``, newest day first."""

    records = []
    for tweet in tweets:
        try:
            day = normalize_day(tweet["created_at"], tz)
        except KeyError as exc:
            raise InvalidDateError(f"tweet {tweet.get('id')!r} has no created_at") from exc
        records.append(EventRecord(date=day, count=1))
    return group_by_day(records)
