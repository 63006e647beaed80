"""GitHub contribution calendar client (GraphQL API)."""

from __future__ import annotations

import logging
from typing import Any

import requests

from activity_dashboard.adapters.errors import FetchError
from activity_dashboard.dates import normalize_day
from activity_dashboard.schema import EventRecord

logger = logging.getLogger(__name__)

GRAPHQL_URL = "https://api.github.com/graphql"

_CALENDAR_QUERY = """
query {
  viewer {
    contributionsCollection {
      contributionCalendar {
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }
    }
  }
}
"""


def build_query() -> dict[str, Any]:
    return {"query": _CALENDAR_QUERY}


def parse_calendar(payload: dict) -> list[EventRecord]:
    """Flatten a contribution calendar response into one record per day.

    GitHub reports calendar days as UTC dates, which are kept unchanged.
    """

    if payload.get("errors"):
        messages = "; ".join(str(err.get("message", err)) for err in payload["errors"])
        raise FetchError(f"GitHub GraphQL error: {messages}")

    try:
        weeks = payload["data"]["viewer"]["contributionsCollection"]["contributionCalendar"]["weeks"]
    except (KeyError, TypeError) as exc:
        raise FetchError("Unexpected GitHub response: contribution calendar missing") from exc

    records: list[EventRecord] = []
    for week in weeks:
        for day in week.get("contributionDays", []):
            try:
                records.append(EventRecord(date=normalize_day(day["date"]), count=int(day["contributionCount"])))
            except (KeyError, ValueError) as exc:
                raise FetchError(f"Unexpected GitHub contribution day: {day!r}") from exc
    return records


def fetch_contributions(
    token: str,
    session: requests.Session | None = None,
    timeout: float = 10,
) -> list[EventRecord]:
    """Fetch the authenticated user's contribution calendar."""

    if not token:
        raise FetchError("GITHUB_TOKEN is not set")

    http = session or requests.Session()
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }
    try:
        response = http.post(GRAPHQL_URL, json=build_query(), headers=headers, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        logger.error("GitHub contributions request failed: %s", exc)
        raise FetchError("Failed to fetch GitHub contributions") from exc
    except ValueError as exc:
        raise FetchError("GitHub returned a non-JSON response") from exc

    records = parse_calendar(payload)
    logger.info("Fetched %d GitHub contribution days", len(records))
    return records
