"""Core data schema for dated activity records."""

from dataclasses import dataclass
from datetime import date
from typing import Literal

ViewWindow = Literal["week", "month", "year"]
Source = Literal["github", "twitter", "reading"]

VIEWS: tuple[str, ...] = ("week", "month", "year")
SOURCES: tuple[str, ...] = ("github", "twitter", "reading")


@dataclass(frozen=True)
class EventRecord:
    """Number of qualifying events on one calendar day."""

    date: date
    count: int


@dataclass(frozen=True)
class CalendarDayCell:
    """One day of a rendered heatmap."""

    date: date
    count: int
