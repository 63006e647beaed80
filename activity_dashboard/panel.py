"""Per-source heatmap panel summaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Iterable

from activity_dashboard.aggregator import aggregate
from activity_dashboard.grid import build_grid
from activity_dashboard.schema import CalendarDayCell, EventRecord
from activity_dashboard.windows import period_label

PANEL_TITLES = {
    "github": "GitHub Contributions",
    "twitter": "Twitter Contributions",
    "reading": "Reading Days",
}

_UNITS = {
    "github": "contributions",
    "twitter": "contributions",
    "reading": "days read",
}


@dataclass
class PanelSummary:
    """Everything a renderer needs for one heatmap panel."""

    source: str
    window: str
    total: int
    cells: list[CalendarDayCell]
    period: str

    @property
    def title(self) -> str:
        return PANEL_TITLES[self.source]

    @property
    def headline(self) -> str:
        return f"{self.total} {_UNITS[self.source]} in the last {self.window}"


def summarize_panel(
    source: str,
    records: Iterable[EventRecord],
    window: str,
    now: date | datetime,
    tz: tzinfo | None = None,
) -> PanelSummary:
    """Compute the period total, day grid and label for one panel."""

    if source not in PANEL_TITLES:
        raise ValueError(f"Unknown source '{source}'")

    records = list(records)
    return PanelSummary(
        source=source,
        window=window,
        total=aggregate(records, window, now, tz),
        cells=build_grid(records, window, now, tz),
        period=period_label(window, now, tz),
    )
