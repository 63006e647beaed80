"""Streamlit activity dashboard."""

from __future__ import annotations

import html
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from activity_dashboard.adapters.errors import FetchError
from activity_dashboard.config import ConfigError, Settings, configure_logging
from activity_dashboard.dates import InvalidDateError
from activity_dashboard.grid import EMPTY_SLOT, cell_tooltip, contribution_level, grid_matrix
from activity_dashboard.panel import PANEL_TITLES, PanelSummary, summarize_panel
from activity_dashboard.preferences import ViewPreferences
from activity_dashboard.refresh import RefreshSignal
from activity_dashboard.sources import load_source
from activity_dashboard.windows import next_view

logger = logging.getLogger(__name__)

PANELS = ["github", "twitter", "reading"]
DEFAULT_VIEWS = {"github": "year", "twitter": "week", "reading": "week"}

LEVEL_COLORS = {
    False: ["#ebedf0", "#bbf7d0", "#86efac", "#22c55e"],
    True: ["#1f2937", "#14532d", "#15803d", "#22c55e"],
}
CELL_SIZES = {"week": 48, "month": 32, "year": 17}


def render_heatmap_html(summary: PanelSummary, dark_mode: bool = False) -> str:
    """Render panel cells as an HTML grid of colored squares."""

    matrix = grid_matrix(summary.cells, summary.window)
    size = CELL_SIZES[summary.window]
    colors = LEVEL_COLORS[dark_mode]

    if summary.window == "year":
        # weekday rows, filled one week column at a time
        slots = matrix.T.ravel()
        layout = f"grid-auto-flow:column;grid-template-rows:repeat(7, {size}px);gap:2px"
    else:
        slots = matrix.ravel()
        layout = f"grid-template-columns:repeat(7, {size}px);gap:6px"

    cells = iter(summary.cells)
    parts = []
    for value in slots:
        if value == EMPTY_SLOT:
            parts.append(f'<div style="width:{size}px;height:{size}px"></div>')
            continue
        cell = next(cells)
        parts.append(
            f'<div title="{html.escape(cell_tooltip(cell))}" '
            f'style="width:{size}px;height:{size}px;border-radius:4px;'
            f'background:{colors[contribution_level(cell.count)]}"></div>'
        )
    return f'<div style="display:inline-grid;{layout}">' + "".join(parts) + "</div>"


def visible_panels(prefs: ViewPreferences) -> list[str]:
    return [source for source in PANELS if prefs.is_visible(source)]


def load_panel(source: str, settings: Settings, view: str, now: datetime) -> dict[str, Any]:
    """Load one source and summarize it, capturing errors for display."""

    try:
        records = load_source(source, settings)
    except (FetchError, ValueError) as exc:
        logger.warning("Could not load %s data: %s", source, exc)
        return {"summary": None, "error": str(exc)}

    try:
        summary = summarize_panel(source, records, view, now, settings.tzinfo)
    except InvalidDateError as exc:
        logger.warning("Invalid %s record: %s", source, exc)
        return {"summary": None, "error": f"Invalid date in {source} data: {exc}"}
    return {"summary": summary, "error": None}


def main() -> None:
    import streamlit as st

    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        st.error(f"Configuration error: {exc}")
        return
    configure_logging(settings.log_level)

    prefs_path = Path(settings.cache_dir) / "preferences.json"
    prefs = ViewPreferences.load(prefs_path)

    st.set_page_config(page_title="Activity Dashboard", layout="wide")

    if "refresh" not in st.session_state:
        st.session_state.refresh = RefreshSignal()
        st.session_state.refresh.subscribe(st.cache_data.clear)
        st.session_state.refresh.subscribe(lambda: (settings.cache_dir / "github_contributions.json").unlink(missing_ok=True))

    @st.cache_data(ttl=3600, show_spinner=False)
    def cached_panel(source: str, view: str, day: str) -> dict[str, Any]:
        return load_panel(source, settings, view, datetime.now(settings.tzinfo))

    with st.sidebar:
        st.header("Settings")
        dark_mode = st.toggle("Dark mode", value=prefs.dark_mode)
        if dark_mode != prefs.dark_mode:
            prefs.dark_mode = dark_mode
            prefs.save(prefs_path)
        if st.button("Reload data"):
            ran = st.session_state.refresh.trigger()
            logger.info("Reload requested, %d subscribers notified", ran)

        st.subheader("Panels")
        for source in PANELS:
            shown = st.checkbox(f"Show {PANEL_TITLES[source]}", value=prefs.is_visible(source), key=f"show-{source}")
            if shown != prefs.is_visible(source):
                prefs.set_visible(source, shown)
                prefs.save(prefs_path)

        st.subheader("Music")
        music_url = st.text_input("Music URL", value=prefs.music_url or "").strip() or None
        if music_url != prefs.music_url:
            prefs.music_url = music_url
            prefs.save(prefs_path)
        track = prefs.resolve_music_url(settings.music_url)
        if track:
            st.audio(track)

    st.title("Activity Dashboard")
    today = datetime.now(settings.tzinfo).date().isoformat()

    for source in visible_panels(prefs):
        view = prefs.view_for(source, DEFAULT_VIEWS[source])
        result = cached_panel(source, view, today)

        header, toggle = st.columns([4, 1])
        summary = result["summary"]
        if toggle.button(view.capitalize(), key=f"view-{source}"):
            prefs.set_view(source, next_view(view))
            prefs.save(prefs_path)
            st.rerun()

        if summary is None:
            header.subheader(source.capitalize())
            st.error(f"Error loading {source} data: {result['error']}")
            continue

        header.subheader(summary.title)
        header.caption(summary.headline)
        st.markdown(render_heatmap_html(summary, dark_mode), unsafe_allow_html=True)
        st.caption(f"Contributions from {summary.period}")


if __name__ == "__main__":
    main()
