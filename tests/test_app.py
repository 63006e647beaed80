from datetime import date, datetime

from activity_dashboard.config import Settings
from activity_dashboard.panel import summarize_panel
from activity_dashboard.preferences import ViewPreferences
from activity_dashboard.schema import EventRecord
from ui_streamlit.app import load_panel, render_heatmap_html, visible_panels


def test_render_heatmap_week():
    summary = summarize_panel("github", [EventRecord(date(2024, 1, 5), 12)], "week", date(2024, 1, 5))
    markup = render_heatmap_html(summary)
    assert markup.count("title=") == 8
    assert "12 contributions on Jan 5" in markup
    assert "grid-template-columns:repeat(7, 48px)" in markup


def test_render_heatmap_year_dark_mode():
    summary = summarize_panel("github", [], "year", date(2024, 1, 6))
    markup = render_heatmap_html(summary, dark_mode=True)
    assert markup.count("title=") == len(summary.cells)
    assert "grid-auto-flow:column" in markup
    assert "#1f2937" in markup


def test_load_panel_reports_errors_instead_of_raising():
    result = load_panel("reading", Settings(), "week", datetime(2024, 1, 5, 12, 0))
    assert result["summary"] is None
    assert "READING_LOG_PATH" in result["error"]


def test_load_panel_success(tmp_path):
    path = tmp_path / "reading.csv"
    path.write_text("date\n2024-01-04\n", encoding="utf-8")
    result = load_panel("reading", Settings(reading_log_path=path), "week", datetime(2024, 1, 5, 12, 0))
    assert result["error"] is None
    assert result["summary"].headline == "1 days read in the last week"


def test_hidden_panels_are_skipped():
    prefs = ViewPreferences()
    assert visible_panels(prefs) == ["github", "twitter", "reading"]

    prefs.set_visible("github", False)
    assert visible_panels(prefs) == ["twitter", "reading"]
