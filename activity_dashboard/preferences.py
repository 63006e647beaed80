"""Persisted dashboard preferences (views, panel visibility, dark mode, music)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from activity_dashboard.schema import VIEWS

logger = logging.getLogger(__name__)


@dataclass
class ViewPreferences:
    views: dict[str, str] = field(default_factory=dict)
    visible: dict[str, bool] = field(default_factory=dict)
    dark_mode: bool = False
    music_url: str | None = None

    @classmethod
    def load(cls, path: str | Path) -> ViewPreferences:
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except ValueError as exc:
            logger.warning("Ignoring unreadable preferences file %s: %s", path, exc)
            return cls()
        if not isinstance(payload, dict):
            return cls()

        views = payload.get("views") or {}
        visible = payload.get("visible") or {}
        music_url = payload.get("music_url")
        return cls(
            views={str(k): str(v) for k, v in views.items()} if isinstance(views, dict) else {},
            visible={str(k): bool(v) for k, v in visible.items()} if isinstance(visible, dict) else {},
            dark_mode=bool(payload.get("dark_mode", False)),
            music_url=str(music_url).strip() if music_url else None,
        )

    def view_for(self, panel: str, default: str = "week") -> str:
        view = self.views.get(panel, default)
        return view if view in VIEWS else default

    def set_view(self, panel: str, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view window '{view}'")
        self.views[panel] = view

    def is_visible(self, panel: str) -> bool:
        """Panels are shown unless explicitly hidden."""

        return self.visible.get(panel, True)

    def set_visible(self, panel: str, shown: bool) -> None:
        self.visible[panel] = bool(shown)

    def resolve_music_url(self, fallback: str | None = None) -> str | None:
        """The saved URL wins over ``fallback`` (usually DASHBOARD_MUSIC_URL)."""

        return self.music_url or fallback or None

    def save(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "views": self.views,
            "visible": self.visible,
            "dark_mode": self.dark_mode,
            "music_url": self.music_url,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
