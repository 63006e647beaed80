"""Dashboard settings loaded from the environment or a .env file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised when a setting is missing or invalid."""


@dataclass
class Settings:
    """Dashboard configuration.

    API tokens are optional: a panel whose credentials are missing shows an
    error state instead of data.
    """

    github_token: str | None = None
    twitter_bearer_token: str | None = None
    twitter_username: str | None = None
    reading_log_path: Path | None = None
    timezone: str = "UTC"
    cache_dir: Path = Path(".cache")
    log_level: str = "INFO"
    music_url: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.reading_log_path, str):
            self.reading_log_path = Path(self.reading_log_path)
        if isinstance(self.cache_dir, str):
            self.cache_dir = Path(self.cache_dir)

        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"DASHBOARD_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got '{self.log_level}'")

        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigError(f"DASHBOARD_TIMEZONE '{self.timezone}' is not a known timezone") from exc

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls, env_file: Path | str | None = None) -> Settings:
        """Load settings, reading ``env_file`` (default ``.env``) when it exists."""

        env_path = Path(env_file) if env_file is not None else Path(".env")
        if env_path.exists():
            load_dotenv(env_path)

        reading_log = os.environ.get("READING_LOG_PATH")
        return cls(
            github_token=os.environ.get("GITHUB_TOKEN") or None,
            twitter_bearer_token=os.environ.get("TWITTER_BEARER_TOKEN") or None,
            twitter_username=os.environ.get("TWITTER_USERNAME") or None,
            reading_log_path=Path(reading_log) if reading_log else None,
            timezone=os.environ.get("DASHBOARD_TIMEZONE", "UTC"),
            cache_dir=Path(os.environ.get("DASHBOARD_CACHE_DIR", ".cache")),
            log_level=os.environ.get("DASHBOARD_LOG_LEVEL", "INFO"),
            music_url=os.environ.get("DASHBOARD_MUSIC_URL") or None,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
