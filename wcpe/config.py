from datetime import timedelta
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import codecs
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Lookup settings loaded from WCPE_* environment variables.

    Validates configuration at startup to catch misconfiguration early.
    """

    station_timezone: str = "America/New_York"
    playlist_layout: Literal["daily", "weekly"] = "daily"
    availability_window_days: int = 7  # Station publishes one trailing week
    fetch_timeout_sec: float = 30.0
    fallback_encoding: str = "windows-1252"  # Legacy pages are not UTF-8
    user_agent: str = "wcpe/0.2.0 (+https://theclassicalstation.org)"
    cache_dir: str = "~/.cache/wcpe"
    cache_enabled: bool = True
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="wcpe_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("station_timezone")
    @classmethod
    def validate_station_timezone(cls, value: str) -> str:
        """Validate the station timezone is a known IANA name."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Invalid station timezone '{value}'") from exc
        return value

    @field_validator("availability_window_days")
    @classmethod
    def validate_window(cls, value: int) -> int:
        """Validate the availability window is positive and reasonable."""
        if value <= 0:
            raise ValueError("availability_window_days must be > 0")
        if value > 31:
            raise ValueError("availability_window_days must be <= 31 days")
        return value

    @field_validator("fetch_timeout_sec")
    @classmethod
    def validate_fetch_timeout(cls, value: float) -> float:
        """Validate page fetch timeout (seconds)."""
        if value <= 0:
            raise ValueError("fetch_timeout_sec must be > 0")
        return value

    @field_validator("fallback_encoding")
    @classmethod
    def validate_fallback_encoding(cls, value: str) -> str:
        """Validate the fallback encoding is a codec Python knows."""
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"Unknown fallback encoding '{value}'") from exc

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate logging level name."""
        normalized = value.upper()
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if normalized not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return normalized

    @property
    def station_tz(self) -> ZoneInfo:
        return ZoneInfo(self.station_timezone)

    @property
    def availability_window(self) -> timedelta:
        return timedelta(days=self.availability_window_days)

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_dir).expanduser()

    def log_configuration(self) -> None:
        """Log the effective configuration."""
        logger.debug("Configuration loaded:")
        logger.debug("  Station Timezone: %s", self.station_timezone)
        logger.debug("  Playlist Layout: %s", self.playlist_layout)
        logger.debug("  Availability Window: %s days", self.availability_window_days)
        logger.debug("  Fetch Timeout: %ss", self.fetch_timeout_sec)
        logger.debug("  Fallback Encoding: %s", self.fallback_encoding)
        logger.debug(
            "  Page Cache: %s",
            self.cache_path if self.cache_enabled else "disabled",
        )


settings = Settings()


def setup_logging(level: str | int | None = None) -> None:
    """Configure application logging."""
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
