"""Application configuration."""

import os
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: str = ".drink_tracker"
    timezone: str | None = None
    persist_debounce_seconds: float = 0.5
    seed_default_presets: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_timezone(name: str | None) -> ZoneInfo | None:
    """Resolve an IANA zone name; blank means the timestamps' own wall-clock."""
    if name is None:
        return None
    cleaned = name.strip()
    if not cleaned:
        return None
    return ZoneInfo(cleaned)
