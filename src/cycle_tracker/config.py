"""Application configuration loaded from environment variables.

Every setting can be supplied as ``CYCLE_TRACKER_<NAME>`` in the
environment or in a ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from cycle_tracker.utils.dates import DEFAULT_CYCLE_LENGTH


class Settings(BaseSettings):
    """Runtime settings for the tracker."""

    model_config = SettingsConfigDict(
        env_prefix="CYCLE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Storage ---
    db_path: Path = Path("db.sqlite3")

    # --- Statistics ---
    fallback_cycle_length: int = DEFAULT_CYCLE_LENGTH

    # --- Validation ---
    reject_inverted_ranges: bool = False  # refuse end dates before start dates

    # --- Logging ---
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
