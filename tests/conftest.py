"""Shared pytest fixtures and configuration for the cycle-tracker test suite.

Guidelines
----------
* Every store lives in ``tmp_path`` — never the working directory.
* questionary is mocked at the prompt boundary; no real terminal input.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cycle_tracker.config import Settings
from cycle_tracker.infra.sqlite_store import SqlitePeriodStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "db.sqlite3"


@pytest.fixture
def store(db_path: Path) -> SqlitePeriodStore:
    """An initialized, empty store."""
    s = SqlitePeriodStore(db_path)
    s.initialize()
    return s


@pytest.fixture
def settings(db_path: Path) -> Settings:
    return Settings(db_path=db_path)
