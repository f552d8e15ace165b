"""Date parsing and formatting for the ``yyyy-MM-dd`` user format."""

from __future__ import annotations

from datetime import date, datetime

from cycle_tracker.exceptions import InputFormatError

DATE_FORMAT: str = "%Y-%m-%d"
"""strftime/strptime pattern used for all user-facing dates."""

DEFAULT_CYCLE_LENGTH: int = 28
"""Cycle length assumed when there is not enough history to average."""


def parse_date(text: str) -> date:
    """Parse a ``yyyy-MM-dd`` string into a :class:`date`.

    Raises
    ------
    InputFormatError
        If *text* is empty or does not match the format.
    """
    stripped = text.strip()
    try:
        return datetime.strptime(stripped, DATE_FORMAT).date()
    except ValueError as exc:
        raise InputFormatError(
            f"Invalid date: {stripped!r}",
            hint="Please enter dates in the format yyyy-mm-dd.",
        ) from exc


def format_date(value: date) -> str:
    """Render *value* as ``yyyy-MM-dd``."""
    return value.strftime(DATE_FORMAT)
