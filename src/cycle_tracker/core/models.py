"""Domain models for cycle-tracker.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


# ---------------------------------------------------------------------------
# Stored record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PeriodRecord:
    """One row of the ``periods`` table."""

    id: int
    """Store-assigned identifier; strictly increasing in insertion order."""

    start_date: date
    """First day of the period."""

    end_date: date
    """Last day of the period.  Not guaranteed to be >= ``start_date``."""


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Period:
    """A start/end pair detached from its storage identity."""

    start_date: date
    end_date: date

    @property
    def cycle_length(self) -> int:
        """Whole calendar days from start to end (negative when inverted)."""
        return (self.end_date - self.start_date).days


@dataclass(frozen=True, slots=True)
class FertileWindow:
    """Estimated fertile window.

    Both bounds are ``None`` when no prediction is available, which makes
    the instance falsy.
    """

    start: date | None = None
    end: date | None = None

    def __bool__(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True, slots=True)
class HistoryRow:
    """One line of the period history, with its own fertile window estimate."""

    start_date: date
    end_date: date
    cycle_length: int
    fertile_start: date
    fertile_end: date
