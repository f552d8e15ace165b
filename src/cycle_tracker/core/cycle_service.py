"""Core cycle service — orchestrates the store and the statistics engine.

The store is injected at construction time, so nothing here knows about
SQLite.  Typed storage errors propagate to the caller, except for the
average cycle length, which falls back to the configured default when
the records cannot be read.
"""

from __future__ import annotations

import logging
from datetime import date

from cycle_tracker.config import Settings
from cycle_tracker.core import cycle_statistics
from cycle_tracker.core.models import FertileWindow, HistoryRow, PeriodRecord
from cycle_tracker.core.protocols import PeriodStore
from cycle_tracker.exceptions import InvalidDateRangeError, StorageReadError

logger = logging.getLogger("cycle_tracker.core.cycle_service")


class CycleService:
    """Stateless facade over a :class:`PeriodStore`.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`PeriodStore` protocol.
    settings:
        Runtime settings; only the statistics and validation options are read.
    """

    def __init__(self, store: PeriodStore, settings: Settings) -> None:
        self._store: PeriodStore = store
        self._settings: Settings = settings

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_period(self, start: date, end: date) -> int:
        """Store a new period and return its id.

        Raises
        ------
        InvalidDateRangeError
            If *end* precedes *start* and inverted ranges are rejected.
        StorageWriteError
            If the store cannot persist the record.
        """
        if end < start and self._settings.reject_inverted_ranges:
            raise InvalidDateRangeError(
                f"End date {end.isoformat()} is before start date {start.isoformat()}.",
                hint="Enter the first day of the period, then the last day.",
            )
        return self._store.insert(start, end)

    def remove_last_period(self) -> PeriodRecord | None:
        """Delete the most recently *inserted* record (not the latest by date)."""
        return self._store.delete_most_recently_inserted()

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def average_cycle_length(self) -> int:
        fallback = self._settings.fallback_cycle_length
        try:
            records = self._store.fetch_all("start_date")
        except StorageReadError as exc:
            logger.warning("Error calculating average cycle length: %s", exc)
            return fallback
        return cycle_statistics.average_cycle_length(records, fallback=fallback)

    def predict_next_period_date(self) -> date | None:
        last = self._store.fetch_most_recent_by_start_date()
        if last is None:
            return None
        return cycle_statistics.predict_next_period_date(last, self.average_cycle_length())

    def predict_fertile_window(self) -> FertileWindow:
        last = self._store.fetch_most_recent_by_start_date()
        if last is None:
            return FertileWindow()
        return cycle_statistics.predict_fertile_window(last, self.average_cycle_length())

    def history(self) -> list[HistoryRow]:
        """History rows ordered by start date ascending."""
        records = self._store.fetch_all("start_date")
        return cycle_statistics.render_history(records, self.average_cycle_length())
