"""Cycle statistics — pure functions over period record sequences.

Nothing here touches storage.  Callers pass in snapshots fetched from a
:class:`~cycle_tracker.core.protocols.PeriodStore`.

Two fertile-window estimates exist and are intentionally separate:

* :func:`predict_fertile_window` anchors on the *predicted* next start
  date (last recorded end + average cycle length).
* :func:`render_history` anchors each row on that record's *own* start
  date.

They disagree for the same data.  Both are kept as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from cycle_tracker.core.models import FertileWindow, HistoryRow, Period, PeriodRecord
from cycle_tracker.utils.dates import DEFAULT_CYCLE_LENGTH

logger = logging.getLogger("cycle_tracker.core.cycle_statistics")

FERTILE_WINDOW_LEAD_DAYS: int = 5
"""Days before mid-cycle at which the fertile window opens."""


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def days_between(earlier: date, later: date) -> int:
    """Whole calendar days from *earlier* to *later* (negative if reversed)."""
    return (later - earlier).days


def cycle_length(record: PeriodRecord) -> int:
    """Days between a record's start and end dates.

    Unguarded: an inverted record yields a negative length.
    """
    return Period(record.start_date, record.end_date).cycle_length


def _fertile_offsets(average: int) -> tuple[int, int]:
    """Return ``(start_offset, end_offset)`` in days from an anchor date.

    Floor division keeps the result stable for negative averages.
    """
    half = average // 2
    return half - FERTILE_WINDOW_LEAD_DAYS, half


# ---------------------------------------------------------------------------
# Averages
# ---------------------------------------------------------------------------

def average_cycle_length(
    records: Sequence[PeriodRecord],
    *,
    fallback: int = DEFAULT_CYCLE_LENGTH,
) -> int:
    """Average gap between one period's end and the next period's start.

    *records* must be sorted by start date ascending.  Integer division
    truncates toward zero.  Fewer than two records yields *fallback*; a
    computed average of ``0`` is returned unchanged.
    """
    if len(records) < 2:
        logger.debug("Only %d record(s); using fallback %d", len(records), fallback)
        return fallback

    total_days = 0
    total_periods = 0
    for previous, current in zip(records, records[1:]):
        gap = days_between(previous.end_date, current.start_date)
        logger.debug(
            "Days between %s and %s: %d",
            previous.end_date.isoformat(),
            current.start_date.isoformat(),
            gap,
        )
        total_days += gap
        total_periods += 1

    quotient = abs(total_days) // max(1, total_periods)
    average = quotient if total_days >= 0 else -quotient
    logger.debug(
        "Total days: %d, total periods: %d, average cycle length: %d",
        total_days,
        total_periods,
        average,
    )
    return average


# ---------------------------------------------------------------------------
# Predictions
# ---------------------------------------------------------------------------

def predict_next_period_date(
    last_record: PeriodRecord | None,
    average: int,
) -> date | None:
    """Expected start of the next period: last end date + *average* days."""
    if last_record is None:
        return None
    return last_record.end_date + timedelta(days=average)


def predict_fertile_window(
    last_record: PeriodRecord | None,
    average: int,
) -> FertileWindow:
    """Fertile window anchored on the predicted next start date.

    Returns an empty :class:`FertileWindow` when there is no last record.
    """
    predicted_start = predict_next_period_date(last_record, average)
    if predicted_start is None:
        return FertileWindow()

    start_offset, end_offset = _fertile_offsets(average)
    return FertileWindow(
        start=predicted_start + timedelta(days=start_offset),
        end=predicted_start + timedelta(days=end_offset),
    )


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

def render_history(
    records: Sequence[PeriodRecord],
    average: int,
) -> list[HistoryRow]:
    """Build one :class:`HistoryRow` per record, in the given order.

    Each row's fertile window is anchored on that record's own start date.
    """
    start_offset, end_offset = _fertile_offsets(average)
    return [
        HistoryRow(
            start_date=record.start_date,
            end_date=record.end_date,
            cycle_length=cycle_length(record),
            fertile_start=record.start_date + timedelta(days=start_offset),
            fertile_end=record.start_date + timedelta(days=end_offset),
        )
        for record in records
    ]
