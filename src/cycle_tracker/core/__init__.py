"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or database I/O of its own.
* No imports from ``cli`` or ``infra``.
"""

from cycle_tracker.core.models import FertileWindow, HistoryRow, Period, PeriodRecord
from cycle_tracker.core.protocols import PeriodStore
from cycle_tracker.core.cycle_service import CycleService

__all__: list[str] = [
    "CycleService",
    "FertileWindow",
    "HistoryRow",
    "Period",
    "PeriodRecord",
    "PeriodStore",
]
