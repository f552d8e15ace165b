"""Infrastructure layer — external system integration.

This layer wraps all interaction with SQLite and the filesystem.  Every
raw backend exception must be caught here and re-raised as a
:class:`~cycle_tracker.exceptions.CycleTrackerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cycle_tracker.infra.sqlite_store import SqlitePeriodStore

__all__: list[str] = ["SqlitePeriodStore"]
