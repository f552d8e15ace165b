"""Custom exception hierarchy for cycle-tracker.

All exceptions that cross layer boundaries must inherit from
:class:`CycleTrackerError`.  Raw ``sqlite3`` and ``OSError`` exceptions
must NEVER propagate beyond the infrastructure layer — they are caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
CycleTrackerError
├── StorageError
│   ├── StorageInitError
│   ├── StorageWriteError
│   └── StorageReadError
├── InputFormatError
├── InvalidDateRangeError
└── EnvironmentError
"""

from __future__ import annotations


class CycleTrackerError(Exception):
    """Base exception for all cycle-tracker errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI can render a clean message without
    leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Storage ---------------------------------------------------------------

class StorageError(CycleTrackerError):
    """Common parent of every period-store failure."""


class StorageInitError(StorageError):
    """Raised when the database file cannot be opened or its schema created."""


class StorageWriteError(StorageError):
    """Raised when an insert or delete fails."""


class StorageReadError(StorageError):
    """Raised when records cannot be fetched."""


# --- User input ------------------------------------------------------------

class InputFormatError(CycleTrackerError):
    """Raised when a date string does not match ``yyyy-MM-dd``."""


class InvalidDateRangeError(CycleTrackerError):
    """Raised when an end date precedes its start date and such ranges are rejected."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CycleTrackerError):
    """Raised when a required runtime dependency is not available."""
