"""SQLite-backed implementation of :class:`~cycle_tracker.core.protocols.PeriodStore`.

This module is the **only** place in the codebase that imports ``sqlite3``.
Every ``sqlite3.Error`` / ``OSError`` is caught here and re-raised as a
typed :class:`~cycle_tracker.exceptions.StorageError` subclass.

Each public method opens its own short-lived connection, so nothing is
cached between calls.  Two processes writing the same file at once is
not supported.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Any

from cycle_tracker.core.models import PeriodRecord
from cycle_tracker.core.protocols import OrderField
from cycle_tracker.exceptions import StorageInitError, StorageReadError, StorageWriteError

logger = logging.getLogger("cycle_tracker.infra.sqlite_store")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS periods (
    id        INTEGER PRIMARY KEY AUTOINCREMENT,
    startDate DATE NOT NULL,
    endDate   DATE NOT NULL
)
"""

_SELECT = "SELECT id, startDate, endDate FROM periods"

# Public order field -> column name.
_ORDER_COLUMNS: dict[str, str] = {
    "start_date": "startDate",
    "id": "id",
}


class SqlitePeriodStore:
    """Concrete :class:`PeriodStore` persisted in a single SQLite file.

    Usage::

        store = SqlitePeriodStore(Path("db.sqlite3"))
        store.initialize()
        record_id = store.insert(date(2024, 1, 1), date(2024, 1, 5))

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def __init__(self, path: Path | str) -> None:
        self._path: Path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Connection handling
    # ------------------------------------------------------------------

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and always closes."""
        conn = sqlite3.connect(str(self._path))
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Create the database file and the ``periods`` table if missing."""
        try:
            with self._connect() as conn:
                conn.execute(_SCHEMA)
        except (sqlite3.Error, OSError) as exc:
            raise StorageInitError(
                f"Could not open period database at {self._path}: {exc}",
                hint="Check that the directory exists, is writable, and the file is a SQLite database.",
            ) from exc
        logger.debug("Period store ready at %s", self._path)

    def insert(self, start: date, end: date) -> int:
        try:
            with self._connect() as conn:
                cursor = conn.execute(
                    "INSERT INTO periods (startDate, endDate) VALUES (?, ?)",
                    (start.isoformat(), end.isoformat()),
                )
                record_id = cursor.lastrowid
        except (sqlite3.Error, OSError) as exc:
            raise StorageWriteError(f"Error adding period: {exc}") from exc

        if record_id is None:
            raise StorageWriteError("Error adding period: no row id was assigned.")
        logger.info("Inserted period %d (%s to %s)", record_id, start, end)
        return int(record_id)

    def delete_most_recently_inserted(self) -> PeriodRecord | None:
        try:
            with self._connect() as conn:
                row = conn.execute(f"{_SELECT} ORDER BY id DESC LIMIT 1").fetchone()
                if row is None:
                    return None
                conn.execute("DELETE FROM periods WHERE id = ?", (row[0],))
        except (sqlite3.Error, OSError) as exc:
            raise StorageWriteError(f"Error removing last period: {exc}") from exc

        removed = self._row_to_record(row)
        logger.info("Deleted period %d", removed.id)
        return removed

    def fetch_all(
        self,
        order_by: OrderField = "start_date",
        *,
        descending: bool = False,
    ) -> list[PeriodRecord]:
        """Return every record ordered by *order_by*.

        Ties on ``start_date`` are broken by id in the same direction, so
        the descending list is always the exact reverse of the ascending
        one.
        """
        column = _ORDER_COLUMNS.get(order_by)
        if column is None:
            raise ValueError(f"Unsupported order field: {order_by!r}")

        direction = "DESC" if descending else "ASC"
        clause = f"{column} {direction}"
        if column != "id":
            clause += f", id {direction}"
        return [self._row_to_record(row) for row in self._query(f"{_SELECT} ORDER BY {clause}")]

    def fetch_most_recent_by_start_date(self) -> PeriodRecord | None:
        rows = self._query(f"{_SELECT} ORDER BY startDate DESC, id DESC LIMIT 1")
        return self._row_to_record(rows[0]) if rows else None

    def fetch_by_id(self, record_id: int) -> PeriodRecord | None:
        rows = self._query(f"{_SELECT} WHERE id = ?", (record_id,))
        return self._row_to_record(rows[0]) if rows else None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _query(self, sql: str, params: tuple[Any, ...] = ()) -> list[tuple[Any, ...]]:
        try:
            with self._connect() as conn:
                return list(conn.execute(sql, params).fetchall())
        except (sqlite3.Error, OSError) as exc:
            raise StorageReadError(f"Error reading periods: {exc}") from exc

    @classmethod
    def _row_to_record(cls, row: tuple[Any, ...]) -> PeriodRecord:
        return PeriodRecord(
            id=int(row[0]),
            start_date=cls._to_date(row[1]),
            end_date=cls._to_date(row[2]),
        )

    @staticmethod
    def _to_date(value: object) -> date:
        """Parse a stored date, ignoring any time-of-day suffix."""
        text = str(value)
        try:
            return date.fromisoformat(text[:10])
        except ValueError as exc:
            raise StorageReadError(f"Stored date is not valid: {text!r}") from exc
