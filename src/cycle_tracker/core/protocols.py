"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from datetime import date
from typing import Literal, Protocol

from cycle_tracker.core.models import PeriodRecord

OrderField = Literal["start_date", "id"]


class PeriodStore(Protocol):
    """Contract for durable period storage.

    Implementations must map all backend-specific exceptions to
    :class:`~cycle_tracker.exceptions.StorageError` subclasses and must
    not cache records between calls.
    """

    def initialize(self) -> None:
        """Open or create the backing storage and ensure the schema exists.

        Raises
        ------
        StorageInitError
            When the location is unwritable or the file is corrupt.
        """
        ...  # pragma: no cover

    def insert(self, start: date, end: date) -> int:
        """Append a record and return its freshly assigned id.

        Raises
        ------
        StorageWriteError
            When the row cannot be written.
        """
        ...  # pragma: no cover

    def delete_most_recently_inserted(self) -> PeriodRecord | None:
        """Remove the record with the highest id.

        Returns the removed record, or ``None`` when the store is empty.

        Raises
        ------
        StorageWriteError
            When the row cannot be deleted.
        """
        ...  # pragma: no cover

    def fetch_all(
        self,
        order_by: OrderField = "start_date",
        *,
        descending: bool = False,
    ) -> list[PeriodRecord]:
        """Return every record in the requested order.

        Raises
        ------
        StorageReadError
            When the records cannot be read.
        """
        ...  # pragma: no cover

    def fetch_most_recent_by_start_date(self) -> PeriodRecord | None:
        """Return the record with the latest start date, or ``None``."""
        ...  # pragma: no cover

    def fetch_by_id(self, record_id: int) -> PeriodRecord | None:
        """Return the record with *record_id*, or ``None``."""
        ...  # pragma: no cover
