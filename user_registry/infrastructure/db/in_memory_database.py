"""
In-Memory Database
==================

Process-local record store keyed by a string identifier.
Records are kept in insertion order; lookup is a linear scan.
"""
from typing import Generic, List, Optional, Protocol, TypeVar

from user_registry.domain.exceptions import RecordNotFoundError


class Identifiable(Protocol):
    """Anything exposing a readable string ``id``."""

    @property
    def id(self) -> str: ...


RecordType = TypeVar("RecordType", bound=Identifiable)


class InMemoryDatabase(Generic[RecordType]):
    """
    Append-only in-memory store for records of one type.

    Duplicate IDs are accepted; lookups return the first record
    inserted with the requested ID. Records are never removed.
    Not thread-safe, see SynchronizedDatabase.
    """

    def __init__(self) -> None:
        self._records: List[RecordType] = []

    def add(self, record: RecordType) -> None:
        """Append a record to the store."""
        self._records.append(record)

    def find_by_id(self, record_id: str) -> Optional[RecordType]:
        """Return the first record with this ID, or None."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def get_by_id(self, record_id: str) -> RecordType:
        """
        Return the first record with this ID.

        Raises:
            RecordNotFoundError: If no record has this ID
        """
        # Identity check: a present record is returned even if it is falsy.
        record = self.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def count(self) -> int:
        """Number of stored records, duplicates included."""
        return len(self._records)
