"""
Synchronized Database
=====================

Mutual-exclusion wrapper for a record store shared between threads.
"""
import threading
from typing import Generic, Optional

from user_registry.infrastructure.db.in_memory_database import InMemoryDatabase, RecordType


class SynchronizedDatabase(Generic[RecordType]):
    """Serializes every call to the wrapped store through one lock."""

    def __init__(self, database: InMemoryDatabase[RecordType]) -> None:
        self._database = database
        self._lock = threading.Lock()

    def add(self, record: RecordType) -> None:
        with self._lock:
            self._database.add(record)

    def find_by_id(self, record_id: str) -> Optional[RecordType]:
        with self._lock:
            return self._database.find_by_id(record_id)

    def get_by_id(self, record_id: str) -> RecordType:
        with self._lock:
            return self._database.get_by_id(record_id)

    def count(self) -> int:
        with self._lock:
            return self._database.count()
