"""
Handlers that write nothing: a discarding handler and an in-memory capture for tests.
"""

import threading
from typing import Any

from .base import BaseHandler
from .record import Record


class NullHandler(BaseHandler):
    """
    A handler that discards every record.

    Records are still filtered and enriched by the logger; only the
    write is skipped.
    """

    def __repr__(self) -> str:
        return "NullHandler()"


class CaptureHandler(BaseHandler):
    """
    A handler that keeps handled records in memory.
    Useful for verifying that your code logs the right things.
    """

    def __init__(self):
        super().__init__()
        self._records: list[Record] = []
        self._lock = threading.Lock()

    def handle(self, record: Record) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> list[Record]:
        """Handled records, in handling order."""
        with self._lock:
            return list(self._records)

    @property
    def entries(self) -> list[dict[str, Any]]:
        """Handled records as plain dicts (last duplicate name wins)."""
        return [record.fields.to_dict() for record in self.records]

    def clear(self) -> None:
        """Clear captured records."""
        with self._lock:
            self._records.clear()

    def __repr__(self) -> str:
        return f"CaptureHandler(records={len(self._records)})"
