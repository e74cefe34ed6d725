"""In-memory history store."""

import threading
from collections import defaultdict
from typing import Dict, List

from ..engine.history_filter import order_by_recency
from ..models.record import HistoricalRecord
from .base import HistoryStore


class InMemoryHistoryStore(HistoryStore):
    """Process-local store, mainly for tests and short-lived sessions."""

    def __init__(self):
        self._records: Dict[str, List[HistoricalRecord]] = defaultdict(list)
        self._lock = threading.Lock()

    def fetch_recent_history(self, user_id: str, max_count: int) -> List[HistoricalRecord]:
        with self._lock:
            # Appended oldest first; reverse before the stable timestamp sort
            records = list(reversed(self._records.get(user_id, [])))
        return order_by_recency(records)[:max(0, max_count)]

    def append_record(self, user_id: str, record: HistoricalRecord) -> None:
        with self._lock:
            self._records[user_id].append(record)

    def count(self, user_id: str) -> int:
        """Number of records held for a user."""
        with self._lock:
            return len(self._records.get(user_id, []))
