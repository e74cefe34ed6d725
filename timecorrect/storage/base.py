"""History store contract."""

from abc import ABC, abstractmethod
from typing import List

from ..errors import HistoryStoreError
from ..models.record import HistoricalRecord

__all__ = ['HistoryStore', 'HistoryStoreError']


class HistoryStore(ABC):
    """Durable, per-user collection of completed-task records.

    Implementations raise HistoryStoreError for any read or write failure;
    the correction engine decides how to degrade.
    """

    @abstractmethod
    def fetch_recent_history(self, user_id: str, max_count: int) -> List[HistoricalRecord]:
        """Return up to ``max_count`` records for the user, most recent first."""
        pass

    @abstractmethod
    def append_record(self, user_id: str, record: HistoricalRecord) -> None:
        """Durably append one record for the user."""
        pass
