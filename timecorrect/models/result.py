"""Typed outcomes for multiplier resolution and completion recording."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .record import HistoricalRecord


class MultiplierSource(str, Enum):
    """Where a multiplier value came from."""

    PERSONALIZED = "personalized"
    INSUFFICIENT_DATA = "insufficient_data"
    STORE_UNAVAILABLE = "store_unavailable"
    FIXED = "fixed"


class RecordStatus(str, Enum):
    """Outcome of recording one completed task."""

    WRITTEN = "written"
    SKIPPED_MALFORMED = "skipped_malformed"
    SKIPPED_OUTLIER = "skipped_outlier"
    FAILED = "failed"


@dataclass(frozen=True)
class MultiplierResult:
    """A correction multiplier together with how it was obtained."""

    value: float
    source: MultiplierSource
    usable_count: int = 0
    raw_ratio: Optional[float] = None
    detail: Optional[str] = None

    @property
    def is_personalized(self) -> bool:
        return self.source == MultiplierSource.PERSONALIZED

    def __float__(self) -> float:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        data = asdict(self)
        data['source'] = self.source.value
        return data


@dataclass(frozen=True)
class RecordResult:
    """Result of a completion recorder call."""

    status: RecordStatus
    record: Optional[HistoricalRecord] = None
    error: Optional[str] = None

    @property
    def written(self) -> bool:
        return self.status == RecordStatus.WRITTEN
