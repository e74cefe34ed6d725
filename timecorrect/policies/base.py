"""Base correction policy interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..models.record import HistoricalRecord
from ..models.result import MultiplierResult, MultiplierSource
from ..utils.config import CorrectionSettings


class CorrectionPolicy(ABC):
    """Abstract base class for correction policies."""

    def __init__(self, settings: Optional[CorrectionSettings] = None):
        """Initialize policy with validated settings."""
        self.settings = settings or CorrectionSettings()

    @abstractmethod
    def estimate(self, records: Sequence[HistoricalRecord]) -> MultiplierResult:
        """Compute a multiplier from most-recent-first history."""
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Return the name of this policy."""
        pass

    def compute_multiplier(self, records: Sequence[HistoricalRecord]) -> float:
        """Compute the bare multiplier value."""
        return self.estimate(records).value

    def default_result(self, source: MultiplierSource, usable_count: int = 0,
                       detail: Optional[str] = None) -> MultiplierResult:
        """Build a fallback result carrying the configured default multiplier."""
        return MultiplierResult(
            value=self.settings.default_multiplier,
            source=source,
            usable_count=usable_count,
            detail=detail,
        )
