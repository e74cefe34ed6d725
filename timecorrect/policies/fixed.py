"""Non-personalized correction policy."""

from typing import Sequence

from ..engine.history_filter import filter_history
from ..models.record import HistoricalRecord
from ..models.result import MultiplierResult, MultiplierSource
from .base import CorrectionPolicy


class FixedPolicy(CorrectionPolicy):
    """Fixed policy: always the configured default, history is only counted."""

    def estimate(self, records: Sequence[HistoricalRecord]) -> MultiplierResult:
        """Return the default multiplier."""
        window = list(records)[:self.settings.max_history_window]
        usable = filter_history(window, self.settings.outlier_factor)
        return self.default_result(MultiplierSource.FIXED, usable_count=len(usable))

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "FIXED"
