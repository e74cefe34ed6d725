"""Recency-weighted ratio correction policy."""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence

from ..engine.history_filter import filter_history
from ..models.record import HistoricalRecord
from ..models.result import MultiplierResult, MultiplierSource
from .base import CorrectionPolicy


class WeightedDecayPolicy(CorrectionPolicy):
    """Weighted actual/estimated ratio with exponential recency decay.

    weight[i] = decay ** i, where i = 0 is the most recent usable record.
    The ratio sum(w * actual) / sum(w * estimated) is clamped to the
    configured range and rounded to two decimals.
    """

    def estimate(self, records: Sequence[HistoricalRecord]) -> MultiplierResult:
        """Compute the multiplier from most-recent-first history."""
        settings = self.settings
        window = self._prepare(records)
        usable = filter_history(window, settings.outlier_factor)

        if len(usable) < settings.min_data_points:
            return self.default_result(
                MultiplierSource.INSUFFICIENT_DATA,
                usable_count=len(usable),
                detail=f"{len(usable)} usable records, need {settings.min_data_points}",
            )

        weighted_actual = 0.0
        weighted_estimated = 0.0
        for i, record in enumerate(usable):
            weight = settings.decay ** i
            weighted_actual += weight * record.actual_duration
            weighted_estimated += weight * record.estimated_duration

        if weighted_estimated == 0:
            return self.default_result(
                MultiplierSource.INSUFFICIENT_DATA,
                usable_count=len(usable),
                detail="weighted estimate total is zero",
            )

        raw_ratio = weighted_actual / weighted_estimated
        clamped = max(settings.min_multiplier, min(settings.max_multiplier, raw_ratio))

        return MultiplierResult(
            value=_round_half_up(clamped),
            source=MultiplierSource.PERSONALIZED,
            usable_count=len(usable),
            raw_ratio=raw_ratio,
        )

    def _prepare(self, records: Sequence[HistoricalRecord]) -> List[HistoricalRecord]:
        """Apply the history window and bring records into the engine unit."""
        unit = self.settings.duration_unit
        window = list(records)[:self.settings.max_history_window]
        return [record.to_unit(unit) for record in window]

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "WEIGHTED-DECAY"


def _round_half_up(value: float) -> float:
    """Round to two decimals, ties away from zero on the exact binary value."""
    return float(Decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))
