"""Replay backtest of raw vs corrected estimates."""

from typing import Dict, List, Optional, Sequence

from ..engine.buffer import apply_time_buffer
from ..engine.history_filter import filter_history, order_by_recency
from ..models.record import HistoricalRecord
from ..policies import CorrectionPolicy, WeightedDecayPolicy


class BacktestResult:
    """Results from replaying a history through a policy."""

    def __init__(self, policy_name: str):
        self.policy_name = policy_name
        self.evaluated = 0
        self.personalized = 0
        self.raw_abs_error = 0.0
        self.corrected_abs_error = 0.0
        self.raw_underestimates = 0
        self.corrected_underestimates = 0
        self.final_multiplier: Optional[float] = None
        self.multipliers: List[float] = []

    @property
    def raw_mae(self) -> float:
        return self.raw_abs_error / self.evaluated if self.evaluated else 0.0

    @property
    def corrected_mae(self) -> float:
        return self.corrected_abs_error / self.evaluated if self.evaluated else 0.0

    @property
    def improvement_percent(self) -> float:
        if self.raw_mae == 0:
            return 0.0
        return (self.raw_mae - self.corrected_mae) / self.raw_mae * 100

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON export."""
        return {
            'policy': self.policy_name,
            'evaluated': self.evaluated,
            'personalized': self.personalized,
            'raw_mae': round(self.raw_mae, 2),
            'corrected_mae': round(self.corrected_mae, 2),
            'improvement_percent': round(self.improvement_percent, 2),
            'raw_underestimates': self.raw_underestimates,
            'corrected_underestimates': self.corrected_underestimates,
            'final_multiplier': self.final_multiplier,
        }


def run_backtest(
    records: Sequence[HistoricalRecord],
    policy: Optional[CorrectionPolicy] = None,
) -> BacktestResult:
    """Replay history oldest to newest, correcting each task with the multiplier known before it.

    Runaway and malformed records are neither scored nor used, matching
    what the recorder would have stored.
    """
    policy = policy or WeightedDecayPolicy()
    settings = policy.settings
    result = BacktestResult(policy.get_policy_name())

    unit = settings.duration_unit
    recent_first = order_by_recency(r.to_unit(unit) for r in records)
    chronological = list(reversed(filter_history(recent_first, settings.outlier_factor)))

    seen: List[HistoricalRecord] = []
    for record in chronological:
        window = list(reversed(seen[-settings.max_history_window:]))
        estimate = policy.estimate(window)

        corrected = apply_time_buffer(record.estimated_duration, estimate.value)
        actual = record.actual_duration

        result.evaluated += 1
        result.personalized += int(estimate.is_personalized)
        result.raw_abs_error += abs(record.estimated_duration - actual)
        result.corrected_abs_error += abs(corrected - actual)
        result.raw_underestimates += int(record.estimated_duration < actual)
        result.corrected_underestimates += int(corrected < actual)
        result.multipliers.append(estimate.value)

        seen.append(record)

    result.final_multiplier = policy.estimate(list(reversed(seen[-settings.max_history_window:]))).value
    return result
