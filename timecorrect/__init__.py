"""Personal time-blindness correction for task duration estimates."""

from .engine.buffer import apply_time_buffer, correct_estimates
from .engine.corrector import CorrectionEngine
from .engine.history_filter import filter_history, order_by_recency
from .errors import HistoryStoreError, UnitMismatchError
from .models import (
    CorrectedTaskEstimate,
    HistoricalRecord,
    MultiplierResult,
    MultiplierSource,
    NewTaskEstimate,
    RecordResult,
    RecordStatus,
)
from .policies import FixedPolicy, WeightedDecayPolicy
from .utils import CorrectionSettings, DurationUnit

__version__ = "0.1.0"

__all__ = [
    'CorrectedTaskEstimate',
    'CorrectionEngine',
    'CorrectionSettings',
    'DurationUnit',
    'FixedPolicy',
    'HistoricalRecord',
    'HistoryStoreError',
    'MultiplierResult',
    'MultiplierSource',
    'NewTaskEstimate',
    'RecordResult',
    'RecordStatus',
    'UnitMismatchError',
    'WeightedDecayPolicy',
    'apply_time_buffer',
    'correct_estimates',
    'filter_history',
    'order_by_recency',
]
