"""Data models."""

from .estimate import CorrectedTaskEstimate, NewTaskEstimate
from .record import HistoricalRecord
from .result import MultiplierResult, MultiplierSource, RecordResult, RecordStatus

__all__ = [
    'CorrectedTaskEstimate',
    'HistoricalRecord',
    'MultiplierResult',
    'MultiplierSource',
    'NewTaskEstimate',
    'RecordResult',
    'RecordStatus',
]
