"""Utility functions."""

from .config import CorrectionSettings, get_default_config, load_config
from .units import DurationUnit, convert_duration, parse_unit

__all__ = [
    'CorrectionSettings',
    'DurationUnit',
    'convert_duration',
    'get_default_config',
    'load_config',
    'parse_unit',
]
