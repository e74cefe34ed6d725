"""Evaluation and simulation modules."""

from .backtest import BacktestResult, run_backtest
from .generator import HistoryGenerator

__all__ = ['BacktestResult', 'HistoryGenerator', 'run_backtest']
