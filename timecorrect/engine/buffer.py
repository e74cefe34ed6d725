"""Applying a correction multiplier to raw estimates."""

import math
from typing import Iterable, List, Union

from ..models.estimate import CorrectedTaskEstimate, NewTaskEstimate

Number = Union[int, float]


def apply_time_buffer(raw_estimate: Number, multiplier: float) -> Number:
    """Scale a raw estimate by the multiplier, rounding up.

    A non-positive estimate yields 0. A non-positive multiplier means no
    correction is available and returns the estimate unchanged.
    """
    if raw_estimate <= 0:
        return 0
    if multiplier <= 0:
        return raw_estimate
    return math.ceil(raw_estimate * multiplier)


def correct_estimate(task: NewTaskEstimate, multiplier: float) -> CorrectedTaskEstimate:
    """Correct a single task estimate."""
    return CorrectedTaskEstimate(
        title=task.title,
        raw_estimated_duration=task.estimated_duration,
        corrected_duration=apply_time_buffer(task.estimated_duration, multiplier),
        multiplier=multiplier,
        extra=dict(task.extra),
    )


def correct_estimates(tasks: Iterable[NewTaskEstimate], multiplier: float) -> List[CorrectedTaskEstimate]:
    """Correct a batch of estimates with one precomputed multiplier, preserving order."""
    return [correct_estimate(task, multiplier) for task in tasks]
