"""Incoming and corrected task estimate models."""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

ESTIMATE_KEYS = ('estimated_duration', 'estimated_minutes')


@dataclass
class NewTaskEstimate:
    """A raw, externally generated task estimate awaiting correction."""

    title: str
    estimated_duration: float
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewTaskEstimate":
        """Build an estimate from a task dict; every key but the title is kept in ``extra``."""
        estimate = 0.0
        for key in ESTIMATE_KEYS:
            if data.get(key) is not None:
                estimate = data[key]
                break
        extra = {
            key: value
            for key, value in data.items()
            if key != 'title'
        }
        return cls(title=data.get('title', ''), estimated_duration=estimate, extra=extra)


@dataclass
class CorrectedTaskEstimate:
    """A task estimate annotated with the multiplier that corrected it."""

    title: str
    raw_estimated_duration: float
    corrected_duration: Union[int, float]
    multiplier: float
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a single dict, extra fields first."""
        data = dict(self.extra)
        data.update({
            'title': self.title,
            'raw_estimated_duration': self.raw_estimated_duration,
            'corrected_duration': self.corrected_duration,
            'multiplier': self.multiplier,
        })
        return data
