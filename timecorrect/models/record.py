"""Historical completion record model."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

from ..utils.units import DurationUnit, convert_duration, parse_unit


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class HistoricalRecord:
    """One completed task's estimated vs actual duration."""

    estimated_duration: Optional[float]
    actual_duration: Optional[float]
    completed_at: Optional[datetime] = None
    unit: DurationUnit = DurationUnit.MINUTES
    task_id: Optional[str] = None

    def is_well_formed(self) -> bool:
        """Check that both durations are numbers and positive."""
        return (
            _is_number(self.estimated_duration)
            and _is_number(self.actual_duration)
            and self.estimated_duration > 0
            and self.actual_duration > 0
        )

    def get_overrun_ratio(self) -> Optional[float]:
        """Calculate overrun ratio (actual / estimated), None if malformed."""
        if not self.is_well_formed():
            return None
        return self.actual_duration / self.estimated_duration

    def to_unit(self, unit: DurationUnit) -> "HistoricalRecord":
        """Return a copy with both durations expressed in ``unit``."""
        if unit == self.unit:
            return self

        def _convert(value: Any) -> Any:
            # Non-numeric values stay as they are and fail the well-formed check
            if not _is_number(value):
                return value
            return convert_duration(value, self.unit, unit)

        return replace(
            self,
            estimated_duration=_convert(self.estimated_duration),
            actual_duration=_convert(self.actual_duration),
            unit=unit,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            'task_id': self.task_id,
            'estimated_duration': self.estimated_duration,
            'actual_duration': self.actual_duration,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None,
            'unit': self.unit.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoricalRecord":
        """Build a record from a dictionary produced by ``to_dict``."""
        completed_at = data.get('completed_at')
        if isinstance(completed_at, str):
            completed_at = datetime.fromisoformat(completed_at)
        elif completed_at is not None:
            raise ValueError(f"completed_at must be an ISO timestamp, got {completed_at!r}")
        return cls(
            estimated_duration=data.get('estimated_duration'),
            actual_duration=data.get('actual_duration'),
            completed_at=completed_at,
            unit=parse_unit(data.get('unit', DurationUnit.MINUTES)),
            task_id=data.get('task_id'),
        )
