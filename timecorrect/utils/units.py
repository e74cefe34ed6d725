"""Duration unit utilities."""

from enum import Enum
from typing import Union

from ..errors import UnitMismatchError


class DurationUnit(str, Enum):
    """Unit every duration inside one engine is expressed in."""

    MINUTES = "minutes"
    SECONDS = "seconds"


SECONDS_PER_UNIT = {
    DurationUnit.MINUTES: 60.0,
    DurationUnit.SECONDS: 1.0,
}

_ALIASES = {
    "m": DurationUnit.MINUTES,
    "min": DurationUnit.MINUTES,
    "mins": DurationUnit.MINUTES,
    "minute": DurationUnit.MINUTES,
    "minutes": DurationUnit.MINUTES,
    "s": DurationUnit.SECONDS,
    "sec": DurationUnit.SECONDS,
    "secs": DurationUnit.SECONDS,
    "second": DurationUnit.SECONDS,
    "seconds": DurationUnit.SECONDS,
}


def parse_unit(value: Union[str, DurationUnit]) -> DurationUnit:
    """Parse a unit name such as 'minutes' or 's' into a DurationUnit."""
    if isinstance(value, DurationUnit):
        return value
    unit = _ALIASES.get(str(value).strip().lower())
    if unit is None:
        raise UnitMismatchError(f"Unknown duration unit: {value!r}")
    return unit


def convert_duration(value: float, from_unit: DurationUnit, to_unit: DurationUnit) -> float:
    """Convert a duration between units."""
    if from_unit == to_unit:
        return value
    return value * SECONDS_PER_UNIT[from_unit] / SECONDS_PER_UNIT[to_unit]
