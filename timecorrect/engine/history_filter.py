"""Cleaning and ordering of historical completion records."""

from datetime import datetime, timezone
from typing import Iterable, List

from ..models.record import HistoricalRecord

DEFAULT_OUTLIER_FACTOR = 10.0


def is_runaway(record: HistoricalRecord, outlier_factor: float = DEFAULT_OUTLIER_FACTOR) -> bool:
    """Check whether a record ran far past its estimate (e.g. timer left running overnight)."""
    return record.actual_duration > record.estimated_duration * outlier_factor


def filter_history(
    records: Iterable[HistoricalRecord],
    outlier_factor: float = DEFAULT_OUTLIER_FACTOR,
) -> List[HistoricalRecord]:
    """Keep well-formed, non-runaway records, preserving input order.

    Overestimates (actual < estimated) are kept: they legitimately pull the
    multiplier toward or below 1.0.
    """
    usable = []
    for record in records:
        if not record.is_well_formed():
            continue
        if is_runaway(record, outlier_factor):
            continue
        usable.append(record)
    return usable


def order_by_recency(records: Iterable[HistoricalRecord]) -> List[HistoricalRecord]:
    """Sort records most-recent-first by completed_at.

    The sort is stable; records without a timestamp keep their relative
    order after all timestamped records.
    """
    records = list(records)
    timestamped = [r for r in records if r.completed_at is not None]
    untimed = [r for r in records if r.completed_at is None]
    timestamped.sort(key=lambda r: _sort_key(r.completed_at), reverse=True)
    return timestamped + untimed


def _sort_key(moment: datetime) -> float:
    # Naive timestamps are taken as UTC so they compare with aware ones
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp()
