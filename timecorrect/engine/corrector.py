"""Core correction engine."""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from ..errors import HistoryStoreError
from ..models.estimate import CorrectedTaskEstimate, NewTaskEstimate
from ..models.record import HistoricalRecord
from ..models.result import MultiplierResult, MultiplierSource, RecordResult, RecordStatus
from ..policies import CorrectionPolicy, WeightedDecayPolicy, create_policy
from ..storage.base import HistoryStore
from ..utils.config import CorrectionSettings
from ..utils.units import DurationUnit, convert_duration, parse_unit
from .buffer import correct_estimates
from .history_filter import is_runaway


class CorrectionEngine:
    """Resolves a user's correction multiplier from their history and applies it.

    The engine holds no per-user state. Every multiplier request reads the
    store as of call time and recomputes, so a multiplier must not be
    assumed stable across calls as history grows.
    """

    def __init__(
        self,
        store: HistoryStore,
        policy: Optional[CorrectionPolicy] = None,
        settings: Optional[CorrectionSettings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize engine with a history store and a policy."""
        self.store = store
        self.settings = settings or (policy.settings if policy else CorrectionSettings())
        self.policy = policy or WeightedDecayPolicy(self.settings)
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(cls, store: HistoryStore, config: Dict[str, Any],
                    logger: Optional[logging.Logger] = None) -> "CorrectionEngine":
        """Build an engine from a config dict."""
        settings = CorrectionSettings.from_config(config)
        policy_name = ((config or {}).get('correction') or {}).get('policy', 'weighted-decay')
        return cls(store, create_policy(policy_name, settings), settings, logger)

    @property
    def unit(self) -> DurationUnit:
        return self.settings.duration_unit

    def resolve_multiplier(self, user_id: str) -> MultiplierResult:
        """Compute the user's multiplier, degrading to the default on any data problem."""
        try:
            records = self.store.fetch_recent_history(user_id, self.settings.max_history_window)
        except HistoryStoreError as e:
            self.logger.warning(f"History unavailable for {user_id}, using default multiplier: {e}")
            return self.policy.default_result(MultiplierSource.STORE_UNAVAILABLE, detail=str(e))

        result = self.policy.estimate(records)

        if result.source == MultiplierSource.INSUFFICIENT_DATA:
            self.logger.debug(f"Not enough history for {user_id}: {result.detail}")
        else:
            self.logger.debug(
                f"Multiplier for {user_id}: {result.value} "
                f"({result.source.value}, {result.usable_count} usable records)"
            )
        return result

    def get_multiplier(self, user_id: str) -> float:
        """Return only the multiplier value for a user."""
        return self.resolve_multiplier(user_id).value

    def correct_estimates(
        self,
        tasks: Iterable[Union[NewTaskEstimate, Dict[str, Any]]],
        user_id: str,
    ) -> List[CorrectedTaskEstimate]:
        """Correct a batch using one multiplier resolved for the user."""
        tasks = [t if isinstance(t, NewTaskEstimate) else NewTaskEstimate.from_dict(t) for t in tasks]
        multiplier = self.get_multiplier(user_id)
        return correct_estimates(tasks, multiplier)

    def record_completion(
        self,
        user_id: str,
        estimated: Optional[float],
        actual: Optional[float],
        estimated_unit: Optional[Union[str, DurationUnit]] = None,
        actual_unit: Optional[Union[str, DurationUnit]] = None,
        completed_at: Optional[datetime] = None,
        task_id: Optional[str] = None,
    ) -> RecordResult:
        """Record one completed task, skipping malformed and runaway entries.

        A store failure is reported in the result and never raised.
        """
        record = HistoricalRecord(
            estimated_duration=self._to_engine_unit(estimated, estimated_unit),
            actual_duration=self._to_engine_unit(actual, actual_unit),
            completed_at=completed_at or datetime.now(),
            unit=self.unit,
            task_id=task_id,
        )

        if not record.is_well_formed():
            self.logger.debug(f"Skipping malformed completion for {user_id}: {record}")
            return RecordResult(RecordStatus.SKIPPED_MALFORMED, record)

        if is_runaway(record, self.settings.outlier_factor):
            self.logger.info(
                f"Skipping runaway completion for {user_id}: "
                f"{record.actual_duration:.1f} vs estimate {record.estimated_duration:.1f} {self.unit.value}"
            )
            return RecordResult(RecordStatus.SKIPPED_OUTLIER, record)

        try:
            self.store.append_record(user_id, record)
        except HistoryStoreError as e:
            self.logger.warning(f"Failed to persist completion for {user_id}: {e}")
            return RecordResult(RecordStatus.FAILED, record, error=str(e))

        return RecordResult(RecordStatus.WRITTEN, record)

    def _to_engine_unit(self, value: Optional[float],
                        unit: Optional[Union[str, DurationUnit]]) -> Optional[float]:
        if value is None or unit is None:
            return value
        return convert_duration(value, parse_unit(unit), self.unit)
