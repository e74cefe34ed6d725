"""Synthetic completion history generator for evaluation."""

import random
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from ..models.record import HistoricalRecord
from ..utils.units import DurationUnit


class HistoryGenerator:
    """Generates deterministic completion histories for a simulated user."""

    def __init__(self, seed: int = 42, config: Optional[Dict] = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.eval_config = self.config.get('evaluation', {})

    def generate_history(
        self,
        start: datetime,
        count: Optional[int] = None,
        bias_mean: Optional[float] = None,
        bias_std: Optional[float] = None,
        runaway_rate: Optional[float] = None,
    ) -> List[HistoricalRecord]:
        """Generate ``count`` completed tasks in chronological order (oldest first)."""
        count = count if count is not None else self.eval_config.get('record_count', 60)
        bias_mean = bias_mean if bias_mean is not None else self.eval_config.get('bias_mean', 1.4)
        bias_std = bias_std if bias_std is not None else self.eval_config.get('bias_std', 0.35)
        runaway_rate = runaway_rate if runaway_rate is not None else self.eval_config.get('runaway_rate', 0.05)

        records = []
        completed_at = start
        for i in range(count):
            # Vary task sizes (mostly small micro-tasks, some longer)
            if self.random.random() < 0.6:
                estimated = self.random.randint(5, 30)
            else:
                estimated = self.random.randint(30, 120)

            if self.random.random() < runaway_rate:
                # Timer left running
                bias = self.random.uniform(12.0, 40.0)
            else:
                bias = max(0.3, self.random.gauss(bias_mean, bias_std))

            actual = max(1, int(round(estimated * bias)))
            completed_at = completed_at + timedelta(minutes=actual + self.random.randint(5, 240))

            records.append(HistoricalRecord(
                estimated_duration=estimated,
                actual_duration=actual,
                completed_at=completed_at,
                unit=DurationUnit.MINUTES,
                task_id=f"task_{i:03d}",
            ))

        return records
