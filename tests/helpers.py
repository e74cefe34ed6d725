from datetime import datetime, timedelta

from timecorrect.models.record import HistoricalRecord

BASE_TIME = datetime(2024, 3, 1, 9, 0, 0)


def make_records(pairs, start=BASE_TIME):
    """Build most-recent-first records from (estimated, actual) pairs.

    The first pair gets the latest completed_at.
    """
    count = len(pairs)
    return [
        HistoricalRecord(
            estimated_duration=estimated,
            actual_duration=actual,
            completed_at=start + timedelta(hours=count - i),
            task_id=f"task_{i:03d}",
        )
        for i, (estimated, actual) in enumerate(pairs)
    ]
