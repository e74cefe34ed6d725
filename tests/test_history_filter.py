from datetime import datetime, timedelta, timezone

from timecorrect.engine.history_filter import filter_history, is_runaway, order_by_recency
from timecorrect.models.record import HistoricalRecord
from tests.helpers import make_records


class TestFilterHistory:
    def test_keeps_well_formed_records_in_order(self):
        records = make_records([(30, 45), (20, 25), (10, 8)])
        assert filter_history(records) == records

    def test_drops_missing_and_non_positive_durations(self):
        good = HistoricalRecord(estimated_duration=30, actual_duration=40)
        records = [
            HistoricalRecord(estimated_duration=None, actual_duration=40),
            HistoricalRecord(estimated_duration=30, actual_duration=None),
            HistoricalRecord(estimated_duration=0, actual_duration=40),
            HistoricalRecord(estimated_duration=30, actual_duration=0),
            HistoricalRecord(estimated_duration=-5, actual_duration=40),
            good,
        ]
        assert filter_history(records) == [good]

    def test_drops_runaway_outliers(self):
        records = make_records([(10, 110), (10, 20)])
        assert filter_history(records) == [records[1]]

    def test_keeps_record_exactly_at_threshold(self):
        records = make_records([(10, 100)])
        assert filter_history(records) == records

    def test_keeps_overestimates(self):
        records = make_records([(60, 10)])
        assert filter_history(records) == records

    def test_custom_outlier_factor(self):
        records = make_records([(10, 30), (10, 15)])
        assert filter_history(records, outlier_factor=2) == [records[1]]

    def test_is_runaway(self):
        assert is_runaway(HistoricalRecord(10, 101))
        assert not is_runaway(HistoricalRecord(10, 100))


class TestOrderByRecency:
    def test_sorts_most_recent_first(self):
        base = datetime(2024, 1, 1)
        older = HistoricalRecord(10, 10, completed_at=base)
        newer = HistoricalRecord(10, 20, completed_at=base + timedelta(days=1))
        assert order_by_recency([older, newer]) == [newer, older]

    def test_untimed_records_go_last_in_original_order(self):
        timed = HistoricalRecord(10, 10, completed_at=datetime(2024, 1, 1))
        first = HistoricalRecord(10, 11)
        second = HistoricalRecord(10, 12)
        assert order_by_recency([first, timed, second]) == [timed, first, second]

    def test_equal_timestamps_keep_input_order(self):
        moment = datetime(2024, 1, 1)
        a = HistoricalRecord(10, 11, completed_at=moment)
        b = HistoricalRecord(10, 12, completed_at=moment)
        assert order_by_recency([a, b]) == [a, b]

    def test_mixes_naive_and_aware_timestamps(self):
        naive = HistoricalRecord(10, 10, completed_at=datetime(2024, 1, 1, 12))
        aware = HistoricalRecord(10, 20, completed_at=datetime(2024, 1, 2, tzinfo=timezone.utc))
        assert order_by_recency([naive, aware]) == [aware, naive]
