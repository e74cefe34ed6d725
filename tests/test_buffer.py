import pytest

from timecorrect.engine.buffer import apply_time_buffer, correct_estimate, correct_estimates
from timecorrect.models.estimate import NewTaskEstimate


class TestApplyTimeBuffer:
    @pytest.mark.parametrize(
        "raw, multiplier, expected",
        [
            (100, 1.35, 135),
            (0, 1.35, 0),
            (-10, 1.35, 0),
            (50, 0, 50),
            (50, -1.2, 50),
            (10, 1.01, 11),
            (30, 1.5, 45),
            (7, 1.0, 7),
        ],
    )
    def test_examples(self, raw, multiplier, expected):
        assert apply_time_buffer(raw, multiplier) == expected

    def test_never_rounds_down(self):
        for raw in range(1, 240):
            for multiplier in (0.8, 0.93, 1.0, 1.17, 1.35, 2.5):
                assert apply_time_buffer(raw, multiplier) >= raw * multiplier

    def test_pure(self):
        assert apply_time_buffer(42, 1.27) == apply_time_buffer(42, 1.27)


class TestCorrectEstimates:
    def test_preserves_order_and_extra_fields(self):
        tasks = [
            NewTaskEstimate("Write outline", 20, {'id': 'a', 'step': 1}),
            NewTaskEstimate("Draft intro", 10, {'id': 'b', 'step': 2}),
            NewTaskEstimate("Send email", 5, {'id': 'c', 'step': 3}),
        ]
        corrected = correct_estimates(tasks, 1.5)

        assert [c.title for c in corrected] == ["Write outline", "Draft intro", "Send email"]
        assert [c.corrected_duration for c in corrected] == [30, 15, 8]
        assert [c.raw_estimated_duration for c in corrected] == [20, 10, 5]
        assert all(c.multiplier == 1.5 for c in corrected)
        assert corrected[1].extra == {'id': 'b', 'step': 2}

    def test_extra_fields_are_copied(self):
        task = NewTaskEstimate("Tidy desk", 10, {'tags': 'home'})
        corrected = correct_estimate(task, 1.2)
        corrected.extra['tags'] = 'changed'
        assert task.extra == {'tags': 'home'}

    def test_empty_batch(self):
        assert correct_estimates([], 1.35) == []

    def test_to_dict_merges_extra(self):
        task = NewTaskEstimate.from_dict({'title': 'Call bank', 'estimated_minutes': 4, 'id': 'x1'})
        data = correct_estimate(task, 1.35).to_dict()
        assert data == {
            'id': 'x1',
            'estimated_minutes': 4,
            'title': 'Call bank',
            'raw_estimated_duration': 4,
            'corrected_duration': 6,
            'multiplier': 1.35,
        }
