from datetime import datetime

from timecorrect.evaluation.backtest import run_backtest
from timecorrect.evaluation.generator import HistoryGenerator
from timecorrect.policies import FixedPolicy, WeightedDecayPolicy
from tests.helpers import make_records

START = datetime(2024, 1, 1, 9, 0)


class TestHistoryGenerator:
    def test_deterministic_for_seed(self):
        first = HistoryGenerator(seed=7).generate_history(START, count=30)
        second = HistoryGenerator(seed=7).generate_history(START, count=30)
        assert first == second

    def test_chronological_and_well_formed(self):
        records = HistoryGenerator(seed=3).generate_history(START, count=40)
        assert len(records) == 40
        timestamps = [r.completed_at for r in records]
        assert timestamps == sorted(timestamps)
        assert all(r.is_well_formed() for r in records)

    def test_reads_evaluation_config(self):
        config = {'evaluation': {'record_count': 12, 'runaway_rate': 1.0}}
        records = HistoryGenerator(seed=1, config=config).generate_history(START)
        assert len(records) == 12
        assert all(r.actual_duration > r.estimated_duration * 10 for r in records)


class TestBacktest:
    def test_correction_beats_raw_estimates(self):
        records = HistoryGenerator(seed=42).generate_history(START, count=80, runaway_rate=0.0)
        result = run_backtest(records, WeightedDecayPolicy())

        assert result.evaluated == 80
        assert result.personalized == 75
        assert result.corrected_mae < result.raw_mae
        assert result.corrected_underestimates < result.raw_underestimates
        assert result.improvement_percent > 0

    def test_runaway_records_are_ignored(self):
        clean = make_records([(30, 45), (20, 30), (10, 16), (40, 55), (25, 30), (15, 24), (30, 40)])
        polluted = clean[:3] + make_records([(10, 400)]) + clean[3:]
        assert run_backtest(polluted).to_dict() == run_backtest(clean).to_dict()

    def test_final_multiplier_matches_policy(self):
        records = make_records([(30, 45)] * 6)
        result = run_backtest(records)
        assert result.final_multiplier == 1.5
        assert result.multipliers[:5] == [1.35] * 5
        assert result.multipliers[5] == 1.5

    def test_fixed_policy_report(self):
        result = run_backtest(make_records([(10, 20)] * 5), FixedPolicy())
        data = result.to_dict()
        assert data['policy'] == 'FIXED'
        assert data['personalized'] == 0
        assert data['raw_mae'] == 10.0
        assert data['corrected_mae'] == 6.0

    def test_empty_history(self):
        data = run_backtest([]).to_dict()
        assert data['evaluated'] == 0
        assert data['raw_mae'] == 0.0
        assert data['improvement_percent'] == 0.0
        assert data['final_multiplier'] == 1.35
