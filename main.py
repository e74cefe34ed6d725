"""Main entry point for the time-blindness correction engine."""

import argparse
import json
import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

from timecorrect.engine.buffer import correct_estimates
from timecorrect.engine.corrector import CorrectionEngine
from timecorrect.evaluation.backtest import run_backtest
from timecorrect.evaluation.generator import HistoryGenerator
from timecorrect.models.estimate import NewTaskEstimate
from timecorrect.models.result import RecordStatus
from timecorrect.storage import create_store
from timecorrect.utils.config import get_default_config, load_config


def build_config(config_path: str) -> dict:
    """Load config from path, falling back to defaults when the file is absent."""
    if config_path and Path(config_path).exists():
        config = get_default_config()
        for section, values in (load_config(config_path) or {}).items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values
        return config
    return get_default_config()


def build_engine(config: dict) -> CorrectionEngine:
    """Create store and engine from configuration."""
    store = create_store(config)
    return CorrectionEngine.from_config(store, config)


def run_multiplier(config: dict, user_id: str):
    """Print the user's current multiplier."""
    engine = build_engine(config)
    result = engine.resolve_multiplier(user_id)
    print(json.dumps(result.to_dict(), indent=2))
    return result


def run_correct(config: dict, user_id: str, tasks_path: str, multiplier: float = None):
    """Correct a JSON list of tasks and print the result."""
    with open(tasks_path, 'r') as f:
        tasks = [NewTaskEstimate.from_dict(item) for item in json.load(f)]

    if multiplier is not None:
        corrected = correct_estimates(tasks, multiplier)
    else:
        corrected = build_engine(config).correct_estimates(tasks, user_id)

    print(json.dumps([c.to_dict() for c in corrected], indent=2, default=str))
    return corrected


def run_record(config: dict, user_id: str, estimated: float, actual: float,
               estimated_unit: str = None, actual_unit: str = None):
    """Record a single completion."""
    engine = build_engine(config)
    result = engine.record_completion(
        user_id,
        estimated,
        actual,
        estimated_unit=estimated_unit,
        actual_unit=actual_unit,
    )
    print(f"Record status: {result.status.value}")
    if result.error:
        print(f"Error: {result.error}")
    return result


def run_simulate(config: dict, user_id: str, count: int = None):
    """Write a generated history for the user into the configured store."""
    eval_config = config.get('evaluation', {})
    generator = HistoryGenerator(seed=eval_config.get('seed', 42), config=config)
    count = count or eval_config.get('record_count', 60)
    start = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0) - timedelta(days=count)
    records = generator.generate_history(start, count=count)

    engine = build_engine(config)
    statuses = {}
    for record in records:
        result = engine.record_completion(
            user_id,
            record.estimated_duration,
            record.actual_duration,
            estimated_unit=record.unit,
            actual_unit=record.unit,
            completed_at=record.completed_at,
            task_id=record.task_id,
        )
        statuses[result.status.value] = statuses.get(result.status.value, 0) + 1

    print(f"Generated {len(records)} completions for {user_id}")
    for status, total in sorted(statuses.items()):
        print(f"  {status}: {total}")
    return statuses


def run_backtest_command(config: dict, user_id: str):
    """Replay a user's stored history and print the report."""
    engine = build_engine(config)
    records = engine.store.fetch_recent_history(user_id, sys.maxsize)
    result = run_backtest(records, engine.policy)
    print(json.dumps(result.to_dict(), indent=2))
    return result


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Personal time-blindness correction engine"
    )
    parser.add_argument(
        'command',
        choices=['multiplier', 'correct', 'record', 'simulate', 'backtest'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument('--user', type=str, required=True, help='User id')
    parser.add_argument('--tasks', type=str, help='JSON file with tasks to correct')
    parser.add_argument('--multiplier', type=float, help='Use this multiplier instead of history')
    parser.add_argument('--estimated', type=float, help='Estimated duration of a completed task')
    parser.add_argument('--actual', type=float, help='Actual duration of a completed task')
    parser.add_argument('--estimated-unit', type=str, help='Unit of --estimated (default: engine unit)')
    parser.add_argument('--actual-unit', type=str, help='Unit of --actual (default: engine unit)')
    parser.add_argument('--count', type=int, help='Number of completions to simulate')
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    config = build_config(args.config)

    if args.command == 'multiplier':
        run_multiplier(config, args.user)
    elif args.command == 'correct':
        if not args.tasks:
            parser.error("correct requires --tasks")
        run_correct(config, args.user, args.tasks, args.multiplier)
    elif args.command == 'record':
        if args.estimated is None or args.actual is None:
            parser.error("record requires --estimated and --actual")
        result = run_record(
            config, args.user, args.estimated, args.actual,
            estimated_unit=args.estimated_unit, actual_unit=args.actual_unit,
        )
        if result.status == RecordStatus.FAILED:
            return 1
    elif args.command == 'simulate':
        run_simulate(config, args.user, args.count)
    elif args.command == 'backtest':
        run_backtest_command(config, args.user)

    return 0


if __name__ == "__main__":
    sys.exit(main())
