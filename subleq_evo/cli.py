"""
Command line entry point: ``subleq-evo``

Summary:
- Builds a configuration from a preset plus command line overrides
- Runs the search and logs per-generation best fitness
- Prints the replicator, final memory and step count on success

Use --quick for a short sanity run.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from subleq_evo.config import PRESETS, preset
from subleq_evo.evolution.loop import run_evolution
from subleq_evo.reporting import CompositeReporter, CsvReporter, LoggingReporter
from subleq_evo.utils.observability import run_report
from subleq_evo.utils.rng_manager import RNGManager
from subleq_evo.utils.validation import ValidationError

# argparse dest -> configuration key
_OVERRIDES = {
    'population_size': 'population_size',
    'generations': 'generations',
    'mutation_rate': 'mutation_rate',
    'min_length': 'min_program_length',
    'max_length': 'max_program_length',
    'memory_size': 'memory_size',
    'max_steps': 'max_execution_steps',
    'seed': 'seed',
    'workers': 'max_workers',
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='subleq-evo',
        description='Evolve a self-replicating SUBLEQ program.',
    )
    ap.add_argument('--preset', choices=sorted(PRESETS), default='standard')
    ap.add_argument('--quick', action='store_true', help='use the minimal preset for a sanity run')
    ap.add_argument('--population-size', type=int)
    ap.add_argument('--generations', type=int)
    ap.add_argument('--mutation-rate', type=float)
    ap.add_argument('--min-length', type=int, help='minimum program length')
    ap.add_argument('--max-length', type=int, help='maximum program length')
    ap.add_argument('--memory-size', type=int)
    ap.add_argument('--max-steps', type=int, help='execution step cap per run')
    ap.add_argument('--seed', type=int)
    ap.add_argument('--workers', type=int, help='evaluation threads (default: executor default)')
    ap.add_argument('--serial', action='store_true', help='evaluate fitness without worker threads')
    ap.add_argument('--csv', default=None, help='write per-generation rows to this CSV file')
    ap.add_argument('--report', default=None, help='write a JSON run report to this file')
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap


def config_from_args(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for dest, key in _OVERRIDES.items():
        value = getattr(args, dest)
        if value is not None:
            overrides[key] = value
    if args.serial:
        overrides['parallel_execution'] = False
    return preset('minimal' if args.quick else args.preset, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s',
    )

    try:
        config = config_from_args(args)
    except ValidationError as exc:
        logging.error(f"Invalid configuration: {exc}")
        return 2

    rng = RNGManager(config['seed'])
    reporters = [LoggingReporter()]
    if args.csv:
        reporters.append(CsvReporter(args.csv))
    reporter = CompositeReporter(reporters)
    try:
        result = run_evolution(config, rng, reporter)
    finally:
        reporter.close()

    if args.csv:
        print('csv_log:', args.csv)
    if args.report:
        with open(args.report, 'w') as f:
            json.dump(run_report(result, config, seed=rng.seed), f, indent=2)
        print('run_report:', args.report)
    return 0


if __name__ == '__main__':
    sys.exit(main())
