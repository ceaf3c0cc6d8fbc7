"""
Observability & Determinism Tutorial

Goals:
- Run a short seeded search twice
- Build run reports and show their determinism signatures match
"""

from subleq_evo.config import preset
from subleq_evo.evolution.loop import run_evolution
from subleq_evo.reporting import RecordingReporter
from subleq_evo.utils.observability import determinism_signature, run_report


def main():
    config = preset('minimal', seed=7, generations=3)
    signatures = []
    for _ in range(2):
        reporter = RecordingReporter()
        result = run_evolution(config, reporter=reporter)
        rep = run_report(result, config)
        signatures.append(determinism_signature(rep))
        print('outcome:', rep['outcome'], 'history:', reporter.best_fitness_history)
    print('signatures_match:', signatures[0] == signatures[1])


if __name__ == '__main__':
    main()
