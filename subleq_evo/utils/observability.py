"""Run reports and determinism signatures.

A run report is a JSON-serialisable summary of one search. Two runs with the
same configuration and seed must produce reports with identical signatures.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Iterable

from subleq_evo.utils.validation import ValidationError

SCHEMA_VERSION = 1

# Keys that affect the search trajectory; execution strategy keys do not
_TRAJECTORY_KEYS = (
    'population_size',
    'generations',
    'mutation_rate',
    'min_program_length',
    'max_program_length',
    'memory_size',
    'max_execution_steps',
    'seed',
)


def _checksum(payload: Any) -> str:
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


def run_report(result: Any, config: dict[str, Any], seed: int | None = None) -> dict[str, Any]:
    """Summarise an EvolutionResult.

    Args:
        result: EvolutionResult returned by run_evolution
        config: The configuration used for the run
        seed: Effective seed (RNGManager.seed) when config['seed'] was None
    """
    trajectory_config = {k: config.get(k) for k in _TRAJECTORY_KEYS}
    if seed is not None:
        trajectory_config['seed'] = int(seed)

    report: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "config": trajectory_config,
        "outcome": "success" if result.success else "exhausted",
        "generations_run": int(result.generations_run),
        "best_fitness_history": [int(x) for x in result.best_fitness_history],
        "replicator": None,
    }
    if result.success:
        report["replicator"] = {
            "genome": [int(x) for x in result.genome],
            "step_count": int(result.step_count),
            "memory_checksum": _checksum([int(x) for x in result.final_memory]),
        }
    report["determinism_checksum"] = _checksum(
        {k: v for k, v in report.items() if k != "determinism_checksum"}
    )
    return report


def determinism_signature(report: dict[str, Any]) -> str:
    return _checksum(report)


def assert_determinism_equivalence(reports: Iterable[dict[str, Any]]) -> None:
    """Raise ValidationError when the reports' signatures differ."""
    signatures = [determinism_signature(r) for r in reports]
    if len(set(signatures)) > 1:
        raise ValidationError(
            "determinism_drift",
            "Run reports differ under identical conditions",
            signatures=tuple(signatures),
        )


__all__ = [
    "SCHEMA_VERSION",
    "assert_determinism_equivalence",
    "determinism_signature",
    "run_report",
]
