"""Fitness evaluation and replication verification.

A genome is scored by running it once and scanning the final memory for a
copy of itself. Only offsets past the genome's own load region are scanned,
up to the last offset where a full-length window still fits:

    offsets = [len(code), memory_size - len(code)]

Scoring:
- a full copy exists: ``1000 * len / (len * max(steps, 1))`` (floored), so
  faster replicators score higher
- otherwise: the longest prefix of the genome found at any offset, a gradient
  toward full replication

``verify_replication`` is the authoritative success test and requires an
exact full-length copy in the same offset range.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from subleq_evo.evolution.genome import Genome
from subleq_evo.vm.executor import ExecutionResult, SubleqVM

FULL_COPY_SCALE = 1000


def _scan_windows(code: Sequence[int], memory: Sequence[int]) -> tuple[np.ndarray, int]:
    """Element-wise match matrix for every scanned offset.

    Returns (matches, first_offset); ``matches[k, j]`` tells whether
    ``memory[first_offset + k + j] == code[j]``. The matrix has zero rows
    when no offset fits.
    """
    n = len(code)
    mem = np.asarray(memory, dtype=np.int64)
    first = n
    last = mem.shape[0] - n
    if n == 0 or last < first:
        return np.zeros((0, n), dtype=bool), first
    windows = sliding_window_view(mem, n)[first:last + 1]
    return windows == np.asarray(code, dtype=np.int64), first


def longest_prefix_match(code: Sequence[int], memory: Sequence[int]) -> int:
    """Longest prefix of ``code`` found at any scanned offset of ``memory``."""
    matches, _ = _scan_windows(code, memory)
    if matches.shape[0] == 0:
        return 0
    # argmin on a bool row is the first mismatch; full rows have none
    prefix = np.where(matches.all(axis=1), matches.shape[1], matches.argmin(axis=1))
    return int(prefix.max())


def find_replica_offset(code: Sequence[int], memory: Sequence[int]) -> int | None:
    """First scanned offset holding an exact copy of ``code``, or None."""
    matches, first = _scan_windows(code, memory)
    hits = np.flatnonzero(matches.all(axis=1))
    if hits.size == 0:
        return None
    return first + int(hits[0])


def score_execution(code: Sequence[int], memory: Sequence[int], steps: int) -> int:
    n = len(code)
    best_match = longest_prefix_match(code, memory)
    if n > 0 and best_match == n:
        return (FULL_COPY_SCALE * best_match) // (n * max(steps, 1))
    return best_match


def evaluate_fitness(genome: Genome, vm: SubleqVM) -> int:
    """Run ``genome`` once and score the resulting memory image."""
    memory, steps = vm.execute(genome.code)
    return score_execution(genome.code, memory, steps)


def check_replication(genome: Genome, vm: SubleqVM) -> tuple[bool, ExecutionResult]:
    """Run ``genome`` once; return the replication verdict and the execution."""
    result = vm.execute(genome.code)
    return find_replica_offset(genome.code, result.memory) is not None, result


def verify_replication(genome: Genome, vm: SubleqVM) -> bool:
    """True iff execution leaves an exact copy of ``genome`` past its load region."""
    verified, _ = check_replication(genome, vm)
    return verified


__all__ = [
    "FULL_COPY_SCALE",
    "check_replication",
    "evaluate_fitness",
    "find_replica_offset",
    "longest_prefix_match",
    "score_execution",
    "verify_replication",
]
