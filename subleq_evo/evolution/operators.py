"""Mutation and crossover operators."""

from __future__ import annotations

import random
from typing import Any

from subleq_evo.evolution.genome import Genome, random_value


def crossover(parent1: Genome, parent2: Genome, config: dict, rng: random.Random) -> Genome:
    """Produce one child from two parents with a single split point.

    Behavior:
    - ``split`` is drawn from [0, min_len) and ``child_len`` from [min_len, max_len]
    - cells before ``split`` come from ``parent1``, cells in [split, min_len) from ``parent2``
    - any cells past ``min_len`` are fresh uniform values
    - Parents are only read; the child owns new storage.
    """
    memory_size = int(config['memory_size'])
    len1, len2 = len(parent1.code), len(parent2.code)
    min_len = min(len1, len2)
    max_len = max(len1, len2)

    split = rng.randrange(min_len)
    child_len = rng.randint(min_len, max_len)

    code: list[int] = parent1.code[:split] + parent2.code[split:min_len]
    for _ in range(min_len, child_len):
        code.append(random_value(memory_size, rng))

    return Genome(code=code)


def mutate(genome: Genome, config: dict[str, Any], rng: random.Random) -> Genome:
    """Mutate ``genome`` in place and return it for chaining."""
    genome.mutate(float(config['mutation_rate']), int(config['memory_size']), rng)
    return genome


__all__ = ["crossover", "mutate"]
