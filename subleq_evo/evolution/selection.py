"""Parent and survivor selection."""

from __future__ import annotations

import random
from typing import Sequence

from subleq_evo.evolution.genome import Genome


def select_parents(population: Sequence[Genome], rng: random.Random) -> tuple[Genome, Genome]:
    """Two independent uniform draws, with replacement, over the whole population.

    Fitness plays no part here; selective pressure only comes from the
    replication check on the best individual.
    """
    if not population:
        raise ValueError("Cannot select parents from an empty population")
    size = len(population)
    return population[rng.randrange(size)], population[rng.randrange(size)]


def select_best(scores: Sequence[int]) -> int:
    """Index of the highest score; ties resolve to the first occurrence."""
    if not scores:
        raise ValueError("Cannot select from an empty score list")
    best_index = 0
    for i, score in enumerate(scores):
        if score > scores[best_index]:
            best_index = i
    return best_index


__all__ = ["select_parents", "select_best"]
