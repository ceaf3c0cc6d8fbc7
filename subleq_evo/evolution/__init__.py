"""Evolutionary engine for subleq_evo."""

from .genome import Genome
from .fitness import check_replication, evaluate_fitness, verify_replication
from .operators import crossover, mutate
from .selection import select_best, select_parents
from .loop import EvolutionResult, run_evolution

__all__ = [
    "Genome",
    "check_replication",
    "evaluate_fitness",
    "verify_replication",
    "crossover",
    "mutate",
    "select_best",
    "select_parents",
    "EvolutionResult",
    "run_evolution",
]
