"""Generational search for a self-replicating SUBLEQ program.

Implements:
- initialize_population: random genomes, one derived RNG stream per slot
- evaluate_population: scatter/gather fitness evaluation over worker threads,
  results aligned with population order
- next_generation: uniform parent selection, crossover and mutation into a
  brand new population
- run_evolution: evaluate → pick best → verify → reproduce, until a
  replicator is verified or the generation budget is exhausted
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from subleq_evo.config import validate_config
from subleq_evo.evolution.fitness import check_replication, evaluate_fitness
from subleq_evo.evolution.genome import Genome
from subleq_evo.evolution.operators import crossover, mutate
from subleq_evo.evolution.selection import select_best, select_parents
from subleq_evo.reporting import (
    BaseReporter,
    ExhaustionRecord,
    GenerationRecord,
    SuccessRecord,
)
from subleq_evo.utils.rng_manager import RNGManager
from subleq_evo.vm.executor import SubleqVM


@dataclass
class EvolutionResult:
    """Terminal outcome of a search.

    Attributes:
        success: True when a replicator was verified
        generations_run: Number of generations evaluated
        best_fitness_history: Best score of every evaluated generation
        genome: The verified replicator (success only)
        final_memory: Memory image after running the replicator (success only)
        step_count: Instructions executed by the replicator (success only)
    """

    success: bool
    generations_run: int
    best_fitness_history: list[int] = field(default_factory=list)
    genome: list[int] | None = None
    final_memory: list[int] | None = None
    step_count: int | None = None


def initialize_population(config: dict[str, Any], rng_manager: RNGManager) -> list[Genome]:
    return [
        Genome.random(config, rng_manager.get_rng_for_initialization(i))
        for i in range(int(config['population_size']))
    ]


def evaluate_population(population: list[Genome], vm: SubleqVM, config: dict[str, Any]) -> list[int]:
    """Fitness of every genome, in population order.

    Each evaluation only reads its own genome and builds its own memory
    image, so evaluations run concurrently without locking.
    """
    if not config.get('parallel_execution', True) or len(population) <= 1:
        return [evaluate_fitness(g, vm) for g in population]

    with ThreadPoolExecutor(max_workers=config.get('max_workers')) as pool:
        # map yields in submission order regardless of completion order
        return list(pool.map(lambda g: evaluate_fitness(g, vm), population))


def next_generation(population: list[Genome], generation_index: int, config: dict[str, Any],
                    rng_manager: RNGManager) -> list[Genome]:
    """Build a full replacement population; ``population`` is left untouched."""
    children: list[Genome] = []
    size = int(config['population_size'])
    while len(children) < size:
        rng = rng_manager.get_rng_for_offspring(generation_index, len(children))
        parent1, parent2 = select_parents(population, rng)
        child = crossover(parent1, parent2, config, rng)
        children.append(mutate(child, config, rng))
    return children


def run_evolution(config: dict[str, Any] | None = None, rng_manager: RNGManager | None = None,
                  reporter: BaseReporter | None = None) -> EvolutionResult:
    """Search until a self-replicator is verified or generations run out.

    Args:
        config: Partial configuration (validated before any work starts).
        rng_manager: Source of randomness; defaults to RNGManager(config['seed']).
        reporter: Receives per-generation and terminal records.

    Returns:
        EvolutionResult; exhaustion is a normal result, not an exception.
    """
    config = validate_config(config)
    rng_manager = rng_manager or RNGManager(config['seed'])
    reporter = reporter or BaseReporter()
    vm = SubleqVM.from_config(config)
    generations = int(config['generations'])

    logging.info(
        f"Starting search: population={config['population_size']} generations={generations} "
        f"memory={config['memory_size']} seed={rng_manager.seed}"
    )

    population = initialize_population(config, rng_manager)
    history: list[int] = []

    for generation_index in range(generations):
        scores = evaluate_population(population, vm, config)
        best_index = select_best(scores)
        best_fitness = scores[best_index]
        history.append(best_fitness)
        reporter.on_generation(GenerationRecord(generation_index, best_fitness))
        logging.debug(f"Generation {generation_index}: best fitness {best_fitness} at slot {best_index}")

        best = population[best_index]
        verified, (memory, steps) = check_replication(best, vm)
        if verified:
            logging.info(f"Replicator of length {len(best)} verified in generation {generation_index}")
            reporter.on_success(SuccessRecord(genome=list(best.code), final_memory=memory, step_count=steps))
            return EvolutionResult(
                success=True,
                generations_run=generation_index + 1,
                best_fitness_history=history,
                genome=list(best.code),
                final_memory=memory,
                step_count=steps,
            )

        population = next_generation(population, generation_index, config, rng_manager)

    logging.info(f"No replicator verified within {generations} generations")
    reporter.on_exhaustion(ExhaustionRecord(generations))
    return EvolutionResult(success=False, generations_run=generations, best_fitness_history=history)


__all__ = [
    "EvolutionResult",
    "evaluate_population",
    "initialize_population",
    "next_generation",
    "run_evolution",
]
