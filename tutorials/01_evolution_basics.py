"""
Evolution Basics Tutorial

Goals:
- Create random genomes deterministically
- Apply single-point crossover and per-cell mutation
- Score genomes with the self-copy fitness and the replication check
"""

from subleq_evo.config import preset
from subleq_evo.evolution.fitness import evaluate_fitness, verify_replication
from subleq_evo.evolution.genome import Genome
from subleq_evo.evolution.operators import crossover, mutate
from subleq_evo.utils.rng_manager import RNGManager
from subleq_evo.vm import SubleqVM


def main():
    config = preset('minimal', seed=42)
    rng = RNGManager(seed=config['seed'])
    vm = SubleqVM.from_config(config)

    r = rng.derive_rng('tutorial')
    parent1 = Genome.random(config, r)
    parent2 = Genome.random(config, r)
    print('parent_lengths:', len(parent1), len(parent2))

    # Child length lies between the parents' lengths
    child = crossover(parent1, parent2, config, r)
    mutate(child, config, r)
    print('child_length:', len(child))

    print('child_fitness:', evaluate_fitness(child, vm))
    print('child_replicates:', verify_replication(child, vm))

    # An all-zero program trivially "copies" itself into zeroed memory
    zeros = Genome([0] * 6)
    print('zeros_fitness:', evaluate_fitness(zeros, vm), 'replicates:', verify_replication(zeros, vm))


if __name__ == '__main__':
    main()
