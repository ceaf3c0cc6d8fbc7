import random

import pytest

from subleq_evo.config import PRESET_MINIMAL, validate_config
from subleq_evo.evolution.genome import Genome
from subleq_evo.evolution.operators import crossover, mutate
from subleq_evo.evolution.selection import select_best, select_parents


def _config(**overrides):
    cfg = dict(PRESET_MINIMAL)
    cfg.update(overrides)
    return validate_config(cfg)


def _random_genome(rng, length, memory_size=64):
    return Genome([rng.randrange(-memory_size, memory_size) for _ in range(length)])


def test_random_genome_respects_length_and_value_ranges():
    cfg = _config()
    rng = random.Random(1)
    for _ in range(200):
        g = Genome.random(cfg, rng)
        assert cfg['min_program_length'] <= len(g) <= cfg['max_program_length']
        assert all(-cfg['memory_size'] <= v < cfg['memory_size'] for v in g.code)


def test_crossover_child_length_within_parent_bounds():
    cfg = _config()
    rng = random.Random(2)
    for _ in range(500):
        a = _random_genome(rng, rng.randint(1, 20))
        b = _random_genome(rng, rng.randint(1, 20))
        child = crossover(a, b, cfg, rng)
        assert min(len(a), len(b)) <= len(child) <= max(len(a), len(b))
        assert all(-64 <= v < 64 for v in child.code)


def test_crossover_prefix_property_for_realized_split():
    cfg = _config()
    data_rng = random.Random(5)
    for seed in range(100):
        a = _random_genome(data_rng, data_rng.randint(1, 12))
        b = _random_genome(data_rng, data_rng.randint(1, 12))
        child = crossover(a, b, cfg, random.Random(seed))
        min_len = min(len(a), len(b))
        # Replay the first draw of the same stream to recover the split
        split = random.Random(seed).randrange(min_len)
        assert child.code[:split] == a.code[:split]
        assert child.code[split:min_len] == b.code[split:min_len]


def test_crossover_leaves_parents_untouched():
    cfg = _config(mutation_rate=1.0)
    rng = random.Random(9)
    a = Genome([1, 2, 3, 4, 5, 6])
    b = Genome([7, 8, 9, 10, 11, 12, 13, 14])
    child = crossover(a, b, cfg, rng)
    mutate(child, cfg, rng)
    assert a.code == [1, 2, 3, 4, 5, 6]
    assert b.code == [7, 8, 9, 10, 11, 12, 13, 14]
    assert child.code is not a.code and child.code is not b.code


def test_mutation_never_changes_length():
    rng = random.Random(4)
    for rate in (0.0, 0.05, 0.5, 1.0):
        cfg = _config(mutation_rate=rate)
        for _ in range(100):
            g = _random_genome(rng, rng.randint(1, 12))
            before = len(g)
            mutate(g, cfg, rng)
            assert len(g) == before


def test_zero_mutation_rate_is_identity():
    cfg = _config(mutation_rate=0.0)
    g = Genome([1, -2, 3, -4, 5, -6])
    mutate(g, cfg, random.Random(0))
    assert g == Genome([1, -2, 3, -4, 5, -6])


def test_full_mutation_rate_resamples_within_range():
    cfg = _config(mutation_rate=1.0)
    g = Genome([1000] * 10)
    mutate(g, cfg, random.Random(0))
    assert all(-64 <= v < 64 for v in g.code)


def test_genome_equality_is_element_wise():
    assert Genome([1, 2, 3]) == Genome([1, 2, 3])
    assert Genome([1, 2, 3]) != Genome([1, 2, 4])
    g = Genome([1, 2, 3])
    c = g.copy()
    c.code[0] = 9
    assert g.code[0] == 1


def test_select_parents_draws_uniformly_with_replacement():
    population = [Genome([i]) for i in range(4)]
    rng = random.Random(8)
    seen = set()
    same = 0
    for _ in range(400):
        p1, p2 = select_parents(population, rng)
        assert p1 in population and p2 in population
        seen.add(p1.code[0])
        seen.add(p2.code[0])
        same += p1 is p2
    assert seen == {0, 1, 2, 3}
    assert same > 0


def test_select_parents_rejects_empty_population():
    with pytest.raises(ValueError):
        select_parents([], random.Random(0))


def test_select_best_prefers_first_of_ties():
    assert select_best([3, 7, 1, 7]) == 1
    assert select_best([0, 0, 0]) == 0
    assert select_best([5]) == 0
