import random

import pytest

from embebidos.ml.selection import calculate_fitness
from embebidos.ml.tournament import binary_tournament


@pytest.fixture
def population():
    return [
        [1.0, 1.0],
        [2.0, 2.0],
        [3.0, 3.0],
        [4.0, 4.0],
    ]


def test_binary_tournament(population):
    parents = binary_tournament(population, 4, random.Random(1))
    assert len(parents) == 4
    for fitness, parent in parents:
        assert fitness == calculate_fitness(parent)


def test_binary_tournament_invalid_num_parents():
    with pytest.raises(ValueError, match="Number of parents must be positive"):
        binary_tournament([[1.0, 2.0]], 0)


def test_binary_tournament_empty_population():
    with pytest.raises(ValueError, match="Population cannot be empty"):
        binary_tournament([], 2)


def test_worst_individual_never_wins(population):
    parents = binary_tournament(population, 4, random.Random(7))
    for _ in range(20):
        parents += binary_tournament(population, 4)
    assert len(parents) == 84
    assert max(fitness for fitness, _ in parents) <= 18.0
    assert {fitness for fitness, _ in parents} <= {2.0, 8.0, 18.0}


def test_odd_count_is_rounded_down(population):
    assert len(binary_tournament(population, 3, random.Random(2))) == 2


def test_one_parent_becomes_two(population):
    assert len(binary_tournament(population, 1, random.Random(3))) == 2


def test_too_many_parents_warns_and_caps(population):
    with pytest.warns(UserWarning, match="Adjusted number of parents to 4"):
        parents = binary_tournament(population, 6, random.Random(4))
    assert len(parents) == 4


def test_seeded_runs_are_reproducible(population):
    first = binary_tournament(population, 4, random.Random(42))
    second = binary_tournament(population, 4, random.Random(42))
    assert first == second


def test_parents_are_copies(population):
    parents = binary_tournament(population, 2, random.Random(5))
    parents[0][1].append(99.0)
    assert all(len(individual) == 2 for individual in population)