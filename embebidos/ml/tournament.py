"""Binary tournament parent selection."""

from __future__ import annotations

import random
import warnings
from collections.abc import Sequence

from embebidos.ml.selection import calculate_fitness

Parent = tuple[float, list[float]]


def binary_tournament(
    population: Sequence[Sequence[float]],
    num_parents: int,
    rng: random.Random | None = None,
) -> list[Parent]:
    """Select parents by repeated two-way tournaments.

    The number of parents is made even (at least 2) and capped to the largest
    even number not above the population size. Each tournament compares two
    distinct individuals and keeps the one with lower fitness.
    """
    if num_parents <= 0:
        raise ValueError("Number of parents must be positive")
    if not population:
        raise ValueError("Population cannot be empty")

    rng = rng if rng is not None else random.Random()

    num_parents -= num_parents % 2
    if num_parents == 0:
        num_parents = 2

    pop_size = len(population)
    if num_parents > pop_size:
        num_parents = pop_size - pop_size % 2
        warnings.warn(
            f"Adjusted number of parents to {num_parents} to match population size",
            stacklevel=2,
        )

    parents: list[Parent] = []
    for _ in range(num_parents):
        idx1 = rng.randrange(pop_size)
        idx2 = rng.randrange(pop_size)
        while idx2 == idx1:
            idx2 = rng.randrange(pop_size)

        fitness1 = calculate_fitness(population[idx1])
        fitness2 = calculate_fitness(population[idx2])
        if fitness1 < fitness2:
            parents.append((fitness1, list(population[idx1])))
        else:
            parents.append((fitness2, list(population[idx2])))
    return parents