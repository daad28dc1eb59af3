"""Multi-point crossover and uniform-reset mutation."""

from __future__ import annotations

import random
from collections.abc import Sequence

from embebidos.ml.tournament import Parent


def crossover(
    parents: Sequence[Parent],
    num_crosspoints: int,
    rng: random.Random | None = None,
) -> list[list[float]]:
    """Cross consecutive pairs of parents at random points.

    Each pair yields two children. Crosspoints are distinct positions in
    ``1..len-1``; segments starting at every other crosspoint are swapped.
    """
    if len(parents) % 2 != 0:
        raise ValueError("Number of parents must be even")
    if not parents:
        return []

    vector_length = len(parents[0][1])
    if num_crosspoints >= vector_length:
        raise ValueError("Number of crosspoints must be less than vector length")

    rng = rng if rng is not None else random.Random()
    offspring: list[list[float]] = []

    for (_, parent1), (_, parent2) in zip(parents[::2], parents[1::2]):
        child1 = list(parent1)
        child2 = list(parent2)

        crosspoints = sorted(rng.sample(range(1, vector_length), num_crosspoints))
        ends = crosspoints[1:] + [vector_length]
        for start, end in list(zip(crosspoints, ends))[::2]:
            child1[start:end], child2[start:end] = child2[start:end], child1[start:end]

        offspring.append(child1)
        offspring.append(child2)

    return offspring


def mutation(
    mutation_rate: float,
    gene_min: float,
    gene_max: float,
    offspring: Sequence[Sequence[float]],
    rng: random.Random | None = None,
) -> list[list[float]]:
    """Replace each gene, with probability ``mutation_rate``, by a uniform value."""
    if not 0.0 <= mutation_rate <= 1.0:
        raise ValueError("Mutation rate must be between 0 and 1")

    rng = rng if rng is not None else random.Random()
    return [
        [
            rng.uniform(gene_min, gene_max) if rng.random() < mutation_rate else gene
            for gene in individual
        ]
        for individual in offspring
    ]