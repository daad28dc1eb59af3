"""Fitness evaluation and environmental selection for the genetic optimizer."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def calculate_fitness(vector: Iterable[float]) -> float:
    """Return the sum of squares of the vector's elements (lower is better)."""
    return sum(x * x for x in vector)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def environmental_selection(
    ratio: float, population: Sequence[Sequence[float]]
) -> dict[float, list[float]]:
    """Keep the fittest share of the population.

    Returns a mapping of fitness to individual, holding the
    ``round(len(population) * ratio)`` individuals with the lowest fitness.
    Individuals that share a fitness value collapse onto one key; the later
    one in fitness order wins.
    """
    if not 0.0 <= ratio <= 1.0:
        raise ValueError("Selection ratio must be between 0 and 1")

    ranked = sorted(
        ((calculate_fitness(individual), individual) for individual in population),
        key=lambda pair: pair[0],
    )
    num_selected = _round_half_away(len(population) * ratio)

    selected: dict[float, list[float]] = {}
    for fitness, individual in ranked[:num_selected]:
        selected[fitness] = list(individual)
    return selected