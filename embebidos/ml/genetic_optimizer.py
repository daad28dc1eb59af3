"""A genetic optimizer minimising the sum of squares of a vector."""

from __future__ import annotations

import logging
import math
import random
import warnings

from embebidos.ml.crossover_mutation import crossover, mutation
from embebidos.ml.selection import environmental_selection
from embebidos.ml.tournament import binary_tournament

logger = logging.getLogger(__name__)

_CROSSPOINTS = 2


class GeneticOptimizer:
    """Evolves a population with tournament selection, crossover and mutation.

    Lower fitness (sum of squares) is better. Out-of-range settings are
    adjusted rather than rejected, except for sizes that are not positive.
    """

    def __init__(
        self,
        pop_size: int,
        vector_size: int,
        num_parents: int,
        mutation_rate: float,
        selection_ratio: float,
        gene_min: float,
        gene_max: float,
        rng: random.Random | None = None,
    ) -> None:
        if pop_size <= 0:
            raise ValueError("Population size must be positive")
        if vector_size <= 0:
            raise ValueError("Vector size must be positive")
        if num_parents <= 0:
            raise ValueError("Number of parents must be positive")

        pop_size = max(4, pop_size)

        if num_parents > pop_size:
            num_parents = pop_size - pop_size % 2
            warnings.warn(
                f"Adjusted number of parents to {num_parents} to match population size",
                stacklevel=2,
            )
        elif num_parents % 2 != 0:
            num_parents -= 1
            warnings.warn(
                f"Adjusted number of parents to {num_parents} to ensure even number",
                stacklevel=2,
            )

        gene_min = min(gene_min, gene_max)
        gene_max = max(gene_max, gene_min)

        self.pop_size = pop_size
        self.vector_size = vector_size
        self.num_parents = num_parents
        self.mutation_rate = min(max(mutation_rate, 0.0), 1.0)
        self.selection_ratio = min(max(selection_ratio, 0.1), 1.0)
        self.gene_min = gene_min
        self.gene_max = gene_max
        self._rng = rng if rng is not None else random.Random()
        self._population = [self._random_individual() for _ in range(pop_size)]

    @property
    def population(self) -> list[list[float]]:
        """A copy of the current population."""
        return [list(individual) for individual in self._population]

    def _random_individual(self) -> list[float]:
        return [
            self._rng.uniform(self.gene_min, self.gene_max)
            for _ in range(self.vector_size)
        ]

    def _maintain_population_size(self) -> None:
        shortfall = self.pop_size - len(self._population)
        if shortfall > 0:
            self._population.extend(self._random_individual() for _ in range(shortfall))
        elif shortfall < 0:
            del self._population[self.pop_size:]

    def step(self) -> float:
        """Run one generation and return the best fitness among the survivors."""
        self._maintain_population_size()

        parents = binary_tournament(self._population, self.num_parents, self._rng)
        offspring = crossover(parents, _CROSSPOINTS, self._rng)
        mutated = mutation(
            self.mutation_rate, self.gene_min, self.gene_max, offspring, self._rng
        )
        selected = environmental_selection(self.selection_ratio, mutated)

        self._population = [list(individual) for individual in selected.values()]
        self._maintain_population_size()

        return min(selected, default=math.inf)

    def optimize(
        self, max_generations: int, target_fitness: float | None = None
    ) -> list[float]:
        """Run up to ``max_generations`` generations; return the best fitness of each.

        Stops early once a generation's best fitness is at or below
        ``target_fitness``.
        """
        history: list[float] = []
        for generation in range(max_generations):
            best = self.step()
            history.append(best)
            if target_fitness is not None and best <= target_fitness:
                logger.info("Target fitness reached at generation %d", generation)
                break
        return history