"""Random sample generators for trying out the analysis tools."""

from __future__ import annotations

import math
import random


def _round_half_away(value: float) -> float:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def random_floats(
    n: int, low: float, high: float, rng: random.Random | None = None
) -> list[float]:
    """Return ``n`` uniform floats in ``[low, high)`` rounded to two decimals."""
    if not low < high:
        raise ValueError("low must be less than high")
    rng = rng if rng is not None else random.Random()
    return [
        _round_half_away(rng.uniform(low, high) * 100.0) / 100.0 for _ in range(n)
    ]


def random_ints(
    low: int, high: int, n: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``n`` integers drawn uniformly from ``low`` to ``high`` inclusive."""
    if low > high:
        raise ValueError("low must not exceed high")
    rng = rng if rng is not None else random.Random()
    return [rng.randint(low, high) for _ in range(n)]


def random_matrix(
    low: int, high: int, n: int, m: int, rng: random.Random | None = None
) -> list[list[int]]:
    """Return ``m`` rows of ``n`` integers from ``low`` to ``high`` inclusive."""
    if low > high:
        raise ValueError("low must not exceed high")
    rng = rng if rng is not None else random.Random()
    return [random_ints(low, high, n, rng) for _ in range(m)]