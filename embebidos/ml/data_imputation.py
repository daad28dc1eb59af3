"""Simple tools to fill in and smooth sensor series."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, islice


def linear_interpolation(values: Sequence[float], missing_index: int) -> float:
    """Estimate ``values[missing_index]`` from its two neighbours."""
    if not 1 <= missing_index < len(values) - 1:
        raise IndexError("missing_index must have a neighbour on each side")
    before = values[missing_index - 1]
    after = values[missing_index + 1]
    return before + (after - before) / 2.0


def simple_exponential_smoothing(values: Sequence[float], alpha: float) -> list[float]:
    """Smooth a series: ``s[0] = x[0]``, ``s[t] = alpha*x[t] + (1-alpha)*s[t-1]``."""
    if not values:
        return []
    return list(
        accumulate(
            islice(values, 1, None),
            lambda previous, current: alpha * current + (1.0 - alpha) * previous,
            initial=values[0],
        )
    )


def median(data: Sequence[float], time_interval: int) -> list[float]:
    """Return the median of each consecutive chunk of ``time_interval`` values."""
    if not data or time_interval <= 0:
        return []

    result = []
    for start in range(0, len(data), time_interval):
        segment = sorted(data[start:start + time_interval])
        mid = len(segment) // 2
        if len(segment) % 2 == 0:
            result.append((segment[mid - 1] + segment[mid]) / 2.0)
        else:
            result.append(segment[mid])
    return result