"""Compute satisfaction scores against a random sample of readings."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from embebidos.ml.satisfaction import Mode, satisfaction
from embebidos.random_data import random_floats

_OBSERVED = [24.0, 40.0, 90.0]


def _describe(value: float) -> str:
    try:
        return f"Ok({satisfaction(value, *_bounds, Mode.MINIMIZATION)!r})"
    except ValueError as exc:
        return f'Err("{exc}")'


_bounds: tuple[float, float] = (0.0, 0.0)


def main(argv: Sequence[str] | None = None) -> int:
    """Draw random readings and print satisfaction scores for fixed values."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--count", type=int, default=100, help="number of readings")
    args = parser.parse_args(argv)
    if args.count <= 0:
        parser.error("--count must be positive")

    readings = random_floats(args.count, 10.0, 40.0, random.Random(args.seed))
    low, high = min(readings), max(readings)

    try:
        score = satisfaction(_OBSERVED[0], low, high, Mode.MAXIMIZATION)
    except ValueError as exc:
        print(f"Error: {exc}")
    else:
        print(f"Satisfaccion exitosa {score}")

    entries = []
    for value in _OBSERVED:
        try:
            entries.append(f"Ok({satisfaction(value, low, high, Mode.MINIMIZATION)!r})")
        except ValueError as exc:
            entries.append(f'Err("{exc}")')
    print(f"Satisfacciones: [{', '.join(entries)}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())