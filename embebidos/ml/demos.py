"""Example runs of the ARIMA model and the genetic optimizer."""

from __future__ import annotations

import random

from embebidos.ml.arima import Arima, ArimaError
from embebidos.ml.genetic_optimizer import GeneticOptimizer

_SERIES = [100.0, 105.0, 110.0, 112.0, 115.0, 120.0, 125.0, 130.0]


def run_arima_demo() -> list[float] | None:
    """Fit ARIMA(1, 1, 1) to a short series and print a 3-step forecast.

    Returns the forecasts, or None when the model could not produce them.
    """
    model = Arima(1, 1, 1)
    try:
        model.fit(_SERIES)
    except ArimaError as exc:
        print(f"Error: {exc}")
    else:
        print("Model fitted successfully")

    try:
        forecasts = model.forecast(_SERIES, 3)
    except ArimaError as exc:
        print(f"Error: {exc}")
        return None
    print(f"Forecasts: {forecasts}")
    return forecasts


def run_genetic_demo(rng: random.Random | None = None) -> list[float]:
    """Minimise the sum of squares of a 10-value vector and report progress."""
    optimizer = GeneticOptimizer(100, 10, 20, 0.5, 0.5, -10.0, 10.0, rng)

    print("Starting genetic optimization...")
    print("Target: Find a vector of 10 values that minimizes the sum of squares.")

    history = optimizer.optimize(100, 0.1)

    print(f"Optimization completed after {len(history)} generations")
    print(f"Initial best fitness: {history[0]:.6f}")
    print(f"Final best fitness: {history[-1]:.6f}")
    if history[0] != 0:
        improvement = 100.0 * (history[0] - history[-1]) / history[0]
        print(f"Fitness improved by {improvement:.2f}%")
    return history