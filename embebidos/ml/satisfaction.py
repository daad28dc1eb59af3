"""Normalised satisfaction of a value within a range."""

from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """Whether low or high values are preferred."""

    MINIMIZATION = "minimizacion"
    MAXIMIZATION = "maximizacion"


def satisfaction(value: float, vmin: float, vmax: float, mode: Mode | str) -> float:
    """Return the squared normalised distance of ``value`` from the worst end.

    In minimisation mode the result is ``((vmax - value) / (vmax - vmin)) ** 2``;
    in maximisation mode it is ``((value - vmin) / (vmax - vmin)) ** 2``.
    """
    if vmax <= vmin:
        raise ValueError("Valor maximo no puede ser menor al minimo")
    try:
        mode = Mode(mode)
    except ValueError:
        raise ValueError("Modo debe ser minimizacion o maximizacion") from None

    span = vmax - vmin
    if mode is Mode.MINIMIZATION:
        return ((vmax - value) / span) ** 2
    return ((value - vmin) / span) ** 2