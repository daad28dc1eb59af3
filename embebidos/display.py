"""Text reports of tournament results and mappings, for debugging."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal

_RULE = "-" * 50


def _format_number(value: float) -> str:
    """Plain decimal text: integral values without a fraction, never exponents."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_tournament_results(
    parent_matrix: Sequence[Sequence[Sequence[float]]],
) -> str:
    """Render each parent's minimum value and vector as a report.

    Every parent is a pair of rows: the first starts with its minimum value,
    the second is its vector.
    """
    lines = ["Resultados Torneo Binario:", _RULE]
    for number, (first_row, vector) in enumerate(parent_matrix, start=1):
        lines.append(f"Padre {number}:")
        lines.append(f"Valor Minimo: {first_row[0]:.2f}")
        lines.append(f"Vector: [{', '.join(_format_number(v) for v in vector)}]")
        lines.append(_RULE)
    return "\n".join(lines) + "\n"


def print_tournament_results(parent_matrix: Sequence[Sequence[Sequence[float]]]) -> None:
    """Print the tournament report."""
    print(format_tournament_results(parent_matrix), end="")


def format_mapping(mapping: Mapping[object, object]) -> str:
    """Render each key and value with its type name."""
    return "".join(
        f"Key: {key!r}, Type: {type(key).__name__}\n"
        f"Valor: {value!r}, Type: {type(value).__name__}\n\n"
        for key, value in mapping.items()
    )


def print_mapping(mapping: Mapping[object, object]) -> None:
    """Print each key and value with its type name."""
    print(format_mapping(mapping), end="")