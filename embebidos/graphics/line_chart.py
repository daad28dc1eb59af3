"""Line charts with marked data points."""

from __future__ import annotations

from collections.abc import Sequence

from matplotlib.figure import Figure


def line_chart(
    x: Sequence[float],
    y: Sequence[float],
    title: str,
    x_label: str,
    y_label: str,
    file_name: str,
) -> None:
    """Save an 800x600 chart of ``y`` against ``x`` with a line and red points."""
    if len(x) != len(y):
        raise ValueError("Tiene que ser la misma cantidad de datos: X e Y")
    if not x:
        raise ValueError("No hay datos para graficar")

    fig = Figure(figsize=(8, 6), dpi=100)
    ax = fig.add_subplot()
    ax.plot(x, y, color="blue", label="Datos")
    ax.scatter(x, y, s=50, color="red", zorder=3)

    if min(x) < max(x):
        ax.set_xlim(min(x), max(x))
    if min(y) < max(y):
        ax.set_ylim(min(y), max(y))

    ax.set_title(title, fontsize=20)
    ax.set_xlabel(x_label, fontsize=14)
    ax.set_ylabel(y_label, fontsize=14)
    ax.locator_params(axis="both", nbins=10)
    ax.legend(facecolor="white", edgecolor="black")
    fig.savefig(file_name, dpi=100)