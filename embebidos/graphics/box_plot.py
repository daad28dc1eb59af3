"""Temperature box plots drawn from a given five-number summary."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from matplotlib.figure import Figure

_BOX_COLOR = (0 / 255, 100 / 255, 200 / 255)


@dataclass(frozen=True)
class TemperatureQuartiles:
    """The five numbers a temperature box is drawn from."""

    min: float
    q1: float
    median: float
    q3: float
    max: float


def _box_stats(quartiles: TemperatureQuartiles) -> dict[str, float | list[float]]:
    """Quartiles of the five numbers, whiskers at 1.5 IQR beyond the box."""
    ordered = sorted(
        [quartiles.min, quartiles.q1, quartiles.median, quartiles.q3, quartiles.max]
    )
    lower, middle, upper = ordered[1], ordered[2], ordered[3]
    iqr = upper - lower
    return {
        "whislo": lower - 1.5 * iqr,
        "q1": lower,
        "med": middle,
        "q3": upper,
        "whishi": upper + 1.5 * iqr,
        "fliers": [],
    }


def _draw(
    filepath: str,
    title: str,
    quartiles: TemperatureQuartiles,
    y_range: tuple[float, float],
    y_label: str,
) -> None:
    fig = Figure(figsize=(8, 6), dpi=100)
    ax = fig.add_subplot()
    ax.bxp(
        [_box_stats(quartiles)],
        positions=[0],
        patch_artist=True,
        showfliers=False,
        boxprops={"facecolor": _BOX_COLOR, "edgecolor": _BOX_COLOR, "linewidth": 2},
        whiskerprops={"color": _BOX_COLOR, "linewidth": 2},
        capprops={"color": _BOX_COLOR, "linewidth": 2},
        medianprops={"color": "white", "linewidth": 2},
    )
    ax.set_xlim(-2, 2)
    ax.set_ylim(*y_range)
    ax.set_title(title, fontsize=20)
    ax.set_ylabel(y_label)
    ax.yaxis.grid(True, color="black", alpha=0.3)
    ax.xaxis.grid(False)
    fig.savefig(filepath, dpi=100)


def boxplotting(filepath: str, title: str, quartiles: TemperatureQuartiles) -> None:
    """Save an 800x600 box plot of ``quartiles`` on a 5-50 degree scale."""
    _draw(filepath, title, quartiles, (5.0, 50.0), "Temperatura")


def main(argv: Sequence[str] | None = None) -> int:
    """Draw an example temperature box plot."""
    parser = argparse.ArgumentParser(description="Draw an example temperature box plot.")
    parser.add_argument("output", nargs="?", default="boxplot.png")
    args = parser.parse_args(argv)

    example = TemperatureQuartiles(min=18.0, q1=22.0, median=25.0, q3=28.0, max=35.0)
    _draw(args.output, "Temperature Boxplot", example, (15.0, 40.0), "Temperatura (C)")
    print(f"Boxplot has been saved to '{args.output}'")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())