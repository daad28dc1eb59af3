"""Box-plot summary statistics and plots built from them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from matplotlib.figure import Figure

_WHISKER_FACTOR = 1.5


def _quantile(sorted_values: Sequence[float], tau: float) -> float:
    """Median-unbiased quantile (type 8) of already sorted values."""
    n = len(sorted_values)
    h = (n + 1.0 / 3.0) * tau + 1.0 / 3.0
    hf = int(h)
    if hf <= 0 or tau == 0.0:
        return sorted_values[0]
    if hf >= n or tau == 1.0:
        return sorted_values[-1]
    low = sorted_values[hf - 1]
    high = sorted_values[hf]
    return low + (h - hf) * (high - low)


@dataclass(frozen=True)
class BoxplotStatistics:
    """Five-number summary with the values that fall outside the whiskers."""

    min: float
    q1: float
    median: float
    q3: float
    max: float
    outliers: list[float]


@dataclass
class BoxplotData:
    """A labelled sample and its box-plot statistics.

    Whiskers reach the extreme values within 1.5 IQR of the quartiles;
    anything further out is an outlier.
    """

    label: str
    values: list[float]
    outliers: list[float] = field(init=False, default_factory=list)
    _quartiles: tuple[float, float, float] | None = field(
        init=False, default=None, repr=False
    )
    _whiskers: tuple[float, float] | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        self.values = [float(v) for v in self.values]
        self._calculate_statistics()

    def _calculate_statistics(self) -> None:
        if not self.values:
            return
        if any(math.isnan(v) for v in self.values):
            raise ValueError("values must not contain NaN")

        ordered = sorted(self.values)
        q1 = _quantile(ordered, 0.25)
        med = _quantile(ordered, 0.5)
        q3 = _quantile(ordered, 0.75)
        self._quartiles = (q1, med, q3)

        iqr = q3 - q1
        lower_bound = q1 - _WHISKER_FACTOR * iqr
        upper_bound = q3 + _WHISKER_FACTOR * iqr

        inside = [v for v in ordered if lower_bound <= v <= upper_bound]
        self.outliers = [v for v in ordered if v < lower_bound or v > upper_bound]
        self._whiskers = (min(inside), max(inside))

    def statistics(self) -> BoxplotStatistics | None:
        """Return the summary, or None when there are no values."""
        if self._quartiles is None or self._whiskers is None:
            return None
        q1, med, q3 = self._quartiles
        low, high = self._whiskers
        return BoxplotStatistics(low, q1, med, q3, high, list(self.outliers))


def create_boxplot(data: Sequence[BoxplotData], title: str, output_file: str) -> None:
    """Draw one box per sample, outliers in red, and save the image."""
    fig = Figure()
    ax = fig.add_subplot()

    boxes = []
    positions = []
    outlier_x: list[float] = []
    outlier_y: list[float] = []
    for index, sample in enumerate(data):
        stats = sample.statistics()
        if stats is None:
            continue
        boxes.append(
            {
                "label": sample.label,
                "whislo": stats.min,
                "q1": stats.q1,
                "med": stats.median,
                "q3": stats.q3,
                "whishi": stats.max,
                "fliers": [],
            }
        )
        positions.append(index)
        outlier_x.extend(index for _ in stats.outliers)
        outlier_y.extend(stats.outliers)

    if boxes:
        ax.bxp(
            boxes,
            positions=positions,
            showfliers=False,
            boxprops={"color": "black"},
            whiskerprops={"color": "black"},
            capprops={"color": "black"},
            medianprops={"color": "black"},
        )
    if outlier_y:
        ax.scatter(outlier_x, outlier_y, color="red", label="Outliers")
        ax.legend()

    if data:
        ax.set_xticks(range(len(data)), [sample.label for sample in data])
        ax.set_xlim(-0.5, len(data) - 0.5)
    ax.set_title(title)
    ax.set_xlabel("Samples")
    ax.set_ylabel("Values")
    ax.grid(True, color="gray")
    fig.savefig(output_file)


def line_example(output_file: str = "plot2.png") -> None:
    """Save a sample chart with two labelled lines."""
    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    y = [2.0, 3.5, 1.5, 4.0, 2.5]
    y2 = [1.0, 2.0, 3.0, 3.5, 4.5]

    fig = Figure()
    ax = fig.add_subplot()
    ax.plot(x, y, color="blue", label="Linea 1")
    ax.plot(x, y2, color="red", label="Linea 2")
    ax.legend()
    fig.savefig(output_file)