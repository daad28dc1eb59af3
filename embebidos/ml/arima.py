"""A small ARIMA(p, d, q) model fitted by iterated least squares."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_ITERATIONS = 5


class ArimaError(Exception):
    """Raised when a model cannot be fitted or used for forecasting."""


class Arima:
    """ARIMA model with AR order ``p``, differencing order ``d`` and MA order ``q``."""

    def __init__(self, p: int, d: int, q: int) -> None:
        for name, order in (("p", p), ("d", d), ("q", q)):
            if order < 0:
                raise ValueError(f"{name} must be non-negative")
        self.p = p
        self.d = d
        self.q = q
        self.intercept: float | None = None
        self.ar_params: np.ndarray | None = None
        self.ma_params: np.ndarray | None = None

    @property
    def is_fitted(self) -> bool:
        """Whether parameters have been estimated."""
        return (
            self.ar_params is not None
            and self.ma_params is not None
            and self.intercept is not None
        )

    def _difference(self, series: np.ndarray) -> np.ndarray:
        result = series
        for _ in range(self.d):
            if result.size == 0:
                raise ArimaError("Series too short to difference")
            result = np.diff(result)
        return result

    def _undifference(self, diff_preds: np.ndarray, orig_series: np.ndarray) -> np.ndarray:
        result = diff_preds
        last = orig_series[-1] if self.d else 0.0
        for _ in range(self.d):
            result = last + np.cumsum(result)
        return result

    def _params(self) -> tuple[float, np.ndarray, np.ndarray]:
        intercept = self.intercept if self.intercept is not None else 0.0
        ar = self.ar_params if self.ar_params is not None else np.zeros(0)
        ma = self.ma_params if self.ma_params is not None else np.zeros(0)
        return intercept, ar, ma

    def fit(self, data: Sequence[float]) -> None:
        """Estimate intercept, AR and MA parameters from ``data``."""
        series = np.asarray(data, dtype=float)
        p, q = self.p, self.q
        if len(series) <= p + self.d + q:
            raise ArimaError("Not enough data points to fit the model")
        if q > p:
            raise ArimaError("MA order must not exceed AR order")

        diff = self._difference(series)
        n = len(diff)
        effective_n = n - max(p, q)
        if effective_n <= 0:
            raise ArimaError("Not enough data points after accounting for lags")

        design = np.zeros((effective_n, p + q + 1))
        design[:, 0] = 1.0
        for j in range(p):
            start = p - j - 1
            design[:, j + 1] = diff[start:start + effective_n]

        residuals = np.zeros(n)
        response = diff[p:]

        for _ in range(_ITERATIONS):
            for j in range(q):
                start = p - j - 1
                design[:, p + j + 1] = residuals[start:start + effective_n]

            try:
                coefficients = np.linalg.solve(design.T @ design, design.T @ response)
            except np.linalg.LinAlgError as exc:
                raise ArimaError("Failed to solve linear system") from exc

            self.intercept = float(coefficients[0])
            self.ar_params = coefficients[1:p + 1].copy()
            self.ma_params = coefficients[p + 1:].copy()

            fitted = self._predict_in_sample(diff)
            residuals[p:p + len(fitted)] = diff[p:p + len(fitted)] - fitted

    def _predict_in_sample(self, diff: np.ndarray) -> np.ndarray:
        p, q = self.p, self.q
        n = len(diff)
        effective_n = n - p
        intercept, ar, ma = self._params()

        predictions = np.zeros(effective_n)
        residuals = np.zeros(n)
        for i in range(effective_n):
            pred = intercept
            for j in range(min(p, len(ar))):
                pred += ar[j] * diff[i + p - j - 1]
            for j in range(min(q, len(ma), i + 1)):
                pred += ma[j] * residuals[i - j + p - 1]
            predictions[i] = pred
            residuals[i + p] = diff[i + p] - pred
        return predictions

    def forecast(self, data: Sequence[float], steps: int) -> list[float]:
        """Forecast ``steps`` future values following ``data`` on its original scale."""
        if not self.is_fitted:
            raise ArimaError("Model must be fitted before forecasting")
        if steps < 0:
            raise ValueError("steps must be non-negative")

        series = np.asarray(data, dtype=float)
        p, q = self.p, self.q
        diff = self._difference(series)
        n = len(diff)
        if n - p < max(q, 1):
            raise ArimaError("Not enough data points to forecast")

        intercept, ar, ma = self._params()
        latest_values = diff[n - max(p, 1):]
        fitted = self._predict_in_sample(diff)
        all_residuals = diff[p:] - fitted
        latest_residuals = all_residuals[len(all_residuals) - max(q, 1):]

        forecasts: list[float] = []
        for i in range(steps):
            value = intercept
            for j in range(min(p, len(ar))):
                if i <= j:
                    past = latest_values[len(latest_values) - 1 - (j - i)]
                else:
                    past = forecasts[i - j - 1]
                value += ar[j] * past
            for j in range(min(q, len(ma), len(latest_residuals))):
                if i <= j:
                    value += ma[j] * latest_residuals[len(latest_residuals) - 1 - (j - i)]
            forecasts.append(float(value))

        restored = self._undifference(np.array(forecasts, dtype=float), series)
        return [float(x) for x in restored]