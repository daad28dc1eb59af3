import pytest

from embebidos.ml.arima import Arima, ArimaError

SAMPLE = [100.0, 105.0, 110.0, 112.0, 115.0, 120.0, 125.0, 130.0]


def _ar1_series(length, start=10.0):
    values = [start]
    for _ in range(length - 1):
        values.append(2.0 + 0.5 * values[-1])
    return values


def test_new_model_is_not_fitted():
    assert Arima(1, 1, 1).is_fitted is False


def test_negative_order_rejected():
    with pytest.raises(ValueError):
        Arima(-1, 0, 0)


def test_forecast_before_fit():
    with pytest.raises(ArimaError, match="Model must be fitted before forecasting"):
        Arima(1, 0, 0).forecast(SAMPLE, 3)


def test_not_enough_data():
    with pytest.raises(ArimaError, match="Not enough data points to fit the model"):
        Arima(2, 1, 1).fit([1.0, 2.0, 3.0, 4.0])


def test_ma_terms_start_from_zero_residuals_and_fail():
    model = Arima(1, 1, 1)
    with pytest.raises(ArimaError, match="Failed to solve linear system"):
        model.fit(SAMPLE)
    assert model.is_fitted is False


def test_ma_order_above_ar_order_rejected():
    with pytest.raises(ArimaError):
        Arima(0, 0, 1).fit(SAMPLE)


def test_ar1_recovers_generating_process():
    full = _ar1_series(13)
    model = Arima(1, 0, 0)
    model.fit(full[:10])
    assert model.is_fitted is True
    assert model.forecast(full[:10], 3) == pytest.approx(full[10:], abs=1e-6)


def test_white_noise_model_forecasts_mean():
    model = Arima(0, 0, 0)
    model.fit([1.0, 2.0, 3.0, 4.0, 5.0])
    assert model.forecast([1.0, 2.0, 3.0, 4.0, 5.0], 3) == pytest.approx([3.0] * 3)


def test_random_walk_with_drift_has_constant_steps():
    model = Arima(0, 1, 0)
    model.fit(SAMPLE)
    forecasts = model.forecast(SAMPLE, 4)
    assert len(forecasts) == 4
    steps = [b - a for a, b in zip([SAMPLE[-1]] + forecasts, forecasts)]
    assert steps == pytest.approx([steps[0]] * 4)
    assert steps[0] == pytest.approx(model.intercept)


def test_zero_steps_gives_empty_forecast():
    model = Arima(0, 1, 0)
    model.fit(SAMPLE)
    assert model.forecast(SAMPLE, 0) == []


def test_forecast_with_too_short_series():
    model = Arima(1, 0, 0)
    model.fit(_ar1_series(10))
    with pytest.raises(ArimaError):
        model.forecast([4.0], 2)