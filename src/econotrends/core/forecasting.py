"""
EconoTrends Core - Forecast Engine.

Point forecasts under four methodologies, dispatched through a strategy
table keyed by Methodology. Each strategy maps a list of historical values
to `periods` future values:

- linear: OLS line over the full series, extrapolated step by step.
- exponential: simple exponential smoothing (alpha 0.3) for the level, plus
  the last first difference carried forward as a constant trend.
- arima: lag-1 autoregression on first differences, accumulated onto the
  last observed level with a small random perturbation per step.
- prophet: centered-moving-average trend plus a de-meaned 12-step seasonal
  profile; the trend is extended by its own recent slope.

The "arima" and "prophet" names follow the dashboard's vocabulary; both are
simplified stand-ins, not the real models.

Short series never raise: an empty series yields no values and a single
point yields a flat projection.
"""

from __future__ import annotations

import hashlib
import logging
import random
import struct
from collections.abc import Callable, Sequence

from econotrends.core.models import Methodology, Observation
from econotrends.core.numeric import first_differences, linear_fit, mean
from econotrends.exceptions import InvalidParameterException

logger = logging.getLogger(__name__)

MIN_PERIODS = 1
MAX_PERIODS = 24

SMOOTHING_ALPHA = 0.3
AR_NOISE_SPAN = 0.1
SEASONAL_PERIOD = 12
TREND_WINDOW = 5
TREND_SLOPE_WINDOW = 6

Strategy = Callable[[list[float], int, random.Random], list[float]]


def _flat(values: list[float], periods: int) -> list[float]:
    return [values[-1]] * periods if values else []


def linear_forecast(values: list[float], periods: int, rng: random.Random) -> list[float]:
    if len(values) < 2:
        return _flat(values, periods)
    fit = linear_fit(values)
    n = len(values)
    return [fit.at(n - 1 + step) for step in range(1, periods + 1)]


def exponential_forecast(values: list[float], periods: int, rng: random.Random) -> list[float]:
    if len(values) < 2:
        return _flat(values, periods)
    level = values[0]
    for value in values[1:]:
        level = SMOOTHING_ALPHA * value + (1 - SMOOTHING_ALPHA) * level
    trend = values[-1] - values[-2]
    return [level + trend * step for step in range(1, periods + 1)]


def autoregressive_coefficient(differences: Sequence[float]) -> float:
    """Least-squares lag-1 coefficient; 0 when undefined."""
    if len(differences) < 2:
        return 0.0
    numerator = sum(differences[i] * differences[i - 1] for i in range(1, len(differences)))
    denominator = sum(differences[i - 1] ** 2 for i in range(1, len(differences)))
    return numerator / denominator if denominator != 0 else 0.0


def arima_forecast(values: list[float], periods: int, rng: random.Random) -> list[float]:
    if len(values) < 2:
        return _flat(values, periods)
    differences = first_differences(values)
    phi = autoregressive_coefficient(differences)

    level = values[-1]
    difference = differences[-1]
    forecasts = []
    for _ in range(periods):
        difference = phi * difference + (rng.random() - 0.5) * AR_NOISE_SPAN
        level += difference
        forecasts.append(level)
    return forecasts


def moving_average_trend(values: Sequence[float], window: int = TREND_WINDOW) -> list[float]:
    """Centered moving average; the window is truncated at the series end."""
    n = len(values)
    size = min(window, n)
    trend = []
    for i in range(n):
        start = max(0, i - size // 2)
        end = min(n, start + size)
        trend.append(mean(values[start:end]))
    return trend


def seasonal_profile(
    values: Sequence[float], trend: Sequence[float], period: int = SEASONAL_PERIOD
) -> list[float]:
    """
    Average deviation from trend per position modulo `period`, de-meaned.

    Positions never observed stay at 0 and are excluded from the de-meaning.
    """
    totals = [0.0] * period
    counts = [0] * period
    for i, (value, level) in enumerate(zip(values, trend)):
        totals[i % period] += value - level
        counts[i % period] += 1

    populated = [totals[p] / counts[p] for p in range(period) if counts[p]]
    if not populated:
        return [0.0] * period
    offset = mean(populated)
    return [totals[p] / counts[p] - offset if counts[p] else 0.0 for p in range(period)]


def prophet_forecast(values: list[float], periods: int, rng: random.Random) -> list[float]:
    if len(values) < 2:
        return _flat(values, periods)
    trend = moving_average_trend(values)
    seasonal = seasonal_profile(values, trend)
    slope = linear_fit(trend[-TREND_SLOPE_WINDOW:]).slope
    n = len(values)
    return [
        trend[-1] + slope * step + seasonal[(n + step - 1) % SEASONAL_PERIOD]
        for step in range(1, periods + 1)
    ]


STRATEGIES: dict[Methodology, Strategy] = {
    Methodology.LINEAR: linear_forecast,
    Methodology.EXPONENTIAL: exponential_forecast,
    Methodology.ARIMA: arima_forecast,
    Methodology.PROPHET: prophet_forecast,
}


def series_rng(values: Sequence[float]) -> random.Random:
    """Random source seeded from the series itself, so forecasts are reproducible."""
    digest = hashlib.sha256(b"".join(struct.pack("<d", float(v)) for v in values)).digest()
    return random.Random(int.from_bytes(digest[:8], "big"))


def validate_periods(periods: int, max_periods: int = MAX_PERIODS) -> None:
    if not MIN_PERIODS <= periods <= max_periods:
        raise InvalidParameterException(
            "periods", f"{MIN_PERIODS} <= periods <= {max_periods}", periods
        )


def forecast_values(
    series: Sequence[Observation],
    periods: int,
    methodology: Methodology | str = Methodology.LINEAR,
    rng: random.Random | None = None,
) -> list[float]:
    """
    Forecast `periods` future values of a series.

    Unknown methodology names fall back to linear.

    Raises:
        InvalidParameterException: if periods is outside [1, 24].
    """
    validate_periods(periods)
    method = Methodology.parse(methodology)
    if method.value != str(getattr(methodology, "value", methodology)).lower():
        logger.warning(f"Unknown methodology '{methodology}', falling back to linear")

    values = [obs.value for obs in series]
    if len(values) < 2:
        logger.debug(f"Best-effort {method.value} forecast on {len(values)} point(s)")

    strategy = STRATEGIES[method]
    return strategy(values, periods, rng or series_rng(values))
