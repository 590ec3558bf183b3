"""
EconoTrends Core - Confidence & Accuracy Estimator.

Wraps point forecasts in confidence bands and synthesizes an accuracy score.

Naming trap: `requested_confidence` is a knob, not a statistical confidence
level. The margin scales with (2 - requested_confidence), so asking for a
HIGHER confidence yields a NARROWER band. This is the dashboard's
established behavior and is kept as-is.

The accuracy figures are a synthetic proxy derived from per-methodology
base values and a data-quality factor. They are not measured on held-out
data and must not be presented as validated.
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from datetime import date

import pandas as pd

from econotrends.core.models import Accuracy, ForecastPoint, Indicator, Methodology, Observation
from econotrends.core.numeric import round2
from econotrends.exceptions import InvalidParameterException

BASE_MARGIN_RATIO = 0.05
HORIZON_WIDENING = 0.1
MARGIN_VALUE_FLOOR = 0.01

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0

COMPLETE_SERIES_LENGTH = 24

BASE_ACCURACY: dict[Methodology, Accuracy] = {
    Methodology.LINEAR: Accuracy(mape=8.5, rmse=0.15),
    Methodology.EXPONENTIAL: Accuracy(mape=7.2, rmse=0.12),
    Methodology.ARIMA: Accuracy(mape=6.8, rmse=0.11),
    Methodology.PROPHET: Accuracy(mape=6.2, rmse=0.10),
}


def validate_confidence(requested_confidence: float) -> None:
    if not MIN_CONFIDENCE <= requested_confidence <= MAX_CONFIDENCE:
        raise InvalidParameterException(
            "confidence",
            f"{MIN_CONFIDENCE} <= confidence <= {MAX_CONFIDENCE}",
            requested_confidence,
        )


def confidence_margin(value: float, requested_confidence: float, horizon_index: int) -> float:
    """Half-width of the band around `value` at a 1-based horizon index."""
    base = max(abs(value), MARGIN_VALUE_FLOOR) * BASE_MARGIN_RATIO
    widening = 1 + HORIZON_WIDENING * (horizon_index - 1)
    return base * widening * (2 - requested_confidence)


def bound(value: float, requested_confidence: float, horizon_index: int) -> tuple[float, float]:
    """Rounded (lower, upper) band for one forecast value."""
    validate_confidence(requested_confidence)
    if horizon_index < 1:
        raise InvalidParameterException("horizon_index", ">= 1", horizon_index)
    margin = confidence_margin(value, requested_confidence, horizon_index)
    return round2(value - margin), round2(value + margin)


def consistency(values: Sequence[float]) -> float:
    """1 - coefficient of variation, floored at 0."""
    if not values:
        return 0.0
    avg = statistics.fmean(values)
    if avg == 0:
        return 0.0
    cv = statistics.pstdev(values) / abs(avg)
    return max(0.0, 1 - cv)


def data_quality(values: Sequence[float]) -> float:
    """Score in [0, 1] averaging completeness and consistency."""
    completeness = min(1.0, len(values) / COMPLETE_SERIES_LENGTH)
    return (completeness + consistency(values)) / 2


def estimate_accuracy(series: Sequence[Observation], methodology: Methodology | str) -> Accuracy:
    """Synthetic MAPE/RMSE for a methodology, scaled by data quality into [0.8, 1.2]x."""
    base = BASE_ACCURACY[Methodology.parse(methodology)]
    factor = 0.8 + data_quality([obs.value for obs in series]) * 0.4
    return Accuracy(mape=round2(base.mape * factor), rmse=round2(base.rmse * factor))


def forecast_dates(last_date: date, periods: int, step: pd.DateOffset) -> list[date]:
    """Dates after `last_date`, each computed from last_date directly."""
    start = pd.Timestamp(last_date)
    return [(start + step * i).date() for i in range(1, periods + 1)]


def build_forecast_points(
    series: Sequence[Observation],
    values: Sequence[float],
    indicator: Indicator,
    step: pd.DateOffset,
    methodology: Methodology,
    requested_confidence: float,
) -> list[ForecastPoint]:
    """Attach dates and confidence bands to raw forecast values."""
    validate_confidence(requested_confidence)
    if not series or not values:
        return []

    points = []
    dates = forecast_dates(series[-1].date, len(values), step)
    for horizon_index, (point_date, raw_value) in enumerate(zip(dates, values), start=1):
        lower, upper = bound(raw_value, requested_confidence, horizon_index)
        points.append(
            ForecastPoint(
                date=point_date,
                value=round2(raw_value),
                indicator_id=indicator.id,
                confidence_lower=lower,
                confidence_upper=upper,
                methodology=methodology,
            )
        )
    return points
