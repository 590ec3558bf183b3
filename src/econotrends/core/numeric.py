"""
EconoTrends Core - Numeric helpers.

Rounding and ordinary-least-squares primitives shared by the trend analyzer
and the forecast engine. Regression is against index order (0..n-1), not
calendar time, so irregular spacing does not distort the fit.

Helpers raise NumericDegenerateException on a zero denominator; callers
substitute a neutral value (slope 0, R² 0) and never let it escape.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from econotrends.exceptions import NumericDegenerateException


def round2(value: float) -> float:
    """Round to two decimals. Idempotent on already-rounded values."""
    return round(float(value), 2)


def mean(values: Sequence[float]) -> float:
    if not values:
        raise NumericDegenerateException("mean")
    return sum(values) / len(values)


@dataclass(frozen=True)
class LinearFit:
    slope: float
    intercept: float

    def at(self, x: float) -> float:
        return self.intercept + self.slope * x


def ols_slope(values: Sequence[float]) -> float:
    """Slope of the least-squares line of values against their index."""
    n = len(values)
    sum_x = n * (n - 1) / 2
    sum_y = sum(values)
    sum_xy = sum(i * v for i, v in enumerate(values))
    sum_x2 = n * (n - 1) * (2 * n - 1) / 6

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise NumericDegenerateException("ols slope")
    return (n * sum_xy - sum_x * sum_y) / denominator


def linear_fit(values: Sequence[float]) -> LinearFit:
    """Least-squares fit; a single point (or none) yields a flat line."""
    if not values:
        return LinearFit(slope=0.0, intercept=0.0)
    try:
        slope = ols_slope(values)
    except NumericDegenerateException:
        slope = 0.0
    intercept = mean(values) - slope * (len(values) - 1) / 2
    return LinearFit(slope=slope, intercept=intercept)


def r_squared(values: Sequence[float], fit: LinearFit) -> float:
    """
    Coefficient of determination of values against fit, clamped to [0, 1].

    A perfectly flat series has no variance to explain and scores 0.
    """
    if not values:
        return 0.0
    avg = mean(values)
    total_ss = sum((v - avg) ** 2 for v in values)
    if total_ss == 0:
        return 0.0
    residual_ss = sum((v - fit.at(i)) ** 2 for i, v in enumerate(values))
    return min(1.0, max(0.0, 1 - residual_ss / total_ss))


def first_differences(values: Sequence[float]) -> list[float]:
    return [values[i] - values[i - 1] for i in range(1, len(values))]
