"""
EconoTrends Core - Trend Analyzer.

Classifies the recent direction of a series with an OLS fit over its last
window. Trend is advisory: short series get a neutral sentinel rather than
an error.
"""

from __future__ import annotations

from collections.abc import Sequence

from econotrends.core.models import Observation, SignificantChange, TrendAnalysis, TrendDirection
from econotrends.core.numeric import linear_fit, r_squared, round2

TREND_WINDOW = 12
MIN_POINTS = 3

# Thresholds are in the series' native units (e.g. percentage points per period)
SLOPE_THRESHOLD = 0.05
CHANGE_THRESHOLD = 0.5
SIGNIFICANT_THRESHOLD = 1.0
MAX_SIGNIFICANT_CHANGES = 5

INSUFFICIENT_DATA = "insufficient data"


def insufficient_trend() -> TrendAnalysis:
    return TrendAnalysis(
        direction=TrendDirection.STABLE,
        strength=0.0,
        confidence=0.0,
        description=INSUFFICIENT_DATA,
    )


def classify_slope(slope: float) -> TrendDirection:
    if slope > SLOPE_THRESHOLD:
        return TrendDirection.INCREASING
    if slope < -SLOPE_THRESHOLD:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def describe_trend(direction: TrendDirection, strength: float, confidence: float) -> str:
    """Stable machine label; narrative layers phrase it for humans."""
    if strength > 0.7:
        strength_label = "strong"
    elif strength > 0.4:
        strength_label = "moderate"
    else:
        strength_label = "weak"

    if confidence > 0.8:
        confidence_label = "high"
    elif confidence > 0.6:
        confidence_label = "medium"
    else:
        confidence_label = "low"

    return f"{direction.value} trend, {strength_label} strength ({confidence_label} confidence)"


def find_significant_changes(window: Sequence[Observation]) -> tuple[SignificantChange, ...]:
    """Most recent point-to-point moves larger than CHANGE_THRESHOLD."""
    changes = []
    for previous, current in zip(window, window[1:]):
        delta = current.value - previous.value
        if abs(delta) > CHANGE_THRESHOLD:
            changes.append(
                SignificantChange(
                    date=current.date,
                    value=current.value,
                    change=round2(delta),
                    severity="significant" if abs(delta) > SIGNIFICANT_THRESHOLD else "moderate",
                )
            )
    return tuple(changes[-MAX_SIGNIFICANT_CHANGES:])


def analyze_trend(series: Sequence[Observation], window: int = TREND_WINDOW) -> TrendAnalysis:
    """Direction, strength and confidence over the last `window` points."""
    if len(series) < MIN_POINTS:
        return insufficient_trend()

    recent = list(series[-min(window, len(series)):])
    values = [obs.value for obs in recent]

    fit = linear_fit(values)
    fit_quality = r_squared(values, fit)
    direction = classify_slope(fit.slope)
    strength = min(abs(fit.slope) * fit_quality, 1.0)

    return TrendAnalysis(
        direction=direction,
        strength=round2(strength),
        confidence=round2(fit_quality),
        description=describe_trend(direction, strength, fit_quality),
        significant_changes=find_significant_changes(recent),
        slope=round2(fit.slope),
    )
