"""
EconoTrends Core - Engine value types.

Frozen dataclasses passed between the engine stages. They are created per
request and never mutated; the HTTP layer converts them to Pydantic schemas.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class Frequency(str, Enum):
    """Publication frequency of an indicator."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class Methodology(str, Enum):
    """Closed set of forecasting methodologies."""

    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    ARIMA = "arima"
    PROPHET = "prophet"

    @classmethod
    def parse(cls, value: str | Methodology | None) -> Methodology:
        """Resolve a methodology name; unknown names fall back to linear."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.LINEAR


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True)
class Indicator:
    """Catalog entry for one economic indicator."""

    id: str
    name: str
    name_en: str
    unit: str
    frequency: Frequency
    source: str
    description: str
    category: str
    is_active: bool = True


@dataclass(frozen=True)
class IndicatorProfile:
    """Generation profile used by the synthetic series provider."""

    base_value: float
    drift: float


@dataclass(frozen=True)
class Observation:
    date: date
    value: float
    indicator_id: str


@dataclass(frozen=True)
class Statistics:
    mean: float
    median: float
    std_dev: float
    min: float
    max: float
    latest: float
    change: float
    change_percent: float
    count: int
    period_start: date
    period_end: date


@dataclass(frozen=True)
class SignificantChange:
    date: date
    value: float
    change: float
    severity: str  # "significant" | "moderate"


@dataclass(frozen=True)
class TrendAnalysis:
    direction: TrendDirection
    strength: float
    confidence: float
    description: str
    significant_changes: tuple[SignificantChange, ...] = ()
    slope: float = 0.0


@dataclass(frozen=True)
class Accuracy:
    """Synthetic accuracy proxy; not back-tested."""

    mape: float
    rmse: float


@dataclass(frozen=True)
class ForecastPoint:
    date: date
    value: float
    indicator_id: str
    confidence_lower: float
    confidence_upper: float
    methodology: Methodology
    is_predicted: bool = True


@dataclass(frozen=True)
class ForecastResult:
    indicator_id: str
    recent_history: tuple[Observation, ...]
    forecasts: tuple[ForecastPoint, ...]
    methodology: Methodology
    accuracy: Accuracy
    generated_at: datetime
    requested_periods: int
    requested_confidence: float
