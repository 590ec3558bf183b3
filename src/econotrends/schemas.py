"""
EconoTrends - Common Schemas.

Shared Pydantic models used across all modules. Engine results are frozen
dataclasses; the `from_model` constructors here turn them into the camelCase
wire shapes the dashboard and the narrative layer consume. Values are
already rounded by the engine and are passed through untouched.
"""

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from econotrends.core.models import (
    Accuracy,
    ForecastPoint,
    Indicator,
    Observation,
    SignificantChange,
    Statistics,
    TrendAnalysis,
)

MethodologyName = Literal["linear", "exponential", "arima", "prophet"]


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys; accepts either casing on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Error Responses
# =============================================================================


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Developer-facing error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional context")
    request_id: str | None = Field(default=None, description="Request ID for tracing")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail


# =============================================================================
# Indicators
# =============================================================================


class IndicatorSummary(CamelModel):
    """Indicator identity as embedded in analytics responses."""

    id: str
    name: str
    unit: str
    frequency: str
    source: str

    @classmethod
    def from_model(cls, indicator: Indicator) -> "IndicatorSummary":
        return cls(
            id=indicator.id,
            name=indicator.name,
            unit=indicator.unit,
            frequency=indicator.frequency.value,
            source=indicator.source,
        )


class IndicatorInfo(IndicatorSummary):
    """Full catalog entry."""

    name_en: str
    description: str
    category: str
    is_active: bool

    @classmethod
    def from_model(cls, indicator: Indicator) -> "IndicatorInfo":
        return cls(
            id=indicator.id,
            name=indicator.name,
            name_en=indicator.name_en,
            unit=indicator.unit,
            frequency=indicator.frequency.value,
            source=indicator.source,
            description=indicator.description,
            category=indicator.category,
            is_active=indicator.is_active,
        )


# =============================================================================
# Series / Statistics / Trend
# =============================================================================


class DataPoint(CamelModel):
    """Historical observation."""

    date: date
    value: float
    indicator: str

    @classmethod
    def from_model(cls, obs: Observation) -> "DataPoint":
        return cls(date=obs.date, value=obs.value, indicator=obs.indicator_id)


class PeriodRange(CamelModel):
    start: date
    end: date


class StatisticsOut(CamelModel):
    mean: float
    median: float
    std_dev: float
    min: float
    max: float
    latest: float
    change: float
    change_percent: float
    data_points: int
    period: PeriodRange

    @classmethod
    def from_model(cls, stats: Statistics) -> "StatisticsOut":
        return cls(
            mean=stats.mean,
            median=stats.median,
            std_dev=stats.std_dev,
            min=stats.min,
            max=stats.max,
            latest=stats.latest,
            change=stats.change,
            change_percent=stats.change_percent,
            data_points=stats.count,
            period=PeriodRange(start=stats.period_start, end=stats.period_end),
        )


class SignificantChangeOut(CamelModel):
    date: date
    value: float
    change: float
    severity: Literal["significant", "moderate"]

    @classmethod
    def from_model(cls, change: SignificantChange) -> "SignificantChangeOut":
        return cls(date=change.date, value=change.value, change=change.change, severity=change.severity)


class TrendOut(CamelModel):
    direction: Literal["increasing", "decreasing", "stable"]
    strength: float = Field(ge=0, le=1)
    confidence: float = Field(ge=0, le=1)
    description: str
    slope: float = Field(default=0.0, description="OLS slope per period over the trend window")
    significant_changes: list[SignificantChangeOut] = Field(default_factory=list)

    @classmethod
    def from_model(cls, trend: TrendAnalysis) -> "TrendOut":
        return cls(
            direction=trend.direction.value,
            strength=trend.strength,
            confidence=trend.confidence,
            description=trend.description,
            slope=trend.slope,
            significant_changes=[SignificantChangeOut.from_model(c) for c in trend.significant_changes],
        )


# =============================================================================
# Forecasts
# =============================================================================


class ConfidenceBand(CamelModel):
    lower: float
    upper: float


class ForecastPointOut(CamelModel):
    date: date
    value: float
    indicator: str
    confidence: ConfidenceBand
    methodology: MethodologyName
    predicted: Literal[True] = True

    @classmethod
    def from_model(cls, point: ForecastPoint) -> "ForecastPointOut":
        return cls(
            date=point.date,
            value=point.value,
            indicator=point.indicator_id,
            confidence=ConfidenceBand(lower=point.confidence_lower, upper=point.confidence_upper),
            methodology=point.methodology.value,
        )


class AccuracyOut(CamelModel):
    """Synthetic accuracy proxy (not back-tested)."""

    mape: float
    rmse: float

    @classmethod
    def from_model(cls, accuracy: Accuracy) -> "AccuracyOut":
        return cls(mape=accuracy.mape, rmse=accuracy.rmse)


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., pattern="^(healthy|degraded)$")
    version: str
    features: dict[str, bool]
    app_env: str | None = None
    is_production: bool | None = None
    randomness: str | None = None
