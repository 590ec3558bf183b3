"""
EconoTrends Analytics - Schemas.

Pydantic models for the analytics facade. Input accepts camelCase or
snake_case; output is camelCase.
"""

from datetime import date

from pydantic import Field

from econotrends.schemas import (
    AccuracyOut,
    CamelModel,
    DataPoint,
    ForecastPointOut,
    IndicatorSummary,
    MethodologyName,
    StatisticsOut,
    TrendOut,
)


class AnalyticsRequest(CamelModel):
    """Request for the aggregate analytics view of one indicator."""

    indicator: str = Field(..., min_length=1)
    periods: int = Field(default=24, ge=1, le=100, description="Historical window length")
    forecast_periods: int = Field(default=6, ge=1, le=24, description="Forecast horizon length")
    confidence: float = Field(
        default=0.8,
        ge=0.1,
        le=1.0,
        description="Band knob: higher values give NARROWER bands",
    )
    methodology: MethodologyName = "linear"
    include_statistics: bool = True
    include_trend: bool = True
    include_forecast: bool = False
    end_date: date | None = Field(default=None, description="Date of the most recent observation (default today)")


class AnalyticsResponse(CamelModel):
    """Aggregate analytics result."""

    indicator: IndicatorSummary
    historical_data: list[DataPoint]
    statistics: StatisticsOut | None = None
    trend: TrendOut | None = None
    forecasts: list[ForecastPointOut] = Field(default_factory=list)
    accuracy: AccuracyOut | None = None
