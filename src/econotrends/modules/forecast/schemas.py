"""
EconoTrends Forecast - Schemas.

Pydantic models for forecast operations.
"""

from datetime import date, datetime

from pydantic import Field

from econotrends.schemas import AccuracyOut, CamelModel, DataPoint, ForecastPointOut, MethodologyName


class ForecastRequest(CamelModel):
    """Request to generate a forecast."""

    indicator: str = Field(..., min_length=1)
    periods: int | None = Field(default=None, ge=1, le=24, description="Forecast horizon length (default from settings)")
    confidence: float | None = Field(
        default=None,
        ge=0.1,
        le=1.0,
        description="Band knob: higher values give NARROWER bands (default from settings)",
    )
    methodology: MethodologyName = "linear"
    include_insight: bool = False
    end_date: date | None = None


class BatchForecastRequest(CamelModel):
    """Request forecasts for several indicators with shared parameters."""

    indicators: list[str] = Field(..., min_length=1)
    periods: int | None = Field(default=None, ge=1, le=24)
    confidence: float | None = Field(default=None, ge=0.1, le=1.0)
    methodology: MethodologyName = "linear"
    end_date: date | None = None


class ForecastMetadata(CamelModel):
    generated_at: datetime
    periods: int
    confidence: float


class InsightOut(CamelModel):
    content: str
    confidence: float


class ForecastResponse(CamelModel):
    """Forecast response."""

    indicator: str
    historical_data: list[DataPoint]
    forecasts: list[ForecastPointOut]
    methodology: MethodologyName
    accuracy: AccuracyOut
    insight: InsightOut | None = None
    metadata: ForecastMetadata


class BatchForecastResponse(CamelModel):
    forecasts: dict[str, ForecastResponse]
