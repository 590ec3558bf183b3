"""
EconoTrends Indicators - Schemas.

Pydantic models for catalog and indicator data queries.
"""

from datetime import date

from pydantic import Field

from econotrends.schemas import (
    CamelModel,
    DataPoint,
    ForecastPointOut,
    IndicatorInfo,
    StatisticsOut,
    TrendOut,
)


class IndicatorListResponse(CamelModel):
    indicators: list[IndicatorInfo]


class IndicatorDetailResponse(CamelModel):
    """History, statistics, trend, and optional forecasts for one indicator."""

    indicator: IndicatorInfo
    historical_data: list[DataPoint]
    statistics: StatisticsOut
    trend: TrendOut
    forecasts: list[ForecastPointOut] = Field(default_factory=list)


class IndicatorQuery(CamelModel):
    """Query one, several, or (when omitted) all indicators."""

    indicator: str | list[str] | None = None
    limit: int | None = Field(
        default=None, ge=1, le=100, description="Window length; defaults to the indicator's frequency window"
    )
    start_date: date | None = Field(default=None, description="Drop observations before this date")
    end_date: date | None = Field(default=None, description="Drop observations after this date")
    as_of: date | None = Field(default=None, description="Date of the most recent generated observation")
    include_statistics: bool = False
    include_trend: bool = False


class IndicatorQueryResult(CamelModel):
    indicator: IndicatorInfo
    data: list[DataPoint]
    statistics: StatisticsOut | None = None
    trend: TrendOut | None = None


class IndicatorQueryResponse(CamelModel):
    results: list[IndicatorQueryResult]
