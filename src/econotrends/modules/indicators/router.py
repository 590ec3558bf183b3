"""
EconoTrends Indicators - Router.

API endpoints for the indicator catalog and indicator data.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from econotrends.config import Settings, get_settings
from econotrends.core.catalog import IndicatorCatalog
from econotrends.core.series_provider import SeriesProvider
from econotrends.deps import get_catalog, get_metrics, get_series_provider, require_indicators
from econotrends.modules.indicators.schemas import (
    IndicatorDetailResponse,
    IndicatorListResponse,
    IndicatorQuery,
    IndicatorQueryResponse,
)
from econotrends.modules.indicators.service import IndicatorsService
from econotrends.observability import MetricsStore

router = APIRouter(
    prefix="/indicators",
    tags=["indicators"],
    dependencies=[require_indicators],
)


def get_service(
    catalog: Annotated[IndicatorCatalog, Depends(get_catalog)],
    provider: Annotated[SeriesProvider, Depends(get_series_provider)],
    metrics: Annotated[MetricsStore, Depends(get_metrics)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> IndicatorsService:
    """Get indicators service instance."""
    return IndicatorsService(catalog=catalog, provider=provider, metrics=metrics, settings=settings)


@router.get("", response_model=IndicatorListResponse)
async def list_indicators(
    service: IndicatorsService = Depends(get_service),
):
    """List active indicators."""
    return service.list_indicators()


@router.post("/query", response_model=IndicatorQueryResponse)
async def query_indicators(
    query: IndicatorQuery,
    service: IndicatorsService = Depends(get_service),
):
    """Query one or more indicators with optional date filtering."""
    return service.query(query)


@router.get("/{indicator_id}", response_model=IndicatorDetailResponse)
async def get_indicator(
    indicator_id: str,
    periods: Annotated[int, Query(ge=1, le=100)] = 24,
    include_forecasts: Annotated[bool, Query(alias="includeForecasts")] = False,
    as_of: Annotated[date | None, Query(alias="asOf")] = None,
    service: IndicatorsService = Depends(get_service),
):
    """Get history, statistics, trend and optional forecasts for an indicator."""
    return service.get_indicator_detail(indicator_id, periods, include_forecasts, as_of)
