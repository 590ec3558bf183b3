"""
EconoTrends Forecast - Router.

API endpoints for forecasting.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from econotrends.config import Settings, get_settings
from econotrends.core.catalog import IndicatorCatalog
from econotrends.core.narrative import NarrativeGenerator
from econotrends.core.series_provider import SeriesProvider
from econotrends.deps import get_catalog, get_metrics, get_narrator, get_series_provider, require_forecast
from econotrends.modules.forecast.schemas import (
    BatchForecastRequest,
    BatchForecastResponse,
    ForecastRequest,
    ForecastResponse,
)
from econotrends.modules.forecast.service import ForecastService
from econotrends.observability import MetricsStore

router = APIRouter(
    prefix="/forecast",
    tags=["forecast"],
    dependencies=[require_forecast],
)


def get_service(
    catalog: Annotated[IndicatorCatalog, Depends(get_catalog)],
    provider: Annotated[SeriesProvider, Depends(get_series_provider)],
    narrator: Annotated[NarrativeGenerator, Depends(get_narrator)],
    metrics: Annotated[MetricsStore, Depends(get_metrics)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ForecastService:
    """Get forecast service instance."""
    return ForecastService(
        catalog=catalog, provider=provider, narrator=narrator, metrics=metrics, settings=settings
    )


@router.post("", response_model=ForecastResponse)
async def generate_forecast(
    request: ForecastRequest,
    service: ForecastService = Depends(get_service),
):
    """Generate a forecast for the specified indicator."""
    return service.generate(request)


@router.post("/batch", response_model=BatchForecastResponse)
async def generate_batch_forecast(
    request: BatchForecastRequest,
    service: ForecastService = Depends(get_service),
):
    """Generate forecasts for several indicators."""
    return service.generate_batch(request)
