"""
EconoTrends Analytics - Router.

API endpoint for the aggregate analytics view.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from econotrends.config import Settings, get_settings
from econotrends.core.catalog import IndicatorCatalog
from econotrends.core.series_provider import SeriesProvider
from econotrends.deps import get_catalog, get_metrics, get_series_provider, require_analytics
from econotrends.modules.analytics.schemas import AnalyticsRequest, AnalyticsResponse
from econotrends.modules.analytics.service import AnalyticsService
from econotrends.observability import MetricsStore

router = APIRouter(
    prefix="/analytics",
    tags=["analytics"],
    dependencies=[require_analytics],
)


def get_service(
    catalog: Annotated[IndicatorCatalog, Depends(get_catalog)],
    provider: Annotated[SeriesProvider, Depends(get_series_provider)],
    metrics: Annotated[MetricsStore, Depends(get_metrics)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AnalyticsService:
    """Get analytics service instance."""
    return AnalyticsService(catalog=catalog, provider=provider, metrics=metrics, settings=settings)


@router.post("", response_model=AnalyticsResponse)
async def run_analytics(
    request: AnalyticsRequest,
    service: AnalyticsService = Depends(get_service),
):
    """Statistics, trend, and optional forecasts for one indicator."""
    return service.analyze(request)
