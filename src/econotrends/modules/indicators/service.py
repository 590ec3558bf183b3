"""
EconoTrends Indicators - Service.

Catalog listing, per-indicator detail, and multi-indicator queries with
optional date-range filtering.
"""

import logging
from datetime import date

from econotrends.config import Settings, get_settings
from econotrends.core.catalog import DEFAULT_CATALOG, IndicatorCatalog
from econotrends.core.descriptive import compute_statistics
from econotrends.core.models import Methodology, Observation
from econotrends.core.series_provider import SeriesProvider, SyntheticSeriesProvider
from econotrends.core.trend import analyze_trend
from econotrends.exceptions import InvalidParameterException
from econotrends.modules.forecast.service import ForecastService
from econotrends.modules.indicators.schemas import (
    IndicatorDetailResponse,
    IndicatorListResponse,
    IndicatorQuery,
    IndicatorQueryResponse,
    IndicatorQueryResult,
)
from econotrends.observability import MetricsStore, get_metrics_store
from econotrends.schemas import DataPoint, ForecastPointOut, IndicatorInfo, StatisticsOut, TrendOut

logger = logging.getLogger(__name__)

DETAIL_FORECAST_PERIODS = 6


def filter_by_date_range(
    series: list[Observation],
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Observation]:
    """Keep observations within [start_date, end_date]; open bounds are ignored."""
    return [
        obs
        for obs in series
        if (start_date is None or obs.date >= start_date)
        and (end_date is None or obs.date <= end_date)
    ]


class IndicatorsService:
    """Service for indicator catalog and data queries."""

    def __init__(
        self,
        catalog: IndicatorCatalog | None = None,
        provider: SeriesProvider | None = None,
        forecasts: ForecastService | None = None,
        metrics: MetricsStore | None = None,
        settings: Settings | None = None,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self.provider = provider or SyntheticSeriesProvider(self.catalog)
        self.metrics = metrics or get_metrics_store()
        self.settings = settings or get_settings()
        self.forecasts = forecasts or ForecastService(
            catalog=self.catalog, provider=self.provider, metrics=self.metrics, settings=self.settings
        )

    def list_indicators(self) -> IndicatorListResponse:
        """List active indicators."""
        return IndicatorListResponse(
            indicators=[IndicatorInfo.from_model(ind) for ind in self.catalog.list()]
        )

    def get_indicator_detail(
        self,
        indicator_id: str,
        periods: int = 24,
        include_forecasts: bool = False,
        as_of: date | None = None,
    ) -> IndicatorDetailResponse:
        """History, statistics and trend; optionally a short linear forecast."""
        indicator = self.catalog.get(indicator_id)
        max_periods = self.settings.analytics.max_history_periods
        if not 1 <= periods <= max_periods:
            raise InvalidParameterException("periods", f"1 <= periods <= {max_periods}", periods)

        end_date = as_of or date.today()
        with self.metrics.track("series"):
            series = self.provider.generate(indicator.id, periods, end_date)
        with self.metrics.track("statistics"):
            statistics = compute_statistics(series)
        with self.metrics.track("trend"):
            trend = analyze_trend(series)

        forecasts: list[ForecastPointOut] = []
        if include_forecasts and self.settings.features.forecast:
            result = self.forecasts.forecast(
                indicator.id, DETAIL_FORECAST_PERIODS, Methodology.LINEAR, end_date=end_date
            )
            forecasts = [ForecastPointOut.from_model(p) for p in result.forecasts]

        return IndicatorDetailResponse(
            indicator=IndicatorInfo.from_model(indicator),
            historical_data=[DataPoint.from_model(obs) for obs in series],
            statistics=StatisticsOut.from_model(statistics),
            trend=TrendOut.from_model(trend),
            forecasts=forecasts,
        )

    def query(self, query: IndicatorQuery) -> IndicatorQueryResponse:
        """
        Query one or more indicators.

        Raises:
            IndicatorNotFoundException: any requested indicator is unknown.
            InvalidParameterException: start_date is after end_date.
            InsufficientDataException: statistics requested over an empty window.
        """
        if isinstance(query.indicator, str):
            requested = [query.indicator]
        elif query.indicator:
            requested = list(query.indicator)
        else:
            requested = self.catalog.ids()

        indicators = [self.catalog.get(indicator_id) for indicator_id in requested]
        if query.start_date and query.end_date and query.start_date > query.end_date:
            raise InvalidParameterException("start_date", "start_date <= end_date", query.start_date.isoformat())

        as_of = query.as_of or date.today()
        results = []
        for indicator in indicators:
            periods = query.limit or self.catalog.default_window(indicator.id)
            with self.metrics.track("series"):
                series = self.provider.generate(indicator.id, periods, as_of)
            series = filter_by_date_range(series, query.start_date, query.end_date)

            result = IndicatorQueryResult(
                indicator=IndicatorInfo.from_model(indicator),
                data=[DataPoint.from_model(obs) for obs in series],
            )
            if query.include_statistics:
                with self.metrics.track("statistics"):
                    result.statistics = StatisticsOut.from_model(compute_statistics(series))
            if query.include_trend:
                with self.metrics.track("trend"):
                    result.trend = TrendOut.from_model(analyze_trend(series))
            results.append(result)

        logger.info(f"Indicator query over {[ind.id for ind in indicators]} returned {len(results)} result(s)")
        return IndicatorQueryResponse(results=results)
