"""
EconoTrends Analytics - Service.

The analytics facade: one synchronous pass from series generation through
statistics, trend, and (optionally) forecasting. Parameters are validated
before any computation; a failing stage fails the whole request.
"""

import logging
from datetime import date

from econotrends.config import Settings, get_settings
from econotrends.core.catalog import DEFAULT_CATALOG, IndicatorCatalog
from econotrends.core.confidence import build_forecast_points, estimate_accuracy, validate_confidence
from econotrends.core.descriptive import compute_statistics
from econotrends.core.forecasting import forecast_values, validate_periods
from econotrends.core.models import Methodology
from econotrends.core.series_provider import SeriesProvider, SyntheticSeriesProvider
from econotrends.core.trend import analyze_trend
from econotrends.exceptions import InvalidParameterException
from econotrends.modules.analytics.schemas import AnalyticsRequest, AnalyticsResponse
from econotrends.observability import MetricsStore, get_metrics_store
from econotrends.schemas import (
    AccuracyOut,
    DataPoint,
    ForecastPointOut,
    IndicatorSummary,
    StatisticsOut,
    TrendOut,
)

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Facade composing the provider, calculators, and forecast engine."""

    def __init__(
        self,
        catalog: IndicatorCatalog | None = None,
        provider: SeriesProvider | None = None,
        metrics: MetricsStore | None = None,
        settings: Settings | None = None,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self.provider = provider or SyntheticSeriesProvider(self.catalog)
        self.metrics = metrics or get_metrics_store()
        self.settings = settings or get_settings()

    def _validate(self, request: AnalyticsRequest) -> None:
        limits = self.settings.analytics
        if not 1 <= request.periods <= limits.max_history_periods:
            raise InvalidParameterException(
                "periods", f"1 <= periods <= {limits.max_history_periods}", request.periods
            )
        if request.include_forecast:
            validate_periods(request.forecast_periods, limits.max_forecast_periods)
        validate_confidence(request.confidence)

    def analyze(self, request: AnalyticsRequest) -> AnalyticsResponse:
        """Run the pipeline for one indicator."""
        indicator = self.catalog.get(request.indicator)
        self._validate(request)

        end_date = request.end_date or date.today()
        with self.metrics.track("series"):
            series = self.provider.generate(indicator.id, request.periods, end_date)

        statistics = None
        if request.include_statistics:
            with self.metrics.track("statistics"):
                statistics = StatisticsOut.from_model(compute_statistics(series))

        trend = None
        if request.include_trend:
            with self.metrics.track("trend"):
                trend = TrendOut.from_model(analyze_trend(series))

        forecasts: list[ForecastPointOut] = []
        accuracy = None
        if request.include_forecast:
            methodology = Methodology.parse(request.methodology)
            with self.metrics.track("forecast"):
                values = forecast_values(series, request.forecast_periods, methodology)
                points = build_forecast_points(
                    series,
                    values,
                    indicator,
                    self.catalog.step(indicator.id),
                    methodology,
                    request.confidence,
                )
                forecasts = [ForecastPointOut.from_model(p) for p in points]
                accuracy = AccuracyOut.from_model(estimate_accuracy(series, methodology))
            self.metrics.record_forecast(methodology.value)

        logger.info(
            f"Analytics for {indicator.id}: {len(series)} points, "
            f"statistics={statistics is not None}, trend={trend is not None}, forecasts={len(forecasts)}"
        )

        return AnalyticsResponse(
            indicator=IndicatorSummary.from_model(indicator),
            historical_data=[DataPoint.from_model(obs) for obs in series],
            statistics=statistics,
            trend=trend,
            forecasts=forecasts,
            accuracy=accuracy,
        )
