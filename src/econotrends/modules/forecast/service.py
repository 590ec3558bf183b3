"""
EconoTrends Forecast - Service.

Standalone forecasts. The model is fitted on max(periods * 4, history floor)
historical points; only the last `periods` of them are returned as context.
"""

import logging
from datetime import date, datetime, timezone

from econotrends.config import Settings, get_settings
from econotrends.core.catalog import DEFAULT_CATALOG, IndicatorCatalog
from econotrends.core.confidence import build_forecast_points, estimate_accuracy, validate_confidence
from econotrends.core.forecasting import forecast_values, validate_periods
from econotrends.core.models import ForecastResult, Methodology
from econotrends.core.narrative import NarrativeGenerator, TemplateNarrator
from econotrends.core.series_provider import SeriesProvider, SyntheticSeriesProvider
from econotrends.modules.forecast.schemas import (
    BatchForecastRequest,
    BatchForecastResponse,
    ForecastMetadata,
    ForecastRequest,
    ForecastResponse,
    InsightOut,
)
from econotrends.observability import MetricsStore, get_metrics_store
from econotrends.schemas import AccuracyOut, DataPoint, ForecastPointOut

logger = logging.getLogger(__name__)


class ForecastService:
    """Service for forecast operations."""

    def __init__(
        self,
        catalog: IndicatorCatalog | None = None,
        provider: SeriesProvider | None = None,
        narrator: NarrativeGenerator | None = None,
        metrics: MetricsStore | None = None,
        settings: Settings | None = None,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self.provider = provider or SyntheticSeriesProvider(self.catalog)
        self.narrator = narrator or TemplateNarrator()
        self.metrics = metrics or get_metrics_store()
        self.settings = settings or get_settings()

    def history_length(self, periods: int) -> int:
        return max(periods * 4, self.settings.analytics.forecast_history_floor)

    def forecast(
        self,
        indicator_id: str,
        periods: int | None = None,
        methodology: Methodology | str = Methodology.LINEAR,
        confidence: float | None = None,
        end_date: date | None = None,
    ) -> ForecastResult:
        """
        Build a ForecastResult for one indicator.

        Raises:
            IndicatorNotFoundException: unknown indicator.
            InvalidParameterException: periods or confidence out of bounds.
        """
        indicator = self.catalog.get(indicator_id)
        if periods is None:
            periods = self.settings.analytics.default_forecast_periods
        if confidence is None:
            confidence = self.settings.analytics.default_confidence
        validate_periods(periods, self.settings.analytics.max_forecast_periods)
        validate_confidence(confidence)
        method = Methodology.parse(methodology)

        with self.metrics.track("series"):
            history = self.provider.generate(
                indicator.id, self.history_length(periods), end_date or date.today()
            )

        with self.metrics.track("forecast"):
            values = forecast_values(history, periods, method)
            points = build_forecast_points(
                history, values, indicator, self.catalog.step(indicator.id), method, confidence
            )
            accuracy = estimate_accuracy(history, method)
        self.metrics.record_forecast(method.value)

        logger.info(f"Forecast {indicator.id}: {periods} period(s) via {method.value} on {len(history)} points")

        return ForecastResult(
            indicator_id=indicator.id,
            recent_history=tuple(history[-periods:]),
            forecasts=tuple(points),
            methodology=method,
            accuracy=accuracy,
            generated_at=datetime.now(timezone.utc),
            requested_periods=periods,
            requested_confidence=confidence,
        )

    def to_response(self, result: ForecastResult, include_insight: bool = False) -> ForecastResponse:
        insight = None
        if include_insight and self.settings.features.insights:
            narrative = self.narrator.describe(self.catalog.get(result.indicator_id), result)
            insight = InsightOut(content=narrative.content, confidence=narrative.confidence)

        return ForecastResponse(
            indicator=result.indicator_id,
            historical_data=[DataPoint.from_model(obs) for obs in result.recent_history],
            forecasts=[ForecastPointOut.from_model(p) for p in result.forecasts],
            methodology=result.methodology.value,
            accuracy=AccuracyOut.from_model(result.accuracy),
            insight=insight,
            metadata=ForecastMetadata(
                generated_at=result.generated_at,
                periods=result.requested_periods,
                confidence=result.requested_confidence,
            ),
        )

    def generate(self, request: ForecastRequest) -> ForecastResponse:
        """Generate a forecast for one indicator."""
        result = self.forecast(
            request.indicator,
            request.periods,
            request.methodology,
            request.confidence,
            request.end_date,
        )
        return self.to_response(result, include_insight=request.include_insight)

    def generate_batch(self, request: BatchForecastRequest) -> BatchForecastResponse:
        """Forecast several indicators; any unknown indicator fails the whole batch."""
        for indicator_id in request.indicators:
            self.catalog.get(indicator_id)

        forecasts = {}
        for indicator_id in request.indicators:
            result = self.forecast(
                indicator_id,
                request.periods,
                request.methodology,
                request.confidence,
                request.end_date,
            )
            forecasts[result.indicator_id] = self.to_response(result)
        return BatchForecastResponse(forecasts=forecasts)
