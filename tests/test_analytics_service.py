"""
Tests for the analytics, forecast, and indicators services.
"""

from datetime import date

import pytest

from econotrends.config import Settings
from econotrends.core.series_provider import StaticSeriesProvider, SyntheticSeriesProvider
from econotrends.exceptions import (
    IndicatorNotFoundException,
    InsufficientDataException,
    InvalidParameterException,
)
from econotrends.modules.analytics.schemas import AnalyticsRequest
from econotrends.modules.analytics.service import AnalyticsService
from econotrends.modules.forecast.schemas import BatchForecastRequest, ForecastRequest
from econotrends.modules.forecast.service import ForecastService
from econotrends.modules.indicators.schemas import IndicatorQuery
from econotrends.modules.indicators.service import IndicatorsService, filter_by_date_range
from econotrends.observability.metrics import MetricsStore


@pytest.fixture
def static_service(line_series):
    return AnalyticsService(
        provider=StaticSeriesProvider({"cpi": line_series}),
        metrics=MetricsStore(),
        settings=Settings(),
    )


class TestAnalyticsService:
    """Analytics facade behavior."""

    def test_linear_scenario(self, static_service):
        """Test twelve points on a line forecast the line's continuation."""
        response = static_service.analyze(
            AnalyticsRequest(
                indicator="cpi",
                periods=12,
                include_forecast=True,
                forecast_periods=3,
                end_date=date(2024, 12, 1),
            )
        )

        assert len(response.historical_data) == 12
        assert response.statistics.data_points == 12
        assert response.trend.direction == "increasing"
        assert len(response.forecasts) == 3

        step = 1.5 / 11
        for horizon, point in enumerate(response.forecasts, start=1):
            assert abs(point.value - (3.5 + horizon * step)) <= 0.1
            assert point.confidence.lower <= point.value <= point.confidence.upper
            assert point.methodology == "linear"
        assert response.forecasts[0].date == date(2025, 1, 1)
        assert response.accuracy is not None

    def test_include_flags(self, static_service):
        response = static_service.analyze(
            AnalyticsRequest(
                indicator="cpi",
                periods=12,
                include_statistics=False,
                include_trend=False,
                end_date=date(2024, 12, 1),
            )
        )

        assert response.statistics is None
        assert response.trend is None
        assert response.forecasts == []
        assert response.accuracy is None

    def test_empty_window_raises(self, static_service):
        """Test statistics over an empty series fail the whole request."""
        with pytest.raises(InsufficientDataException):
            static_service.analyze(
                AnalyticsRequest(indicator="cpi", periods=12, end_date=date(2020, 1, 1))
            )

    def test_unknown_indicator(self, static_service):
        with pytest.raises(IndicatorNotFoundException):
            static_service.analyze(AnalyticsRequest(indicator="bitcoin"))

    def test_history_limit_from_settings(self, line_series):
        settings = Settings()
        settings.analytics.max_history_periods = 10
        service = AnalyticsService(
            provider=StaticSeriesProvider({"cpi": line_series}),
            metrics=MetricsStore(),
            settings=settings,
        )

        with pytest.raises(InvalidParameterException) as exc_info:
            service.analyze(AnalyticsRequest(indicator="cpi", periods=12))
        assert exc_info.value.details["parameter"] == "periods"

    def test_stages_are_tracked(self, line_series):
        metrics = MetricsStore()
        service = AnalyticsService(
            provider=StaticSeriesProvider({"cpi": line_series}), metrics=metrics, settings=Settings()
        )
        service.analyze(
            AnalyticsRequest(indicator="cpi", periods=12, include_forecast=True, end_date=date(2024, 12, 1))
        )

        summary = metrics.get_summary()
        assert set(summary["stages"]) == {"series", "statistics", "trend", "forecast"}
        assert summary["forecasts"] == {"linear": 1}

    def test_camel_case_dump(self, static_service):
        response = static_service.analyze(
            AnalyticsRequest(indicator="cpi", periods=12, end_date=date(2024, 12, 1))
        )
        payload = response.model_dump(by_alias=True, mode="json")

        assert "historicalData" in payload
        assert "stdDev" in payload["statistics"]
        assert "changePercent" in payload["statistics"]
        assert "significantChanges" in payload["trend"]

    def test_request_accepts_camel_case(self):
        request = AnalyticsRequest.model_validate(
            {"indicator": "gdp", "forecastPeriods": 4, "includeForecast": True}
        )
        assert request.forecast_periods == 4
        assert request.include_forecast is True


class TestForecastService:
    """Standalone forecasts."""

    def test_history_is_last_periods(self):
        service = ForecastService(metrics=MetricsStore(), settings=Settings())
        result = service.forecast("unemployment", 6, "exponential", end_date=date(2024, 6, 1))

        assert len(result.recent_history) == 6
        assert len(result.forecasts) == 6
        assert result.recent_history[-1].date == date(2024, 6, 1)
        assert result.forecasts[0].date == date(2024, 7, 1)
        assert result.requested_confidence == 0.8

    def test_history_length_floor(self):
        service = ForecastService(metrics=MetricsStore(), settings=Settings())
        assert service.history_length(3) == 24
        assert service.history_length(10) == 40

    def test_same_request_same_forecast(self):
        service = ForecastService(metrics=MetricsStore(), settings=Settings())
        first = service.forecast("cpi", 6, "arima", end_date=date(2024, 6, 1))
        second = service.forecast("cpi", 6, "arima", end_date=date(2024, 6, 1))
        assert first.forecasts == second.forecasts

    def test_insight_uses_template(self):
        service = ForecastService(metrics=MetricsStore(), settings=Settings())
        response = service.generate(
            ForecastRequest(indicator="gdp", periods=4, include_insight=True, end_date=date(2024, 12, 1))
        )

        assert response.insight is not None
        assert response.insight.confidence == 0.75
        assert "Gross Domestic Product" in response.insight.content

    def test_batch_rejects_unknown_before_work(self):
        metrics = MetricsStore()
        service = ForecastService(metrics=metrics, settings=Settings())

        with pytest.raises(IndicatorNotFoundException):
            service.generate_batch(BatchForecastRequest(indicators=["cpi", "bitcoin"]))
        assert metrics.get_summary()["forecasts"] == {}

    def test_batch(self):
        service = ForecastService(metrics=MetricsStore(), settings=Settings())
        response = service.generate_batch(
            BatchForecastRequest(indicators=["cpi", "gdp"], periods=2, end_date=date(2024, 12, 1))
        )
        assert set(response.forecasts) == {"cpi", "gdp"}
        assert all(len(r.forecasts) == 2 for r in response.forecasts.values())


class TestIndicatorsService:
    """Catalog listing and indicator queries."""

    def test_detail_with_forecasts(self):
        service = IndicatorsService(
            provider=SyntheticSeriesProvider(), metrics=MetricsStore(), settings=Settings()
        )
        detail = service.get_indicator_detail("gdp", include_forecasts=True, as_of=date(2024, 12, 1))

        assert detail.indicator.id == "gdp"
        assert len(detail.historical_data) == 24
        assert len(detail.forecasts) == 6
        assert detail.forecasts[0].date == date(2025, 3, 1)

    def test_query_defaults_to_all_indicators(self):
        service = IndicatorsService(metrics=MetricsStore(), settings=Settings())
        response = service.query(IndicatorQuery(as_of=date(2024, 12, 1)))

        assert [r.indicator.id for r in response.results] == ["cpi", "gdp", "unemployment", "interest_rate"]
        assert len(response.results[1].data) == 8

    def test_query_rejects_inverted_range(self):
        service = IndicatorsService(metrics=MetricsStore(), settings=Settings())
        with pytest.raises(InvalidParameterException):
            service.query(
                IndicatorQuery(indicator="cpi", start_date=date(2024, 6, 1), end_date=date(2024, 1, 1))
            )

    def test_filter_by_date_range(self, make_series):
        series = make_series([1.0, 2.0, 3.0, 4.0])
        assert filter_by_date_range(series, date(2024, 2, 1), date(2024, 3, 1)) == series[1:3]
        assert filter_by_date_range(series) == series
