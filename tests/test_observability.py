"""Tests for observability metrics module."""

import pytest

from econotrends.exceptions import InsufficientDataException, InvalidParameterException
from econotrends.observability.metrics import MetricsStore


class TestStageMetrics:
    """Tests for pipeline stage metrics."""

    def test_record_latency(self):
        store = MetricsStore()
        store.record_stage_latency("forecast", 50.0)
        store.record_stage_latency("forecast", 100.0)
        store.record_stage_latency("forecast", 150.0)

        summary = store.get_summary()
        stage = summary["stages"]["forecast"]

        assert stage["call_count"] == 3
        assert stage["p50_ms"] == 100.0
        assert stage["max_ms"] == 150.0

    def test_stage_errors_stay_out_of_global_totals(self):
        """Test track() counts per stage and leaves global totals to the handlers."""
        store = MetricsStore()
        for _ in range(2):
            with pytest.raises(InsufficientDataException):
                with store.track("statistics"):
                    raise InsufficientDataException("statistics", required=1, available=0)

        summary = store.get_summary()
        assert summary["stages"]["statistics"]["errors"] == {"INSUFFICIENT_DATA": 2}
        assert summary["global_errors"] == {}

    def test_uncoded_error_counted_by_type(self):
        store = MetricsStore()
        with pytest.raises(ZeroDivisionError):
            with store.track("forecast"):
                1 / 0

        assert store.get_summary()["stages"]["forecast"]["errors"] == {"ZeroDivisionError": 1}

    def test_track_records_latency(self):
        store = MetricsStore()
        with store.track("trend"):
            pass

        stage = store.get_summary()["stages"]["trend"]
        assert stage["call_count"] == 1
        assert stage["errors"] == {}

    def test_track_counts_error_and_reraises(self):
        store = MetricsStore()
        with pytest.raises(InvalidParameterException):
            with store.track("forecast"):
                raise InvalidParameterException("periods", "1 <= periods <= 24", 0)

        stage = store.get_summary()["stages"]["forecast"]
        assert stage["call_count"] == 1
        assert stage["errors"] == {"INVALID_PARAMETER": 1}

    def test_global_errors(self):
        store = MetricsStore()
        store.record_error("INDICATOR_NOT_FOUND")
        store.record_error("INDICATOR_NOT_FOUND")
        store.record_error("INTERNAL_ERROR")

        summary = store.get_summary()
        assert summary["global_errors"]["INDICATOR_NOT_FOUND"] == 2
        assert summary["global_errors"]["INTERNAL_ERROR"] == 1


class TestDomainCounters:
    """Tests for forecast and cache counters."""

    def test_forecasts_by_methodology(self):
        store = MetricsStore()
        store.record_forecast("linear")
        store.record_forecast("linear")
        store.record_forecast("prophet")

        assert store.get_summary()["forecasts"] == {"linear": 2, "prophet": 1}

    def test_cache_hit_ratio(self):
        store = MetricsStore()
        store.record_cache_lookup(hit=False)
        store.record_cache_lookup(hit=True)
        store.record_cache_lookup(hit=True)
        store.record_cache_lookup(hit=True)

        cache = store.get_summary()["cache"]
        assert cache == {"hits": 3, "misses": 1, "hit_ratio": 0.75}

    def test_no_lookups_has_no_ratio(self):
        assert MetricsStore().get_summary()["cache"]["hit_ratio"] is None


class TestMetricsSummary:
    """Tests for metrics summary structure."""

    def test_summary_structure(self):
        store = MetricsStore()
        summary = store.get_summary()

        assert "uptime_seconds" in summary
        assert "collected_at" in summary
        assert "stages" in summary
        assert "global_errors" in summary
        assert "forecasts" in summary
        assert "cache" in summary

    def test_reset(self):
        store = MetricsStore()
        store.record_stage_latency("series", 1.0)
        store.record_error("INTERNAL_ERROR")
        store.record_forecast("arima")
        store.record_cache_lookup(hit=True)

        store.reset()
        summary = store.get_summary()

        assert summary["stages"] == {}
        assert summary["global_errors"] == {}
        assert summary["forecasts"] == {}
        assert summary["cache"]["hits"] == 0

    def test_singleton(self):
        from econotrends.observability import get_metrics_store

        assert get_metrics_store() is get_metrics_store()
