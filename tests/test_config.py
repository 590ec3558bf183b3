"""
Tests for configuration module.
"""

import pytest


class TestFeatureFlags:
    """Feature flags tests."""

    def test_default_features_enabled(self):
        """Test all features are enabled by default."""
        from econotrends.config import FeatureFlags

        flags = FeatureFlags()
        assert flags.indicators is True
        assert flags.analytics is True
        assert flags.forecast is True
        assert flags.insights is True
        assert flags.metrics is True

    def test_to_dict(self):
        """Test feature flags to dict."""
        from econotrends.config import FeatureFlags

        flags = FeatureFlags()
        result = flags.to_dict()

        assert isinstance(result, dict)
        assert len(result) == 5
        assert result["forecast"] is True

    def test_env_disables_feature(self, monkeypatch):
        """Test FEATURE_* env vars toggle flags."""
        from econotrends.config import FeatureFlags

        monkeypatch.setenv("FEATURE_FORECAST", "false")
        assert FeatureFlags().forecast is False


class TestAnalyticsSettings:
    """Analytics tuning tests."""

    def test_defaults(self):
        """Test defaults match the documented request bounds."""
        from econotrends.config import AnalyticsSettings

        settings = AnalyticsSettings()
        assert settings.default_confidence == 0.8
        assert settings.default_forecast_periods == 6
        assert settings.max_forecast_periods == 24
        assert settings.max_history_periods == 100
        assert settings.randomness == "seeded"

    def test_env_override(self, monkeypatch):
        """Test ANALYTICS_* env vars are read."""
        from econotrends.config import AnalyticsSettings

        monkeypatch.setenv("ANALYTICS_RANDOMNESS", "system")
        monkeypatch.setenv("ANALYTICS_MAX_HISTORY_PERIODS", "50")

        settings = AnalyticsSettings()
        assert settings.randomness == "system"
        assert settings.max_history_periods == 50

    def test_rejects_forecast_limit_above_24(self):
        """Test the forecast horizon cap cannot be raised past 24."""
        from pydantic import ValidationError

        from econotrends.config import AnalyticsSettings

        with pytest.raises(ValidationError):
            AnalyticsSettings(max_forecast_periods=30)

    def test_cached_settings(self):
        """Test get_settings returns the cached instance."""
        from econotrends.config import get_settings

        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestExceptions:
    """Exception tests."""

    def test_indicator_not_found(self):
        """Test IndicatorNotFoundException."""
        from econotrends.exceptions import IndicatorNotFoundException

        exc = IndicatorNotFoundException("exchange_rate")
        assert exc.status_code == 404
        assert exc.code == "INDICATOR_NOT_FOUND"
        assert "exchange_rate" in exc.message

    def test_invalid_parameter_names_constraint(self):
        """Test InvalidParameterException carries the violated constraint."""
        from econotrends.exceptions import InvalidParameterException

        exc = InvalidParameterException("periods", "1 <= periods <= 24", 0)
        assert exc.status_code == 400
        assert exc.code == "INVALID_PARAMETER"
        assert exc.details == {"parameter": "periods", "constraint": "1 <= periods <= 24", "value": 0}

    def test_insufficient_data(self):
        """Test InsufficientDataException."""
        from econotrends.exceptions import InsufficientDataException

        exc = InsufficientDataException("statistics", required=1, available=0)
        assert exc.status_code == 422
        assert exc.code == "INSUFFICIENT_DATA"
        assert exc.details["available"] == 0

    def test_feature_disabled_exception(self):
        """Test FeatureDisabledException."""
        from econotrends.exceptions import FeatureDisabledException

        exc = FeatureDisabledException("forecast")
        assert exc.status_code == 503
        assert exc.code == "FEATURE_DISABLED"
        assert "forecast" in exc.message
