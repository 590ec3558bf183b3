"""
EconoTrends Configuration Module.

Handles application settings, feature flags, and analytics tuning.
Uses pydantic-settings for validation and type safety.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureFlags(BaseSettings):
    """Feature flags for enabling/disabling modules."""

    model_config = SettingsConfigDict(env_prefix="FEATURE_")

    indicators: bool = True
    analytics: bool = True
    forecast: bool = True
    insights: bool = True
    metrics: bool = True

    def to_dict(self) -> dict[str, bool]:
        """Return feature flags as dictionary for health endpoint."""
        return {
            "indicators": self.indicators,
            "analytics": self.analytics,
            "forecast": self.forecast,
            "insights": self.insights,
            "metrics": self.metrics,
        }


class AnalyticsSettings(BaseSettings):
    """Tuning knobs for the analytics and forecasting engine."""

    model_config = SettingsConfigDict(env_prefix="ANALYTICS_")

    default_confidence: float = Field(default=0.8, ge=0.1, le=1.0)
    default_forecast_periods: int = Field(default=6, ge=1, le=24)
    max_forecast_periods: int = Field(default=24, ge=1, le=24)
    max_history_periods: int = Field(default=100, ge=1)
    forecast_history_floor: int = Field(
        default=24,
        ge=2,
        description="Minimum number of historical points fed into a standalone forecast",
    )
    randomness: Literal["seeded", "system"] = Field(
        default="seeded",
        description="seeded: identical requests yield identical series. system: unseeded random source.",
    )
    seed_salt: str = Field(default="econotrends", description="Salt mixed into the per-request seed")


class CacheSettings(BaseSettings):
    """Series cache configuration."""

    model_config = SettingsConfigDict(env_prefix="CACHE_")

    enabled: bool = True
    ttl_seconds: float = Field(default=1800.0, gt=0, description="Time-to-live for cached series")
    max_entries: int = Field(default=256, ge=1)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = False
    app_log_level: str = "INFO"

    # Nested settings
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
