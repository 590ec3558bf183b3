"""
EconoTrends - Dependency Injection.

FastAPI dependencies for settings, feature flags, and engine collaborators.
Tests swap collaborators through `app.dependency_overrides`.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from econotrends.config import FeatureFlags, Settings, get_settings
from econotrends.core.catalog import DEFAULT_CATALOG, IndicatorCatalog
from econotrends.core.narrative import NarrativeGenerator, TemplateNarrator
from econotrends.core.series_cache import CachedSeriesProvider
from econotrends.core.series_provider import SeriesProvider, SyntheticSeriesProvider
from econotrends.exceptions import FeatureDisabledException
from econotrends.observability import MetricsStore, get_metrics_store


# =============================================================================
# Settings Dependencies
# =============================================================================


def get_features(settings: Annotated[Settings, Depends(get_settings)]) -> FeatureFlags:
    """Get feature flags from settings."""
    return settings.features


# =============================================================================
# Engine Collaborators
# =============================================================================


def get_catalog() -> IndicatorCatalog:
    """Get the indicator catalog."""
    return DEFAULT_CATALOG


def build_series_provider(
    settings: Settings,
    catalog: IndicatorCatalog | None = None,
    metrics: MetricsStore | None = None,
) -> SeriesProvider:
    """Build the configured series provider, wrapped in a cache when enabled."""
    provider: SeriesProvider = SyntheticSeriesProvider(
        catalog=catalog or DEFAULT_CATALOG,
        randomness=settings.analytics.randomness,
        seed_salt=settings.analytics.seed_salt,
    )
    if settings.cache.enabled:
        provider = CachedSeriesProvider(
            provider,
            ttl_seconds=settings.cache.ttl_seconds,
            max_entries=settings.cache.max_entries,
            on_lookup=metrics.record_cache_lookup if metrics else None,
        )
    return provider


@lru_cache
def get_series_provider() -> SeriesProvider:
    """Get the process-wide series provider."""
    return build_series_provider(get_settings(), get_catalog(), get_metrics_store())


def get_metrics() -> MetricsStore:
    return get_metrics_store()


def get_narrator() -> NarrativeGenerator:
    return TemplateNarrator()


# =============================================================================
# Feature Flag Guards
# =============================================================================


def require_feature(feature_name: str):
    """Create a dependency that requires a specific feature to be enabled."""

    def check_feature(features: Annotated[FeatureFlags, Depends(get_features)]) -> bool:
        if not getattr(features, feature_name, False):
            raise FeatureDisabledException(feature_name)
        return True

    return check_feature


# Specific feature guards
require_indicators = Depends(require_feature("indicators"))
require_analytics = Depends(require_feature("analytics"))
require_forecast = Depends(require_feature("forecast"))
require_metrics = Depends(require_feature("metrics"))
