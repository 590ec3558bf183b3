"""
EconoTrends Core - Time-series analytics and forecasting engine.

Synchronous and stateless: every call builds its values fresh and nothing is
retained between requests.

Components:
- catalog: indicator metadata and generation profiles
- series_provider: synthetic observation source (injectable)
- series_cache: optional TTL cache in front of a provider
- descriptive: statistics calculator
- trend: trend analyzer
- forecasting: methodology strategy table
- confidence: confidence bands and synthetic accuracy
- narrative: read-only narrative collaborator interface
"""

from econotrends.core.catalog import DEFAULT_CATALOG, IndicatorCatalog
from econotrends.core.confidence import bound, build_forecast_points, estimate_accuracy
from econotrends.core.descriptive import compute_statistics
from econotrends.core.forecasting import forecast_values
from econotrends.core.models import Frequency, Methodology, Observation, TrendDirection
from econotrends.core.series_provider import SeriesProvider, SyntheticSeriesProvider
from econotrends.core.trend import analyze_trend

__all__ = [
    "DEFAULT_CATALOG",
    "IndicatorCatalog",
    "bound",
    "build_forecast_points",
    "estimate_accuracy",
    "compute_statistics",
    "forecast_values",
    "Frequency",
    "Methodology",
    "Observation",
    "TrendDirection",
    "SeriesProvider",
    "SyntheticSeriesProvider",
    "analyze_trend",
]
