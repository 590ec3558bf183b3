"""EconoTrends Analytics Module - Aggregate statistics, trend, and forecasts."""

from econotrends.modules.analytics.router import router
from econotrends.modules.analytics.service import AnalyticsService

__all__ = ["router", "AnalyticsService"]
