"""EconoTrends Modules - HTTP-facing application modules."""

from econotrends.modules.analytics import router as analytics_router
from econotrends.modules.forecast import router as forecast_router
from econotrends.modules.indicators import router as indicators_router

__all__ = [
    "analytics_router",
    "forecast_router",
    "indicators_router",
]
