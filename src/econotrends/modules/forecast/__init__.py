"""EconoTrends Forecast Module - Point forecasts with confidence bands."""

from econotrends.modules.forecast.router import router
from econotrends.modules.forecast.service import ForecastService

__all__ = ["router", "ForecastService"]
