"""EconoTrends Indicators Module - Catalog and indicator data."""

from econotrends.modules.indicators.router import router
from econotrends.modules.indicators.service import IndicatorsService

__all__ = ["router", "IndicatorsService"]
