"""EconoTrends - Economic indicator analytics and forecasting service."""

__version__ = "0.1.0"
