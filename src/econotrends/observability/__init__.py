"""
EconoTrends Observability Module.

Provides in-process metrics collection for pipeline stages, errors, and cache usage.
"""

from econotrends.observability.metrics import MetricsStore, get_metrics_store

__all__ = ["MetricsStore", "get_metrics_store"]
