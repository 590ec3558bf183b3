"""
EconoTrends Metrics Endpoint.

Exposes observability metrics for monitoring and debugging.
"""

from fastapi import APIRouter

from econotrends.deps import require_metrics
from econotrends.observability import get_metrics_store

router = APIRouter(tags=["metrics"], dependencies=[require_metrics])


@router.get("/metrics")
def get_metrics() -> dict:
    """
    Get current metrics summary.

    Returns metrics for:
    - Pipeline stage latencies (p50, p90, p99, mean, max)
    - Error counts by code
    - Forecast counts by methodology
    - Series cache hits and misses

    Example response:
    ```json
    {
      "uptime_seconds": 3600.5,
      "collected_at": "2026-01-05T19:00:00Z",
      "stages": {
        "forecast": {
          "call_count": 150,
          "p50_ms": 0.4,
          "p99_ms": 2.1,
          "errors": {"INVALID_PARAMETER": 3}
        }
      },
      "global_errors": {"INDICATOR_NOT_FOUND": 5},
      "forecasts": {"linear": 120, "prophet": 30},
      "cache": {"hits": 80, "misses": 70, "hit_ratio": 0.533}
    }
    ```
    """
    return get_metrics_store().get_summary()
