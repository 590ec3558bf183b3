"""
EconoTrends Metrics Store.

In-process metrics collection for observability without external dependencies.
Tracks:
- Pipeline stage latencies (per stage, percentiles)
- Error counts by code (EconoTrendsException.code)
- Forecast counts by methodology
- Series cache hits and misses

Thread-safe via locks. Singleton pattern for global access.
"""

from __future__ import annotations

import statistics
import threading
import time
from collections import defaultdict
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any


@dataclass
class StageMetrics:
    """Metrics for a single pipeline stage."""

    latencies_ms: list[float] = field(default_factory=list)
    error_counts: dict[str, int] = field(default_factory=lambda: defaultdict(int))
    call_count: int = 0
    last_called: datetime | None = None

    # Keep last N latencies to avoid unbounded memory
    MAX_LATENCIES = 1000

    def record_latency(self, ms: float) -> None:
        self.latencies_ms.append(ms)
        if len(self.latencies_ms) > self.MAX_LATENCIES:
            self.latencies_ms = self.latencies_ms[-self.MAX_LATENCIES :]
        self.call_count += 1
        self.last_called = datetime.now(timezone.utc)

    def record_error(self, code: str) -> None:
        self.error_counts[code] += 1

    def get_percentiles(self) -> dict[str, float]:
        if not self.latencies_ms:
            return {}
        sorted_latencies = sorted(self.latencies_ms)
        n = len(sorted_latencies)
        return {
            "p50_ms": sorted_latencies[int(n * 0.5)],
            "p90_ms": sorted_latencies[int(n * 0.9)],
            "p99_ms": sorted_latencies[int(n * 0.99)] if n > 1 else sorted_latencies[-1],
            "mean_ms": statistics.mean(sorted_latencies),
            "max_ms": max(sorted_latencies),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "call_count": self.call_count,
            "last_called": self.last_called.isoformat() if self.last_called else None,
            **self.get_percentiles(),
            "errors": dict(self.error_counts),
        }


class MetricsStore:
    """
    Central metrics store for EconoTrends observability.

    Thread-safe singleton for collecting metrics across the application.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._stages: dict[str, StageMetrics] = defaultdict(StageMetrics)
        self._global_errors: dict[str, int] = defaultdict(int)
        self._forecasts: dict[str, int] = defaultdict(int)
        self._cache_hits = 0
        self._cache_misses = 0
        self._started_at = datetime.now(timezone.utc)

    # -------------------------------------------------------------------------
    # Stage Metrics
    # -------------------------------------------------------------------------

    def record_stage_latency(self, stage: str, ms: float) -> None:
        """Record a pipeline stage latency."""
        with self._lock:
            self._stages[stage].record_latency(ms)

    @contextmanager
    def track(self, stage: str) -> Iterator[None]:
        """
        Time a block as `stage`; errors carrying a `code` are counted against it.

        Global error totals are left to the HTTP exception handlers.
        """
        started = time.perf_counter()
        try:
            yield
        except Exception as exc:
            with self._lock:
                self._stages[stage].record_error(getattr(exc, "code", type(exc).__name__))
            raise
        finally:
            self.record_stage_latency(stage, (time.perf_counter() - started) * 1000)

    # -------------------------------------------------------------------------
    # Global Errors
    # -------------------------------------------------------------------------

    def record_error(self, code: str) -> None:
        """Record a global error (not tied to a specific stage)."""
        with self._lock:
            self._global_errors[code] += 1

    # -------------------------------------------------------------------------
    # Domain Counters
    # -------------------------------------------------------------------------

    def record_forecast(self, methodology: str) -> None:
        with self._lock:
            self._forecasts[methodology] += 1

    def record_cache_lookup(self, hit: bool) -> None:
        with self._lock:
            if hit:
                self._cache_hits += 1
            else:
                self._cache_misses += 1

    # -------------------------------------------------------------------------
    # Summary / Export
    # -------------------------------------------------------------------------

    def get_summary(self) -> dict[str, Any]:
        """
        Get a summary of all metrics.

        Returns a dict suitable for JSON serialization and /metrics endpoint.
        """
        with self._lock:
            now = datetime.now(timezone.utc)
            uptime_seconds = (now - self._started_at).total_seconds()
            lookups = self._cache_hits + self._cache_misses

            return {
                "uptime_seconds": round(uptime_seconds, 1),
                "collected_at": now.isoformat(),
                "stages": {name: metrics.to_dict() for name, metrics in self._stages.items()},
                "global_errors": dict(self._global_errors),
                "forecasts": dict(self._forecasts),
                "cache": {
                    "hits": self._cache_hits,
                    "misses": self._cache_misses,
                    "hit_ratio": round(self._cache_hits / lookups, 3) if lookups else None,
                },
            }

    def reset(self) -> None:
        """Reset all metrics. Useful for testing."""
        with self._lock:
            self._stages.clear()
            self._global_errors.clear()
            self._forecasts.clear()
            self._cache_hits = 0
            self._cache_misses = 0
            self._started_at = datetime.now(timezone.utc)


# -----------------------------------------------------------------------------
# Singleton accessor
# -----------------------------------------------------------------------------

@lru_cache(maxsize=1)
def get_metrics_store() -> MetricsStore:
    """Get the global MetricsStore singleton."""
    return MetricsStore()
