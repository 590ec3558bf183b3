"""
EconoTrends Core - Series Cache.

Optional TTL cache in front of a SeriesProvider, keyed by
(indicator_id, periods, end_date). The engine works the same with or
without it. Thread-safe via a lock.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from datetime import date

from econotrends.core.models import Observation
from econotrends.core.series_provider import SeriesProvider

logger = logging.getLogger(__name__)

CacheKey = tuple[str, int, date]


class CachedSeriesProvider:
    """Wraps a provider with a bounded, time-limited cache."""

    def __init__(
        self,
        provider: SeriesProvider,
        ttl_seconds: float = 1800.0,
        max_entries: int = 256,
        clock: Callable[[], float] = time.monotonic,
        on_lookup: Callable[[bool], None] | None = None,
    ):
        self.provider = provider
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._on_lookup = on_lookup
        self._lock = threading.Lock()
        self._entries: OrderedDict[CacheKey, tuple[float, tuple[Observation, ...]]] = OrderedDict()

    def generate(self, indicator_id: str, periods: int, end_date: date) -> list[Observation]:
        key = (indicator_id, periods, end_date)
        now = self._clock()

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and now - entry[0] < self.ttl_seconds:
                self._entries.move_to_end(key)
                self._record(hit=True)
                return list(entry[1])
            if entry is not None:
                del self._entries[key]

        series = self.provider.generate(indicator_id, periods, end_date)

        with self._lock:
            self._entries[key] = (now, tuple(series))
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted cached series {evicted}")
            self._record(hit=False)

        return list(series)

    def _record(self, hit: bool) -> None:
        """Report a lookup outcome. Must hold lock."""
        if self._on_lookup is not None:
            self._on_lookup(hit)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
