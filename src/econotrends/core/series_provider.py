"""
EconoTrends Core - Series Provider.

Produces an ordered series of dated observations for one indicator. The
synthetic provider stands in for a live data feed: each value combines the
indicator's base level, a linear drift, a 12-step seasonal wave, a 48-step
cyclical wave, and a bounded random perturbation.

Randomness is an explicit policy. "seeded" (the default) derives the seed
from the request parameters so identical requests yield identical series;
"system" draws from an unseeded generator.
"""

from __future__ import annotations

import hashlib
import logging
import math
import random
from datetime import date
from typing import Literal, Protocol

import pandas as pd

from econotrends.core.catalog import DEFAULT_CATALOG, IndicatorCatalog
from econotrends.core.models import Observation
from econotrends.core.numeric import round2
from econotrends.exceptions import InvalidParameterException

logger = logging.getLogger(__name__)

SEASONAL_PERIOD = 12
CYCLE_PERIOD = 48
SEASONAL_AMPLITUDE = 0.1
CYCLE_AMPLITUDE = 0.2
NOISE_SPAN = 0.3

Randomness = Literal["seeded", "system"]


class SeriesProvider(Protocol):
    """Anything that can produce a series for an indicator."""

    def generate(self, indicator_id: str, periods: int, end_date: date) -> list[Observation]:
        ...


def derive_seed(indicator_id: str, periods: int, end_date: date, salt: str = "") -> int:
    """Stable 64-bit seed for a request."""
    key = f"{indicator_id}:{periods}:{end_date.isoformat()}:{salt}"
    return int.from_bytes(hashlib.sha256(key.encode("utf-8")).digest()[:8], "big")


def observation_dates(end_date: date, periods: int, step: pd.DateOffset) -> list[date]:
    """
    Dates for `periods` observations ending at `end_date`.

    Each date is computed from end_date directly (end - k*step) so month-end
    clipping never accumulates.
    """
    end = pd.Timestamp(end_date)
    return [(end - step * k).date() for k in range(periods - 1, -1, -1)]


class SyntheticSeriesProvider:
    """Deterministic-by-default synthetic observation generator."""

    def __init__(
        self,
        catalog: IndicatorCatalog | None = None,
        randomness: Randomness = "seeded",
        seed_salt: str = "",
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self.randomness = randomness
        self.seed_salt = seed_salt

    def _rng(self, indicator_id: str, periods: int, end_date: date) -> random.Random:
        if self.randomness == "system":
            return random.Random()
        return random.Random(derive_seed(indicator_id, periods, end_date, self.seed_salt))

    def generate(self, indicator_id: str, periods: int, end_date: date) -> list[Observation]:
        """Generate exactly `periods` observations, the last one dated end_date."""
        indicator = self.catalog.get(indicator_id)
        if periods < 0:
            raise InvalidParameterException("periods", ">= 0", periods)

        profile = self.catalog.profile(indicator.id)
        dates = observation_dates(end_date, periods, self.catalog.step(indicator.id))
        rng = self._rng(indicator.id, periods, end_date)

        series = []
        for position, obs_date in enumerate(dates):
            steps_back = periods - 1 - position
            trend = profile.drift * (periods - steps_back)
            seasonality = math.sin(steps_back * 2 * math.pi / SEASONAL_PERIOD) * SEASONAL_AMPLITUDE
            cyclical = math.sin(steps_back * 2 * math.pi / CYCLE_PERIOD) * CYCLE_AMPLITUDE
            noise = (rng.random() - 0.5) * NOISE_SPAN
            value = profile.base_value + trend + seasonality + cyclical + noise
            series.append(Observation(date=obs_date, value=round2(value), indicator_id=indicator.id))

        logger.debug(
            f"Generated {len(series)} observations for {indicator.id} ending {end_date} "
            f"[randomness={self.randomness}]"
        )
        return series


class StaticSeriesProvider:
    """Serves a fixed series, trimmed to the requested window. Useful for replaying known data."""

    def __init__(self, series: dict[str, list[Observation]]):
        self._series = series

    def generate(self, indicator_id: str, periods: int, end_date: date) -> list[Observation]:
        if periods < 0:
            raise InvalidParameterException("periods", ">= 0", periods)
        available = [o for o in self._series.get(indicator_id, []) if o.date <= end_date]
        return available[-periods:] if periods else []
