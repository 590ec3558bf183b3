"""
EconoTrends Core - Indicator Catalog.

Static registry of indicator metadata and per-indicator generation profiles.
Both tables are injectable so a new indicator is a one-place change.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

import pandas as pd

from econotrends.core.models import Frequency, Indicator, IndicatorProfile
from econotrends.exceptions import IndicatorNotFoundException


DEFAULT_INDICATORS: dict[str, Indicator] = {
    "cpi": Indicator(
        id="cpi",
        name="Consumer Price Index",
        name_en="Consumer Price Index",
        unit="YoY change (%)",
        frequency=Frequency.MONTHLY,
        source="FRED",
        description="Headline inflation gauge tracking consumer prices of goods and services.",
        category="inflation",
    ),
    "gdp": Indicator(
        id="gdp",
        name="Gross Domestic Product",
        name_en="Gross Domestic Product",
        unit="YoY change (%)",
        frequency=Frequency.QUARTERLY,
        source="FRED",
        description="Broadest measure of economic output and growth.",
        category="growth",
    ),
    "unemployment": Indicator(
        id="unemployment",
        name="Unemployment Rate",
        name_en="Unemployment Rate",
        unit="Percent (%)",
        frequency=Frequency.MONTHLY,
        source="FRED",
        description="Share of the labor force without a job and actively looking for one.",
        category="employment",
    ),
    "interest_rate": Indicator(
        id="interest_rate",
        name="Federal Funds Rate",
        name_en="Federal Funds Rate",
        unit="Percent (%)",
        frequency=Frequency.MONTHLY,
        source="FRED",
        description="Policy rate set by the central bank, anchoring short-term borrowing costs.",
        category="monetary_policy",
    ),
}

DEFAULT_PROFILES: dict[str, IndicatorProfile] = {
    "cpi": IndicatorProfile(base_value=3.2, drift=0.02),
    "gdp": IndicatorProfile(base_value=2.8, drift=0.01),
    "unemployment": IndicatorProfile(base_value=3.7, drift=-0.01),
    "interest_rate": IndicatorProfile(base_value=5.25, drift=0.005),
}

# Calendar step between consecutive observations
FREQUENCY_STEPS: dict[Frequency, pd.DateOffset] = {
    Frequency.DAILY: pd.DateOffset(days=1),
    Frequency.WEEKLY: pd.DateOffset(weeks=1),
    Frequency.MONTHLY: pd.DateOffset(months=1),
    Frequency.QUARTERLY: pd.DateOffset(months=3),
    Frequency.ANNUALLY: pd.DateOffset(years=1),
}

DEFAULT_WINDOWS: dict[Frequency, int] = {
    Frequency.DAILY: 30,
    Frequency.WEEKLY: 52,
    Frequency.MONTHLY: 24,
    Frequency.QUARTERLY: 8,
    Frequency.ANNUALLY: 5,
}

_ID_CLEANUP = re.compile(r"[^a-z_]")


def normalize_indicator_id(indicator_id: str) -> str:
    """Lower-case an id and strip anything outside [a-z_]."""
    return _ID_CLEANUP.sub("", str(indicator_id).lower())


class IndicatorCatalog:
    """Read-only lookup over indicators and their generation profiles."""

    def __init__(
        self,
        indicators: Mapping[str, Indicator] | None = None,
        profiles: Mapping[str, IndicatorProfile] | None = None,
    ):
        self._indicators = dict(indicators if indicators is not None else DEFAULT_INDICATORS)
        self._profiles = dict(profiles if profiles is not None else DEFAULT_PROFILES)

    def get(self, indicator_id: str) -> Indicator:
        """Get an indicator by id or raise IndicatorNotFoundException."""
        indicator = self._indicators.get(normalize_indicator_id(indicator_id))
        if indicator is None:
            raise IndicatorNotFoundException(indicator_id)
        return indicator

    def list(self) -> list[Indicator]:
        """List active indicators in catalog order."""
        return [ind for ind in self._indicators.values() if ind.is_active]

    def ids(self) -> list[str]:
        return [ind.id for ind in self.list()]

    def profile(self, indicator_id: str) -> IndicatorProfile:
        """Get the generation profile for an indicator."""
        indicator = self.get(indicator_id)
        profile = self._profiles.get(indicator.id)
        if profile is None:
            raise IndicatorNotFoundException(indicator_id)
        return profile

    def step(self, indicator_id: str) -> pd.DateOffset:
        """Calendar offset between two observations of this indicator."""
        return FREQUENCY_STEPS[self.get(indicator_id).frequency]

    def default_window(self, indicator_id: str) -> int:
        return DEFAULT_WINDOWS[self.get(indicator_id).frequency]


DEFAULT_CATALOG = IndicatorCatalog()
