"""Shared fixtures for EconoTrends tests."""

from datetime import date

import pandas as pd
import pytest

from econotrends.core.models import Observation


@pytest.fixture
def make_series():
    """Build a monthly series from raw values, first point dated `start`."""

    def _make(values, start=date(2024, 1, 1), indicator="cpi", step=pd.DateOffset(months=1)):
        origin = pd.Timestamp(start)
        return [
            Observation(date=(origin + step * i).date(), value=value, indicator_id=indicator)
            for i, value in enumerate(values)
        ]

    return _make


@pytest.fixture
def line_series(make_series):
    """Twelve monthly cpi points rising in a straight line from 2.0 to 3.5."""
    return make_series([2.0 + i * 1.5 / 11 for i in range(12)])
