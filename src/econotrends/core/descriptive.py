"""
EconoTrends Core - Statistics Calculator.

Descriptive statistics over a series. Every numeric field is rounded to two
decimals here, once; consumers must not re-round.
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence

from econotrends.core.models import Observation, Statistics
from econotrends.core.numeric import round2
from econotrends.exceptions import InsufficientDataException


def compute_statistics(series: Sequence[Observation]) -> Statistics:
    """
    Compute mean, median, population std dev, range, and last-step change.

    Raises:
        InsufficientDataException: if the series is empty.
    """
    if not series:
        raise InsufficientDataException("statistics", required=1, available=0)

    values = [obs.value for obs in series]
    latest = series[-1]

    # Change is measured from the previous point only
    change = 0.0
    change_percent = 0.0
    if len(series) > 1:
        previous = series[-2].value
        change = latest.value - previous
        if previous != 0:
            change_percent = change / previous * 100

    return Statistics(
        mean=round2(statistics.fmean(values)),
        median=round2(statistics.median(values)),
        std_dev=round2(statistics.pstdev(values)),
        min=round2(min(values)),
        max=round2(max(values)),
        latest=round2(latest.value),
        change=round2(change),
        change_percent=round2(change_percent),
        count=len(series),
        period_start=series[0].date,
        period_end=latest.date,
    )
