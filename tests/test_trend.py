"""
Tests for the trend analyzer.
"""

from econotrends.core.models import TrendDirection
from econotrends.core.trend import (
    INSUFFICIENT_DATA,
    MAX_SIGNIFICANT_CHANGES,
    analyze_trend,
    classify_slope,
    describe_trend,
)


class TestAnalyzeTrend:
    """Direction, strength, and confidence classification."""

    def test_constant_series_is_stable(self, make_series):
        """Test a flat series has no trend and zero confidence."""
        trend = analyze_trend(make_series([3.0] * 12))

        assert trend.direction == TrendDirection.STABLE
        assert trend.strength == 0.0
        assert trend.confidence == 0.0
        assert trend.significant_changes == ()

    def test_increasing_line(self, line_series):
        """Test a straight rising line is increasing with full confidence."""
        trend = analyze_trend(line_series)

        assert trend.direction == TrendDirection.INCREASING
        assert trend.confidence == 1.0
        assert trend.strength == 0.14
        assert trend.slope == 0.14
        assert trend.description == "increasing trend, weak strength (high confidence)"

    def test_decreasing_line(self, make_series):
        trend = analyze_trend(make_series([10.0 - 0.5 * i for i in range(12)]))

        assert trend.direction == TrendDirection.DECREASING
        assert trend.strength == 0.5
        assert trend.description.startswith("decreasing trend, moderate strength")

    def test_slow_drift_is_stable(self, make_series):
        """Test slopes within the threshold are stable."""
        trend = analyze_trend(make_series([3.0 + 0.01 * i for i in range(12)]))
        assert trend.direction == TrendDirection.STABLE

    def test_short_series_returns_sentinel(self, make_series):
        """Test fewer than three points is not an error."""
        for values in ([], [1.0], [1.0, 5.0]):
            trend = analyze_trend(make_series(values))
            assert trend.direction == TrendDirection.STABLE
            assert trend.strength == 0.0
            assert trend.confidence == 0.0
            assert trend.description == INSUFFICIENT_DATA

    def test_only_recent_window_is_used(self, make_series):
        """Test a long decline followed by twelve flat points reads as stable."""
        values = [20.0 - i for i in range(12)] + [8.0] * 12
        trend = analyze_trend(make_series(values))
        assert trend.direction == TrendDirection.STABLE

    def test_bounds(self, make_series):
        trend = analyze_trend(make_series([1.0, 9.0, 2.0, 8.0, 3.0, 7.0]))
        assert 0.0 <= trend.strength <= 1.0
        assert 0.0 <= trend.confidence <= 1.0


class TestSignificantChanges:
    """Point-to-point move detection."""

    def test_capped_to_most_recent(self, make_series):
        series = make_series([0.0, 2.0] * 5)
        trend = analyze_trend(series)

        assert len(trend.significant_changes) == MAX_SIGNIFICANT_CHANGES
        assert trend.significant_changes[-1].date == series[-1].date
        assert all(c.severity == "significant" for c in trend.significant_changes)

    def test_moderate_severity(self, make_series):
        trend = analyze_trend(make_series([1.0, 1.0, 1.7, 1.7]))

        assert len(trend.significant_changes) == 1
        change = trend.significant_changes[0]
        assert change.change == 0.7
        assert change.severity == "moderate"

    def test_small_moves_ignored(self, make_series):
        trend = analyze_trend(make_series([1.0, 1.4, 1.8, 2.2]))
        assert trend.significant_changes == ()


class TestHelpers:
    def test_classify_slope(self):
        assert classify_slope(0.06) == TrendDirection.INCREASING
        assert classify_slope(-0.06) == TrendDirection.DECREASING
        assert classify_slope(0.05) == TrendDirection.STABLE

    def test_describe_labels(self):
        assert describe_trend(TrendDirection.STABLE, 0.9, 0.7) == (
            "stable trend, strong strength (medium confidence)"
        )
