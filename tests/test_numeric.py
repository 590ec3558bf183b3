"""
Tests for rounding and least-squares helpers.
"""

import pytest

from econotrends.core.numeric import linear_fit, mean, ols_slope, r_squared, round2
from econotrends.exceptions import NumericDegenerateException


class TestRound2:
    """Two-decimal rounding."""

    @pytest.mark.parametrize("value", [3.14159, -2.125, 0.005, 1e-9, 1234.5678, -0.0049, 10.2])
    def test_rounding_is_idempotent(self, value):
        once = round2(value)
        assert round2(once) == once

    def test_rounds_to_two_decimals(self):
        assert round2(3.14159) == 3.14
        assert round2(-1.876) == -1.88


class TestLinearFit:
    """Ordinary least squares against index order."""

    def test_exact_line(self):
        fit = linear_fit([1.0, 3.0, 5.0, 7.0])
        assert fit.slope == pytest.approx(2.0)
        assert fit.intercept == pytest.approx(1.0)
        assert r_squared([1.0, 3.0, 5.0, 7.0], fit) == pytest.approx(1.0)

    def test_single_point_is_flat(self):
        fit = linear_fit([4.2])
        assert fit.slope == 0.0
        assert fit.at(3) == pytest.approx(4.2)

    def test_degenerate_slope_raises(self):
        with pytest.raises(NumericDegenerateException):
            ols_slope([1.0])

    def test_flat_series_scores_zero(self):
        values = [2.0, 2.0, 2.0]
        assert r_squared(values, linear_fit(values)) == 0.0

    def test_mean_of_nothing(self):
        with pytest.raises(NumericDegenerateException):
            mean([])
