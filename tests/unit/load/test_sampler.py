"""Unit tests for inverse-CDF gap sampling."""

import math

import pytest

from happypoisson.load.sampler import exponential_gap_nanos, round_half_away


class TestRoundHalfAway:

    @pytest.mark.parametrize(
        "value, expected",
        [(0.0, 0), (0.4999, 0), (0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (-2.5, -3), (-2.4, -2)],
    )
    def test_ties_round_away_from_zero(self, value, expected):
        assert round_half_away(value) == expected

    def test_differs_from_bankers_rounding(self):
        assert round(2.5) == 2
        assert round_half_away(2.5) == 3


class TestExponentialGap:

    def test_median_gap(self):
        """p = 0.5 gives the median gap ln(2) / rate."""
        assert exponential_gap_nanos(1, 1_000, 0.5) == 693

    def test_scales_inversely_with_rate(self):
        slow = exponential_gap_nanos(1, 3_600_000_000_000, 0.5)
        fast = exponential_gap_nanos(100, 3_600_000_000_000, 0.5)
        assert abs(slow - round_half_away(math.log(2) * 3_600_000_000_000)) <= 1
        assert abs(slow / fast - 100) < 1e-6

    def test_one_minus_inverse_e_gives_mean(self):
        gap = exponential_gap_nanos(1, 1_000_000_000, 1 - math.exp(-1))
        assert gap == 1_000_000_000

    def test_tiny_sample_gives_zero_gap(self):
        assert exponential_gap_nanos(1, 1_000, 1e-18) == 0

    def test_gap_grows_towards_one(self):
        gaps = [exponential_gap_nanos(1, 1_000_000, p) for p in (0.1, 0.5, 0.9, 0.999)]
        assert gaps == sorted(gaps)

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5, float("nan")])
    def test_sample_outside_open_interval_rejected(self, p):
        with pytest.raises(ValueError):
            exponential_gap_nanos(1, 1_000, p)

    def test_non_positive_rate_rejected(self):
        with pytest.raises(ValueError):
            exponential_gap_nanos(0, 1_000, 0.5)

    def test_overflow_raises(self):
        with pytest.raises(OverflowError):
            exponential_gap_nanos(1, 2**62, 0.9)

    def test_returns_int(self):
        assert isinstance(exponential_gap_nanos(3, 1_000_000, 0.3), int)
