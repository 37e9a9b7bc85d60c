"""Tests for the 2-decimal rounding helper."""

import math
import pytest

from src.utils import round2


class TestRound2:
    """Test suite for round2."""

    @pytest.mark.parametrize("value, expected", [
        (2.005, 2.01),
        (2.675, 2.68),
        (0.125, 0.13),
        (1.234, 1.23),
        (6.7446, 6.74),
        (10, 10.0),
        (0.0, 0.0)
    ])
    def test_half_up(self, value, expected):
        assert round2(value) == expected

    @pytest.mark.parametrize("value, expected", [(-2.005, -2.01), (-0.125, -0.13), (-1.234, -1.23)])
    def test_negative_halves_round_away_from_zero(self, value, expected):
        assert round2(value) == expected

    def test_idempotent(self):
        assert round2(round2(3.14159)) == 3.14

    def test_non_finite_passthrough(self):
        assert math.isnan(round2(float("nan")))
        assert round2(float("inf")) == float("inf")
