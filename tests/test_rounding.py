"""Tests for half-up rounding."""

from __future__ import annotations

import pytest

from kinetic.rounding import round_half_up


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        "value,expected",
        [(220.5, 221), (0.5, 1), (2.5, 3), (2.4999, 2), (-2.5, -2), (0, 0)],
    )
    def test_whole_numbers(self, value, expected):
        assert round_half_up(value) == expected
        assert isinstance(round_half_up(value), int)

    def test_builtin_round_differs(self):
        assert round(220.5) == 220
        assert round_half_up(220.5) == 221

    @pytest.mark.parametrize(
        "value,expected",
        [(16.938, 16.9), (58.143, 58.1), (7.25, 7.3), (0.05, 0.1), (123.456, 123.5)],
    )
    def test_one_decimal(self, value, expected):
        assert round_half_up(value, 1) == expected

    def test_binary_midpoint_uses_stored_value(self):
        # 1.45 and 2.675 are stored slightly below the written value
        assert round_half_up(1.45, 1) == 1.4
        assert round_half_up(2.675, 2) == 2.67

    def test_returns_float_for_decimals(self):
        assert isinstance(round_half_up(3, 1), float)
