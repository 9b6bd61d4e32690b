"""Tests for the adjusted modulo helpers."""

from __future__ import annotations

import pytest

from ethiopic._internal.arithmetic import amod, div_amod


class TestAmod:
    """Tests for amod()."""

    def test_zero_maps_to_modulus(self) -> None:
        """A multiple of the modulus maps to the modulus, not 0."""
        assert amod(0, 7) == 7
        assert amod(14, 7) == 7

    def test_ordinary_values(self) -> None:
        """Non-multiples behave like the ordinary remainder."""
        assert amod(1, 7) == 1
        assert amod(8, 7) == 1
        assert amod(6, 7) == 6

    def test_negative_values(self) -> None:
        """Negative inputs wrap with floor semantics."""
        assert amod(-1, 7) == 6
        assert amod(-7, 7) == 7

    @pytest.mark.parametrize("x", range(-30, 31))
    def test_range_is_one_to_modulus(self, x: int) -> None:
        """The result always lies in 1..y."""
        assert 1 <= amod(x, 13) <= 13


class TestDivAmod:
    """Tests for div_amod()."""

    def test_exact_multiple_stays_in_same_cycle(self) -> None:
        """13 over 13 is month 13 of the same year, not month 0 of the next."""
        assert div_amod(13, 13) == (0, 13)

    def test_one_past_multiple_rolls_over(self) -> None:
        """14 over 13 is month 1 of the next year."""
        assert div_amod(14, 13) == (1, 1)

    def test_zero_rolls_back(self) -> None:
        """0 over 13 is month 13 of the previous year."""
        assert div_amod(0, 13) == (-1, 13)

    @pytest.mark.parametrize("x", [-100, -27, -26, -13, -1, 1, 12, 26, 27, 1000])
    def test_reconstructs_input(self, x: int) -> None:
        """quotient * y + remainder always equals x."""
        quotient, remainder = div_amod(x, 13)
        assert quotient * 13 + remainder == x
        assert 1 <= remainder <= 13
