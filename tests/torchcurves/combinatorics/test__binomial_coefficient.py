"""Tests for binomial_coefficient."""

import pytest
import scipy.special

from torchcurves.combinatorics import binomial_coefficient


class TestBinomialCoefficient:
    """Tests for binomial_coefficient function."""

    def test_pascal_row(self):
        """Row 5 of Pascal's triangle."""
        assert [binomial_coefficient(5, k) for k in range(6)] == [
            1,
            5,
            10,
            10,
            5,
            1,
        ]

    @pytest.mark.parametrize("n", [0, 1, 4, 10, 20, 25])
    def test_matches_scipy(self, n):
        """Should match scipy.special.comb with exact=True."""
        for k in range(n + 1):
            assert binomial_coefficient(n, k) == scipy.special.comb(
                n, k, exact=True
            )

    def test_symmetry(self):
        """C(n, k) == C(n, n - k)."""
        for k in range(8):
            assert binomial_coefficient(7, k) == binomial_coefficient(7, 7 - k)

    @pytest.mark.parametrize("k", [-1, 4])
    def test_out_of_range_raises(self, k):
        """k outside [0, n] is rejected."""
        with pytest.raises(ValueError):
            binomial_coefficient(3, k)
