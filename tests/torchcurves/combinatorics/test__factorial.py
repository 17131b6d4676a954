"""Tests for factorial."""

import math

import pytest

from torchcurves.combinatorics import factorial


class TestFactorial:
    """Tests for factorial function."""

    def test_small_values(self):
        """Should match known values."""
        assert [factorial(n) for n in range(6)] == [1, 1, 2, 6, 24, 120]

    def test_table_boundary(self):
        """Values on both sides of the precomputed table are exact."""
        assert factorial(20) == math.factorial(20)
        assert factorial(21) == math.factorial(21)
        assert factorial(30) == math.factorial(30)

    def test_returns_int(self):
        """Result should be an exact integer."""
        assert isinstance(factorial(25), int)

    def test_negative_raises(self):
        """Negative arguments are rejected."""
        with pytest.raises(ValueError):
            factorial(-1)
