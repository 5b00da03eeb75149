"""Tests for tolerance-aware number comparison."""

import math

import pytest

from mathrel import nearly_equal, compare_numbers


class TestNearlyEqual:
    """Test the approximate scalar comparator."""

    def test_tolerance_boundary(self):
        """Test values just inside and well outside the tolerance."""
        epsilon = 1e-9
        assert nearly_equal(1.0, 1.0 + epsilon / 2, epsilon) is True
        assert nearly_equal(1.0, 1.0 + epsilon * 10, epsilon) is False

    def test_floor_of_one_near_zero(self):
        """Test that the tolerance is absolute for values smaller than 1."""
        assert nearly_equal(0.0, 1e-10, 1e-9) is True
        assert nearly_equal(0.0, 1e-8, 1e-9) is False

    def test_relative_at_large_magnitudes(self):
        """Test that the tolerance scales with the larger operand."""
        assert nearly_equal(1e20, 1e20 + 1e10, 1e-9) is True
        assert nearly_equal(1e20, 1.001e20, 1e-9) is False

    def test_classic_floating_point_error(self):
        """Test that 0.1 + 0.2 matches 0.3 with machine epsilon."""
        assert nearly_equal(0.1 + 0.2, 0.3, 2.220446049250313e-16) is True

    @pytest.mark.parametrize("epsilon", [0, -1e-9])
    def test_non_positive_epsilon_is_exact(self, epsilon):
        """Test that zero or negative tolerance gives exact equality."""
        assert nearly_equal(0.1 + 0.2, 0.3, epsilon) is False
        assert nearly_equal(2.5, 2.5, epsilon) is True

    def test_nan_never_equal(self):
        """Test that NaN is not equal to anything, including itself."""
        assert nearly_equal(math.nan, math.nan, 1e-9) is False
        assert nearly_equal(math.nan, 1.0, 1e-9) is False
        assert nearly_equal(1.0, math.nan, 1e-9) is False

    def test_infinities(self):
        """Test that infinities only equal an infinity of the same sign."""
        assert nearly_equal(math.inf, math.inf, 1e-9) is True
        assert nearly_equal(-math.inf, -math.inf, 1e-9) is True
        assert nearly_equal(math.inf, -math.inf, 1e-9) is False
        assert nearly_equal(math.inf, 1e308, 1e-9) is False

    def test_integers(self):
        """Test that integers are compared like floats."""
        assert nearly_equal(3, 3, 1e-9) is True
        assert nearly_equal(3, 4, 1e-9) is False

    def test_integers_too_large_for_float(self):
        """Test that huge integers are compared without converting them to float."""
        assert nearly_equal(10**400, 10**400, 1e-9) is True
        assert nearly_equal(10**400, 10**400 + 1, 1e-9) is True
        assert nearly_equal(10**400, 10**400 + 1, 0) is False
        assert nearly_equal(10**400, 2 * 10**400, 1e-9) is False
        assert nearly_equal(10**400, 1.0, 1e-9) is False
        assert nearly_equal(-10**400, 1e308, 1e-9) is False
        assert nearly_equal(10**400, math.inf, 1e-9) is False


class TestCompareNumbers:
    """Test the tolerance-aware ordering."""

    @pytest.mark.parametrize("a,b,expected", [
        (1.0, 2.0, -1),
        (2.0, 1.0, 1),
        (1.0, 1.0, 0),
        (1.0, 1.0 + 5e-10, 0),
        (1.0 + 5e-10, 1.0, 0),
        (-math.inf, 0.0, -1),
        (math.inf, math.inf, 0),
        (10**400, 1.0, 1),
        (1e308, 10**400, -1),
        (10**400, math.inf, -1),
    ])
    def test_ordering(self, a, b, expected):
        """Test ordering results, including nearly equal pairs."""
        assert compare_numbers(a, b, 1e-9) == expected

    def test_nan_is_unordered(self):
        """Test that NaN gives no ordering."""
        assert compare_numbers(math.nan, 1.0, 1e-9) is None
        assert compare_numbers(1.0, math.nan, 1e-9) is None
