"""Tests for smaller, smaller_eq, larger, larger_eq and compare."""

from decimal import Decimal
import math

import pytest

from mathrel import MathrelUnsupportedTypeError


class TestOrderingNumbers:
    """Test ordering operators on plain numbers."""

    @pytest.mark.parametrize("x,y,smaller,smaller_eq,larger,larger_eq,compare", [
        (1, 2, True, True, False, False, -1),
        (2, 1, False, False, True, True, 1),
        (2, 2, False, True, False, True, 0),
        (0.1 + 0.2, 0.3, False, True, False, True, 0),
        (0.3, 0.1 + 0.2, False, True, False, True, 0),
        (-math.inf, 5, True, True, False, False, -1),
        (True, 0.5, False, False, True, True, 1),
        (False, True, True, True, False, False, -1),
    ])
    def test_ordering_table(self, comparator, x, y, smaller, smaller_eq, larger, larger_eq, compare):
        """Test every ordering operator against the same pair."""
        assert comparator.smaller(x, y) is smaller
        assert comparator.smaller_eq(x, y) is smaller_eq
        assert comparator.larger(x, y) is larger
        assert comparator.larger_eq(x, y) is larger_eq
        assert comparator.compare(x, y) == compare

    def test_nearly_equal_is_neither_smaller_nor_larger(self, comparator_custom):
        """Test that values within tolerance are not strictly ordered."""
        comparator = comparator_custom(1e-9)
        assert comparator.smaller(1.0, 1.0 + 5e-10) is False
        assert comparator.larger(1.0 + 5e-10, 1.0) is False
        assert comparator.compare(1.0, 1.0 + 5e-10) == 0

    def test_nan_is_unordered(self, comparator):
        """Test that NaN is neither smaller, larger nor equal."""
        assert comparator.smaller(math.nan, 1) is False
        assert comparator.smaller_eq(math.nan, 1) is False
        assert comparator.larger(math.nan, 1) is False
        assert comparator.larger_eq(1, math.nan) is False
        assert math.isnan(comparator.compare(math.nan, 1))


class TestOrderingDecimals:
    """Test ordering operators involving decimals."""

    def test_exact_decimal_ordering(self, comparator_custom):
        """Test that decimals are ordered exactly, ignoring tolerance."""
        comparator = comparator_custom(1e-3)
        assert comparator.smaller(Decimal("1.0000001"), Decimal("1.0000002")) is True
        assert comparator.compare(Decimal("1.0000002"), Decimal("1.0000001")) == 1
        assert comparator.compare(Decimal("2.50"), Decimal("2.5")) == 0

    def test_decimal_against_number_and_boolean(self, comparator):
        """Test that numbers and booleans convert to decimal for ordering."""
        assert comparator.larger(Decimal("2.31"), 2.3) is True
        assert comparator.smaller(2.3, Decimal("2.31")) is True
        assert comparator.larger_eq(Decimal("1"), True) is True
        assert comparator.compare(False, Decimal("0.5")) == -1

    def test_decimal_nan_is_unordered(self, comparator):
        """Test that decimal NaN gives no ordering."""
        assert comparator.smaller(Decimal("NaN"), Decimal("1")) is False
        assert comparator.larger_eq(Decimal("NaN"), 1) is False
        assert math.isnan(comparator.compare(Decimal("NaN"), Decimal("1")))


class TestOrderingStrings:
    """Test ordering operators involving strings."""

    @pytest.mark.parametrize("x,y,expected", [
        ("apple", "banana", -1),
        ("banana", "apple", 1),
        ("apple", "apple", 0),
        ("B", "a", -1),
        ("", "a", -1),
    ])
    def test_lexicographic(self, comparator, x, y, expected):
        """Test lexicographic ordering of strings."""
        assert comparator.compare(x, y) == expected
        assert comparator.smaller(x, y) is (expected == -1)

    def test_numeric_string_against_number(self, comparator):
        """Test that numeric strings are ordered by their parsed value."""
        assert comparator.smaller("1", 2) is True
        assert comparator.compare(2, "10") == -1
        assert comparator.larger_eq("2.5", Decimal("2.50")) is True
        assert comparator.compare("1", True) == 0

    def test_string_against_number(self, comparator):
        """Test that non-numeric strings cannot be ordered against numbers."""
        with pytest.raises(MathrelUnsupportedTypeError, match="smaller.*string, number"):
            comparator.smaller("abc", 2)

        with pytest.raises(MathrelUnsupportedTypeError, match="compare.*number, string"):
            comparator.compare(2, "")


class TestOrderingComplex:
    """Test that complex numbers have no ordering."""

    @pytest.mark.parametrize("operator", ["smaller", "smaller_eq", "larger", "larger_eq", "compare"])
    def test_complex_pair_rejected(self, comparator, operator):
        """Test that ordering two complex numbers fails."""
        with pytest.raises(MathrelUnsupportedTypeError, match="complex, complex"):
            comparator.evaluate(operator, 1 + 2j, 3 + 4j)

    def test_complex_against_number_rejected(self, comparator):
        """Test that a complex cannot be ordered against a number either."""
        with pytest.raises(MathrelUnsupportedTypeError, match="number, complex") as exc_info:
            comparator.larger(5, 1 + 0j)

        assert "No ordering relation is defined for complex numbers" in str(exc_info.value)

    def test_complex_against_boolean_rejected(self, comparator):
        """Test that booleans become numbers and then fail against complex."""
        with pytest.raises(MathrelUnsupportedTypeError, match="complex, number"):
            comparator.smaller_eq(1j, True)
