"""Tolerance-aware comparison of plain real numbers."""

from fractions import Fraction
import math
from typing import Union


Real = Union[int, float]


def _is_nan(value: Real) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_finite(value: Real) -> bool:
    return not isinstance(value, float) or math.isfinite(value)


def nearly_equal(a: Real, b: Real, epsilon: float) -> bool:
    """
    Test whether two real numbers are equal within a relative tolerance.

    The difference is scaled by the larger of |a|, |b| and 1, so the test behaves
    as an absolute tolerance near zero and a relative one at large magnitudes.

    Args:
        a: First number
        b: Second number
        epsilon: Relative tolerance.  Zero or negative requests exact equality.

    Returns:
        True if the numbers are considered equal
    """
    if epsilon <= 0:
        return a == b

    if a == b:
        # Covers infinities of the same sign
        return True

    if not _is_finite(a) or not _is_finite(b):
        # NaN never matches, and an infinity only matches itself
        return False

    if isinstance(a, int) or isinstance(b, int):
        # Exact arithmetic, as integers can be too large to convert to float
        exact_a = Fraction(a)
        exact_b = Fraction(b)
        return abs(exact_a - exact_b) <= Fraction(epsilon) * max(abs(exact_a), abs(exact_b), 1)

    diff = abs(a - b)
    return diff <= epsilon * max(abs(a), abs(b), 1)


def compare_numbers(a: Real, b: Real, epsilon: float) -> int | None:
    """
    Order two real numbers using the same tolerance as nearly_equal.

    Args:
        a: First number
        b: Second number
        epsilon: Relative tolerance

    Returns:
        0 if the numbers are nearly equal, -1 if a is smaller, 1 if a is larger,
        or None if the pair is unordered (either value is NaN)
    """
    if _is_nan(a) or _is_nan(b):
        return None

    if nearly_equal(a, b, epsilon):
        return 0

    return -1 if a < b else 1
