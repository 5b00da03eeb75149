"""
Conversion policies applied when comparing operands of different types.

Every conversion here is deterministic.  The only one that can lose precision
is downgrade_decimal, which is used when a Decimal has to be compared with a
value that has no exact Decimal form.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Union


# Floats with more significant digits than this are not converted to Decimal,
# as their shortest repr no longer identifies the value the caller wrote.
MAX_EXACT_DIGITS = 15


class MathrelCoercion:
    """Named conversion policies for mixed-type comparisons."""

    @staticmethod
    def number_to_decimal(value: Union[int, float]) -> Decimal | None:
        """
        Convert a number to a Decimal when an exact conversion exists.

        Integers always convert.  Floats convert through their shortest repr,
        so 2.3 becomes Decimal("2.3") rather than the binary expansion of 2.3.

        Returns:
            The Decimal, or None if the value is not finite or has more than
            MAX_EXACT_DIGITS significant digits
        """
        if isinstance(value, int):
            return Decimal(value)

        if not math.isfinite(value):
            return None

        converted = Decimal(repr(value))
        if len(converted.normalize().as_tuple().digits) > MAX_EXACT_DIGITS:
            return None

        return converted

    @staticmethod
    def boolean_to_decimal(value: bool) -> Decimal:
        return Decimal(1 if value else 0)

    @staticmethod
    def boolean_to_number(value: bool) -> int:
        return 1 if value else 0

    @staticmethod
    def number_to_float(value: Union[int, float]) -> float:
        """Convert a number to float, saturating integers too large for float to an infinity."""
        try:
            return float(value)

        except OverflowError:
            return math.copysign(math.inf, value)

    @staticmethod
    def number_to_complex(value: Union[int, float]) -> complex:
        return complex(MathrelCoercion.number_to_float(value), 0)

    @staticmethod
    def downgrade_decimal(value: Decimal) -> float:
        """
        Convert a Decimal to the nearest float.  This may lose precision.

        Signaling NaNs cannot be converted by float(), so every NaN becomes a quiet
        float NaN.
        """
        if value.is_nan():
            return math.nan

        return float(value)

    @staticmethod
    def string_to_number(value: str) -> Union[int, float, None]:
        """
        Parse a numeric string, e.g. "42" or "2.5e3".

        Returns:
            An int when the text is an integer literal, otherwise a float, or None
            if the text is not a number
        """
        try:
            return int(value)

        except ValueError:
            pass

        try:
            return float(value)

        except ValueError:
            return None

    @staticmethod
    def string_to_decimal(value: str) -> Decimal | None:
        """Parse a numeric string as an exact Decimal, or return None if it is not a number."""
        try:
            return Decimal(value.strip())

        except InvalidOperation:
            return None
