"""Exception classes for mathrel comparisons with detailed context."""

from typing import List
import difflib


class MathrelError(Exception):
    """Base exception for mathrel errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: str | None = None,
        expected: str | None = None,
        received: str | None = None,
        suggestion: str | None = None,
        example: str | None = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)


class MathrelArityError(MathrelError):
    """Raised when an operator is called with the wrong number of operands."""

    def __init__(self, operator: str, count: int, expected_count: int = 2):
        self.operator = operator
        self.count = count
        self.expected_count = expected_count

        super().__init__(
            f"Function '{operator}' requires exactly {expected_count} arguments, got {count}",
            received=f"{count} argument{'s' if count != 1 else ''}",
            expected=f"{expected_count} arguments",
            example=ErrorMessageBuilder.create_function_example(operator)
        )


class MathrelUnsupportedTypeError(MathrelError):
    """Raised when no coercion rule matches a pair of operand types."""

    def __init__(self, operator: str, left_type: str, right_type: str, context: str | None = None):
        self.operator = operator
        self.left_type = left_type
        self.right_type = right_type

        super().__init__(
            f"Function '{operator}' does not support ({left_type}, {right_type})",
            received=f"{left_type}, {right_type}",
            context=context,
            example=ErrorMessageBuilder.create_function_example(operator)
        )


class MathrelIncompatibleUnitsError(MathrelError):
    """
    Raised when two unit quantities with different base dimensions are compared.

    This is a category error rather than a value difference, so it is never
    reported as a plain "not equal" result.
    """

    def __init__(self, operator: str, left_unit: str, right_unit: str, left_base: str, right_base: str):
        self.operator = operator
        self.left_unit = left_unit
        self.right_unit = right_unit
        self.left_type = "unit"
        self.right_type = "unit"

        super().__init__(
            f"Cannot compare units with different base in '{operator}'",
            received=f"{left_unit} ({left_base}), {right_unit} ({right_base})",
            expected="Units with the same base dimensions",
            suggestion="Convert both quantities to the same physical dimension before comparing"
        )


class MathrelDimensionError(MathrelError):
    """Raised when collections have mismatched or irregular shapes."""

    def __init__(self, message: str, left_size: List[int] | None = None, right_size: List[int] | None = None):
        self.left_size = left_size
        self.right_size = right_size

        received = None
        if left_size is not None and right_size is not None:
            received = f"sizes {left_size} and {right_size}"

        super().__init__(message, received=received)


class MathrelConfigError(MathrelError):
    """Raised for invalid configuration values."""


class ErrorMessageBuilder:
    """Helper class for building detailed error messages."""

    @staticmethod
    def suggest_similar_functions(target: str, available_functions: List[str], max_suggestions: int = 3) -> List[str]:
        """Suggest similar function names using fuzzy matching."""
        if not target or not available_functions:
            return []

        return difflib.get_close_matches(target, available_functions, n=max_suggestions, cutoff=0.6)

    @staticmethod
    def create_function_example(func_name: str) -> str:
        """Create usage example for the comparison functions."""
        examples = {
            'equal': "equal(2 + 2, 4) → True",
            'unequal': "unequal(2 + 2, 3) → True",
            'smaller': "smaller(2, 3) → True",
            'smaller_eq': "smaller_eq(3, 3) → True",
            'larger': "larger(3, 2) → True",
            'larger_eq': "larger_eq(3, 3) → True",
            'compare': "compare(2, 3) → -1",
            'dot_equal': "dot_equal([1, 2], [1, 3]) → [True, False]",
            'dot_unequal': "dot_unequal([1, 2], [1, 3]) → [False, True]",
        }

        return examples.get(func_name, f"{func_name}(x, y)")
