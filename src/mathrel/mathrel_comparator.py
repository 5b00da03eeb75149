"""
Relational operators over numbers, decimals, complex numbers, units, booleans,
strings and collections.

Every operator shares one dispatch chain.  The chain classifies both operands,
coerces them onto a common representation, and hands the pair to a terminal
comparison: tolerant for floats, exact for decimals.  Operators differ only in
whether they need an equality test or an ordering, how they turn that outcome
into a result, and whether collections are compared structurally or element
by element.
"""

from dataclasses import dataclass
from decimal import Decimal
import logging
import math
from typing import Any, Callable, Dict, List, Tuple, Union

from mathrel.mathrel_coercion import MathrelCoercion
from mathrel.mathrel_config import MathrelConfig
from mathrel.mathrel_deep import deep_equal, element_wise
from mathrel.mathrel_error import (
    MathrelError, MathrelArityError, MathrelUnsupportedTypeError, MathrelIncompatibleUnitsError,
    ErrorMessageBuilder
)
from mathrel.mathrel_matrix import MathrelMatrix
from mathrel.mathrel_tolerance import nearly_equal, compare_numbers
from mathrel.mathrel_types import MathrelKind, classify, type_name


# Outcome of a terminal comparison: a bool for equality tests, or -1/0/1 (None
# when unordered) for orderings.
Outcome = Union[bool, int, None]


@dataclass(frozen=True)
class MathrelOperator:
    """Describes how one member of the operator family uses the shared dispatch."""
    name: str
    ordering: bool
    element_wise: bool
    finish: Callable[[Outcome], Any]


def _order_to_compare(outcome: Outcome) -> Union[int, float]:
    return math.nan if outcome is None else outcome


OPERATORS: Dict[str, MathrelOperator] = {
    op.name: op for op in (
        MathrelOperator("equal", False, False, lambda outcome: outcome),
        MathrelOperator("unequal", False, False, lambda outcome: not outcome),
        MathrelOperator("dot_equal", False, True, lambda outcome: outcome),
        MathrelOperator("dot_unequal", False, True, lambda outcome: not outcome),
        MathrelOperator("smaller", True, True, lambda outcome: outcome == -1),
        MathrelOperator("smaller_eq", True, True, lambda outcome: outcome in (-1, 0)),
        MathrelOperator("larger", True, True, lambda outcome: outcome == 1),
        MathrelOperator("larger_eq", True, True, lambda outcome: outcome in (0, 1)),
        MathrelOperator("compare", True, True, _order_to_compare),
    )
}

# Kinds a numeric string is parsed to compare against
_NUMERIC_KINDS = (MathrelKind.NUMBER, MathrelKind.DECIMAL, MathrelKind.BOOLEAN)

# Expression syntax that maps onto the operators
OPERATOR_SYMBOLS: Dict[str, str] = {
    '==': 'equal',
    '!=': 'unequal',
    '<': 'smaller',
    '<=': 'smaller_eq',
    '>': 'larger',
    '>=': 'larger_eq',
}


class MathrelComparator:
    """
    Comparison engine holding the tolerance configuration.

    The configuration is read once at the start of each call and passed down
    through the whole comparison, so replacing it with set_config() never
    affects a comparison already in progress.
    """

    def __init__(self, config: MathrelConfig | None = None):
        """
        Initialize the comparator.

        Args:
            config: Comparison settings, or None for the defaults
        """
        self._config = config if config is not None else MathrelConfig.create_default()
        self._logger = logging.getLogger("MathrelComparator")

    @property
    def config(self) -> MathrelConfig:
        """The current comparison settings."""
        return self._config

    def set_config(self, config: MathrelConfig) -> None:
        """Replace the comparison settings."""
        self._config = config
        self._logger.debug("Comparison tolerance set to %s", config.epsilon)

    def equal(self, *args: Any) -> Any:
        """
        Test whether two values are equal.

        Numbers are equal when their relative difference is within the configured
        tolerance.  Collections are equal when they have the same size and all of
        their elements are equal.  Complex numbers need both parts to be equal.

        Examples:
            equal(2 + 2, 4) → True
            equal(MathrelUnit.create(50, "cm"), MathrelUnit.create(0.5, "m")) → True
        """
        return self._run("equal", args)

    def unequal(self, *args: Any) -> Any:
        """
        Test whether two values are unequal.

        This is always the negation of equal(): collections are unequal when their
        sizes or any of their elements differ, and complex numbers are unequal when
        either part differs.

        Examples:
            unequal(2 + 2, 3) → True
            unequal([1, 2, 3], [1, 2]) → True
        """
        return self._run("unequal", args)

    def smaller(self, *args: Any) -> Any:
        """Test whether x is smaller than y.  Nearly equal numbers are not smaller."""
        return self._run("smaller", args)

    def smaller_eq(self, *args: Any) -> Any:
        """Test whether x is smaller than or nearly equal to y."""
        return self._run("smaller_eq", args)

    def larger(self, *args: Any) -> Any:
        """Test whether x is larger than y.  Nearly equal numbers are not larger."""
        return self._run("larger", args)

    def larger_eq(self, *args: Any) -> Any:
        """Test whether x is larger than or nearly equal to y."""
        return self._run("larger_eq", args)

    def compare(self, *args: Any) -> Any:
        """
        Compare two values.

        Returns 1 when x > y, -1 when x < y, and 0 when x and y are equal.  An
        unordered pair (one of them NaN) gives NaN.
        """
        return self._run("compare", args)

    def dot_equal(self, *args: Any) -> Any:
        """Test element-wise whether two collections are equal."""
        return self._run("dot_equal", args)

    def dot_unequal(self, *args: Any) -> Any:
        """Test element-wise whether two collections are unequal."""
        return self._run("dot_unequal", args)

    def evaluate(self, operator: str, *args: Any) -> Any:
        """
        Apply an operator by name or by expression symbol.

        Args:
            operator: Operator name (e.g. "smaller_eq") or symbol (e.g. "<=")
            *args: The operands

        Raises:
            MathrelError: If the operator is not known
        """
        name = OPERATOR_SYMBOLS.get(operator, operator)
        if name not in OPERATORS:
            available = self.operator_names() + list(OPERATOR_SYMBOLS)
            similar = ErrorMessageBuilder.suggest_similar_functions(operator, available)
            raise MathrelError(
                f"Unknown comparison operator: {operator}",
                suggestion=f"Did you mean: {', '.join(similar)}?" if similar else None,
                expected=", ".join(available)
            )

        return self._run(name, args)

    def operator_names(self) -> List[str]:
        """Return the names of all operators."""
        return list(OPERATORS)

    def _run(self, name: str, args: Tuple[Any, ...]) -> Any:
        if len(args) != 2:
            raise MathrelArityError(name, len(args))

        epsilon = self._config.epsilon
        return self._dispatch(OPERATORS[name], args[0], args[1], epsilon)

    def _dispatch(self, op: MathrelOperator, x: Any, y: Any, epsilon: float) -> Any:
        """
        Compare two operands.

        The order of the checks matters: it decides which rule wins when a pair
        could match more than one.
        """
        kind_x = classify(x)
        kind_y = classify(y)

        if kind_x is MathrelKind.NUMBER and kind_y is MathrelKind.NUMBER:
            return self._compare_numbers(op, x, y, epsilon)

        if kind_x is MathrelKind.NUMBER and kind_y is MathrelKind.COMPLEX:
            return self._compare_complex(op, MathrelCoercion.number_to_complex(x), y, epsilon, x, y)

        if kind_x is MathrelKind.COMPLEX and kind_y is MathrelKind.NUMBER:
            return self._compare_complex(op, x, MathrelCoercion.number_to_complex(y), epsilon, x, y)

        if kind_x is MathrelKind.COMPLEX and kind_y is MathrelKind.COMPLEX:
            return self._compare_complex(op, x, y, epsilon, x, y)

        if kind_x is MathrelKind.DECIMAL or kind_y is MathrelKind.DECIMAL:
            return self._compare_decimal_involved(op, x, y, epsilon)

        if kind_x is MathrelKind.UNIT and kind_y is MathrelKind.UNIT:
            if not x.equal_base(y):
                self._logger.warning(
                    "Cannot compare units with different base in '%s': %s and %s",
                    op.name, x.describe(), y.describe()
                )
                raise MathrelIncompatibleUnitsError(
                    op.name, x.describe(), y.describe(), x.describe_base(), y.describe_base()
                )

            return self._dispatch(op, x.value, y.value, epsilon)

        if kind_x is MathrelKind.COLLECTION or kind_y is MathrelKind.COLLECTION:
            return self._compare_collections(op, x, y, epsilon)

        # Strings are checked after collections so an array is never mistaken for
        # a string operand.
        if kind_x is MathrelKind.STRING or kind_y is MathrelKind.STRING:
            return self._compare_strings(op, x, y, epsilon)

        if kind_x is MathrelKind.BOOLEAN:
            return self._dispatch(op, MathrelCoercion.boolean_to_number(x), y, epsilon)

        if kind_y is MathrelKind.BOOLEAN:
            return self._dispatch(op, x, MathrelCoercion.boolean_to_number(y), epsilon)

        raise MathrelUnsupportedTypeError(op.name, type_name(x), type_name(y))

    def _compare_numbers(self, op: MathrelOperator, x: Union[int, float], y: Union[int, float], epsilon: float) -> Any:
        if op.ordering:
            return op.finish(compare_numbers(x, y, epsilon))

        return op.finish(nearly_equal(x, y, epsilon))

    def _compare_complex(
        self,
        op: MathrelOperator,
        x: complex,
        y: complex,
        epsilon: float,
        original_x: Any,
        original_y: Any
    ) -> Any:
        if op.ordering:
            raise MathrelUnsupportedTypeError(
                op.name, type_name(original_x), type_name(original_y),
                context="No ordering relation is defined for complex numbers"
            )

        return op.finish(nearly_equal(x.real, y.real, epsilon) and nearly_equal(x.imag, y.imag, epsilon))

    def _compare_decimal_involved(self, op: MathrelOperator, x: Any, y: Any, epsilon: float) -> Any:
        """
        Compare a pair where at least one operand is a Decimal.

        The other operand is converted to Decimal when that can be done exactly and
        the pair is compared without tolerance.  Otherwise the Decimal is
        downgraded to a float and the whole comparison starts again.
        """
        if isinstance(x, Decimal):
            converted_y = y if isinstance(y, Decimal) else self._to_decimal(y)
            if converted_y is not None:
                return self._compare_decimals(op, x, converted_y)

            self._logger.debug("Downgrading decimal %s to float to compare with %s in '%s'", x, type_name(y), op.name)
            return self._dispatch(op, MathrelCoercion.downgrade_decimal(x), y, epsilon)

        converted_x = self._to_decimal(x)
        if converted_x is not None:
            return self._compare_decimals(op, converted_x, y)

        self._logger.debug("Downgrading decimal %s to float to compare with %s in '%s'", y, type_name(x), op.name)
        return self._dispatch(op, x, MathrelCoercion.downgrade_decimal(y), epsilon)

    def _to_decimal(self, value: Any) -> Decimal | None:
        """Convert a number, boolean or numeric string to Decimal, or return None if there is no exact form."""
        kind = classify(value)
        if kind is MathrelKind.STRING:
            return MathrelCoercion.string_to_decimal(value)

        if kind is MathrelKind.BOOLEAN:
            return MathrelCoercion.boolean_to_decimal(value)

        if kind is MathrelKind.NUMBER:
            converted = MathrelCoercion.number_to_decimal(value)
            if converted is None:
                self._logger.debug("No exact decimal form for %r", value)

            return converted

        return None

    def _compare_decimals(self, op: MathrelOperator, x: Decimal, y: Decimal) -> Any:
        unordered = x.is_nan() or y.is_nan()
        if op.ordering:
            if unordered:
                return op.finish(None)

            return op.finish((x > y) - (x < y))

        return op.finish(not unordered and x == y)

    def _compare_collections(self, op: MathrelOperator, x: Any, y: Any, epsilon: float) -> Any:
        if not op.element_wise:
            equal_op = OPERATORS["equal"]
            return op.finish(deep_equal(x, y, lambda a, b: self._dispatch(equal_op, a, b, epsilon)))

        result = element_wise(x, y, lambda a, b: self._dispatch(op, a, b, epsilon), op.name)
        if isinstance(x, MathrelMatrix) or isinstance(y, MathrelMatrix):
            return MathrelMatrix(result)

        return result

    def _compare_strings(self, op: MathrelOperator, x: Any, y: Any, epsilon: float) -> Any:
        """
        Compare a pair where at least one operand is a string.

        Two strings compare by content.  A numeric string against a number or
        boolean is parsed and the comparison starts again on the parsed value.
        """
        both_strings = isinstance(x, str) and isinstance(y, str)
        if not both_strings:
            if isinstance(x, str) and classify(y) in _NUMERIC_KINDS:
                parsed = MathrelCoercion.string_to_number(x)
                if parsed is not None:
                    return self._dispatch(op, parsed, y, epsilon)

            elif isinstance(y, str) and classify(x) in _NUMERIC_KINDS:
                parsed = MathrelCoercion.string_to_number(y)
                if parsed is not None:
                    return self._dispatch(op, x, parsed, epsilon)

        if op.ordering:
            if not both_strings:
                raise MathrelUnsupportedTypeError(
                    op.name, type_name(x), type_name(y),
                    context="Strings can only be ordered against other strings or numeric values"
                )

            return op.finish((x > y) - (x < y))

        return op.finish(both_strings and x == y)
