"""mathrel - relational operators for numbers, decimals, complex numbers, units, strings and collections."""

# Main API
from mathrel.mathrel_comparator import MathrelComparator, MathrelOperator, OPERATORS, OPERATOR_SYMBOLS
from mathrel.mathrel_config import MathrelConfig, DEFAULT_EPSILON
from mathrel.mathrel_operators import (
    equal, unequal, smaller, smaller_eq, larger, larger_eq, compare, dot_equal, dot_unequal,
    get_default_config, set_default_config
)

# Exceptions
from mathrel.mathrel_error import (
    MathrelError, MathrelArityError, MathrelUnsupportedTypeError, MathrelIncompatibleUnitsError,
    MathrelDimensionError, MathrelConfigError, ErrorMessageBuilder
)

# Value types
from mathrel.mathrel_matrix import MathrelMatrix
from mathrel.mathrel_unit import (
    MathrelUnit, check_compatible, describe_dimensions, define_unit
)

# Lower-level components
from mathrel.mathrel_coercion import MathrelCoercion
from mathrel.mathrel_tolerance import nearly_equal, compare_numbers
from mathrel.mathrel_types import (
    MathrelKind, classify, type_name, is_number, is_decimal, is_complex, is_unit, is_boolean, is_string,
    is_collection
)


__all__ = [
    # Main API
    "MathrelComparator", "MathrelOperator", "OPERATORS", "OPERATOR_SYMBOLS",
    "MathrelConfig", "DEFAULT_EPSILON",
    "equal", "unequal", "smaller", "smaller_eq", "larger", "larger_eq", "compare", "dot_equal", "dot_unequal",
    "get_default_config", "set_default_config",

    # Exceptions
    "MathrelError", "MathrelArityError", "MathrelUnsupportedTypeError", "MathrelIncompatibleUnitsError",
    "MathrelDimensionError", "MathrelConfigError", "ErrorMessageBuilder",

    # Value types
    "MathrelMatrix", "MathrelUnit", "check_compatible", "describe_dimensions", "define_unit",

    # Lower-level components
    "MathrelCoercion", "nearly_equal", "compare_numbers",
    "MathrelKind", "classify", "type_name", "is_number", "is_decimal", "is_complex", "is_unit", "is_boolean",
    "is_string", "is_collection"
]
