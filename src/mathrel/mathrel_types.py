"""Type predicates used to dispatch mathrel comparisons."""

from decimal import Decimal
from enum import Enum
from typing import Any

from mathrel.mathrel_matrix import MathrelMatrix
from mathrel.mathrel_unit import MathrelUnit


class MathrelKind(Enum):
    """The closed set of operand categories a comparison dispatches on."""
    NUMBER = "number"
    DECIMAL = "decimal"
    COMPLEX = "complex"
    UNIT = "unit"
    BOOLEAN = "boolean"
    STRING = "string"
    COLLECTION = "collection"
    UNSUPPORTED = "unsupported"


def is_number(value: Any) -> bool:
    """Check for a plain real number.  Booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_decimal(value: Any) -> bool:
    return isinstance(value, Decimal)


def is_complex(value: Any) -> bool:
    return isinstance(value, complex)


def is_unit(value: Any) -> bool:
    return isinstance(value, MathrelUnit)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_collection(value: Any) -> bool:
    """Check for an array (list or tuple) or a matrix."""
    return isinstance(value, (list, tuple, MathrelMatrix))


def classify(value: Any) -> MathrelKind:
    """Return the category of a value.  Every value has exactly one."""
    if is_boolean(value):
        return MathrelKind.BOOLEAN

    if is_number(value):
        return MathrelKind.NUMBER

    if is_decimal(value):
        return MathrelKind.DECIMAL

    if is_complex(value):
        return MathrelKind.COMPLEX

    if is_unit(value):
        return MathrelKind.UNIT

    if is_string(value):
        return MathrelKind.STRING

    if is_collection(value):
        return MathrelKind.COLLECTION

    return MathrelKind.UNSUPPORTED


def type_name(value: Any) -> str:
    """Return the type tag used in error messages."""
    if value is None:
        return "null"

    if isinstance(value, (list, tuple)):
        return "array"

    if isinstance(value, MathrelMatrix):
        return "matrix"

    kind = classify(value)
    if kind is MathrelKind.UNSUPPORTED:
        return type(value).__name__

    return kind.value


def value_of(value: Any) -> Any:
    """Return the plain nested-list view of a collection, or the value itself."""
    if isinstance(value, MathrelMatrix):
        return value.value_of()

    return value
