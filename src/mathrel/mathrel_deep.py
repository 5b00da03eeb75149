"""Structural comparison of nested collections."""

from typing import Any, Callable, List

from mathrel.mathrel_error import MathrelDimensionError
from mathrel.mathrel_types import is_collection, value_of


def deep_equal(x: Any, y: Any, scalar_equal: Callable[[Any, Any], bool]) -> bool:
    """
    Test whether two values are structurally equal.

    A collection is never equal to a non-collection.  Collections of different
    lengths are unequal without their elements being inspected.  Otherwise the
    elements are compared in order and the first difference ends the scan.

    Args:
        x: First value (collection or scalar)
        y: Second value (collection or scalar)
        scalar_equal: Equality test for two non-collection values

    Returns:
        True if the values have the same shape and all elements are equal
    """
    if is_collection(x):
        if not is_collection(y):
            return False

        xs = value_of(x)
        ys = value_of(y)
        if len(xs) != len(ys):
            return False

        for x_elem, y_elem in zip(xs, ys):
            if not deep_equal(x_elem, y_elem, scalar_equal):
                return False

        return True

    if is_collection(y):
        return False

    return scalar_equal(x, y)


def element_wise(x: Any, y: Any, scalar_op: Callable[[Any, Any], Any], operator: str) -> List[Any]:
    """
    Apply a comparison to corresponding elements of two collections.

    A non-collection operand is broadcast against every element of the other.

    Args:
        x: First value
        y: Second value
        scalar_op: Comparison for two non-collection values
        operator: Operator name for error messages

    Returns:
        Nested lists of results with the shape of the collection operand(s)

    Raises:
        MathrelDimensionError: If the collections have different shapes
    """
    if is_collection(x):
        xs = value_of(x)
        if is_collection(y):
            ys = value_of(y)
            if len(xs) != len(ys):
                raise MathrelDimensionError(
                    f"Function '{operator}' requires collections of the same size",
                    left_size=_size(xs),
                    right_size=_size(ys)
                )

            return [_apply(x_elem, y_elem, scalar_op, operator) for x_elem, y_elem in zip(xs, ys)]

        return [_apply(x_elem, y, scalar_op, operator) for x_elem in xs]

    ys = value_of(y)
    return [_apply(x, y_elem, scalar_op, operator) for y_elem in ys]


def _apply(x: Any, y: Any, scalar_op: Callable[[Any, Any], Any], operator: str) -> Any:
    if is_collection(x) or is_collection(y):
        return element_wise(x, y, scalar_op, operator)

    return scalar_op(x, y)


def _size(data: Any) -> List[int]:
    """Return the size along the first element of each nesting level."""
    size = []
    while is_collection(data):
        data = value_of(data)
        size.append(len(data))
        if not data:
            break

        data = data[0]

    return size
