"""Rectangular matrix container used as a mathrel collection."""

from typing import Any, List, Sequence

from mathrel.mathrel_error import MathrelDimensionError


def _size_of(data: Any) -> List[int]:
    """Return the size of nested data, raising if it is not rectangular."""
    if not isinstance(data, (list, tuple)):
        return []

    if len(data) == 0:
        return [0]

    child_sizes = [_size_of(elem) for elem in data]
    first = child_sizes[0]
    for i, child_size in enumerate(child_sizes[1:], start=1):
        if child_size != first:
            raise MathrelDimensionError(
                f"Matrix data is not rectangular: element {i} has size {child_size}, expected {first}",
                left_size=first,
                right_size=child_size
            )

    return [len(data)] + first


def _copy_nested(data: Any) -> Any:
    if isinstance(data, (list, tuple)):
        return [_copy_nested(elem) for elem in data]

    return data


class MathrelMatrix:
    """
    A multi-dimensional, rectangular collection of values.

    The matrix keeps its own copy of the data, so later changes to the list it
    was built from do not affect it.
    """

    def __init__(self, data: Sequence[Any] | None = None):
        """
        Initialize the matrix.

        Args:
            data: Nested lists or tuples holding the elements

        Raises:
            MathrelDimensionError: If the data is not rectangular
        """
        source = [] if data is None else data
        if isinstance(source, MathrelMatrix):
            source = source.value_of()

        self._size = _size_of(source)
        self._data = _copy_nested(source)

    def size(self) -> List[int]:
        """Return the length of each dimension."""
        return list(self._size)

    def dimensions(self) -> int:
        """Return the number of dimensions."""
        return len(self._size)

    def value_of(self) -> List[Any]:
        """Return a copy of the data as nested lists."""
        return _copy_nested(self._data)

    def type_name(self) -> str:
        return "matrix"

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f'MathrelMatrix({self._data!r})'
