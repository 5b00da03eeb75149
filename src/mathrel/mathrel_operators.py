"""Module-level comparison functions backed by a shared comparator."""

from typing import Any

from mathrel.mathrel_comparator import MathrelComparator
from mathrel.mathrel_config import MathrelConfig


_comparator = MathrelComparator()


def get_default_config() -> MathrelConfig:
    """Return the settings used by the module-level functions."""
    return _comparator.config


def set_default_config(config: MathrelConfig) -> None:
    """Replace the settings used by the module-level functions."""
    _comparator.set_config(config)


def equal(*args: Any) -> Any:
    return _comparator.equal(*args)


def unequal(*args: Any) -> Any:
    return _comparator.unequal(*args)


def smaller(*args: Any) -> Any:
    return _comparator.smaller(*args)


def smaller_eq(*args: Any) -> Any:
    return _comparator.smaller_eq(*args)


def larger(*args: Any) -> Any:
    return _comparator.larger(*args)


def larger_eq(*args: Any) -> Any:
    return _comparator.larger_eq(*args)


def compare(*args: Any) -> Any:
    return _comparator.compare(*args)


def dot_equal(*args: Any) -> Any:
    return _comparator.dot_equal(*args)


def dot_unequal(*args: Any) -> Any:
    return _comparator.dot_unequal(*args)
