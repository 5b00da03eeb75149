"""Shared fixtures for mathrel tests."""

import pytest

from mathrel import MathrelComparator, MathrelConfig, MathrelUnit


@pytest.fixture
def comparator():
    """Create a comparator with default settings for each test."""
    return MathrelComparator()


@pytest.fixture
def comparator_custom():
    """Factory for comparators with a custom tolerance."""
    def _create_comparator(epsilon: float = 1e-9) -> MathrelComparator:
        return MathrelComparator(MathrelConfig(epsilon=epsilon))
    return _create_comparator


@pytest.fixture
def unit():
    """Shorthand for building unit quantities."""
    return MathrelUnit.create
