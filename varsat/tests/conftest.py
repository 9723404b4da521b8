"""Pytest configuration and fixtures."""

import pytest

from varsat.constraints import OneOf
from varsat.registry import VariableRegistry


@pytest.fixture
def options() -> list[int]:
    """The 100 permissible values used by the A/B scenarios."""
    return list(range(100))


@pytest.fixture
def ab_registry(options: list[int]) -> VariableRegistry:
    """Registry with A and B, each constrained to one of `options`."""
    registry = VariableRegistry()
    registry.declare("A", OneOf(options))
    registry.declare("B", OneOf(options))
    return registry
