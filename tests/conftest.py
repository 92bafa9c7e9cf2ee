"""Shared fixtures for argument list tests."""

import pytest

from arglist.arguments.descriptor import TypeDescriptor
from arglist.arguments.parser import ArgListParser


@pytest.fixture
def arg_parser():
    """ArgListParser with default, non-strict settings."""
    return ArgListParser(strict_time_units=False, log_errors=True)


@pytest.fixture
def strict_parser():
    """ArgListParser rejecting characters after time units."""
    return ArgListParser(strict_time_units=True)


@pytest.fixture
def descriptor_factory():
    """Factory for creating TypeDescriptor instances for testing.

    Returns:
        Callable taking the mandatory count followed by the position types
    """

    def _factory(min_args: int = 0, *types):
        return TypeDescriptor.of(min_args, *types)

    return _factory
