"""Pytest configuration and fixtures for Ripley tests."""

import pytest

from ripley import Environment
from ripley.compiler import Compiler


@pytest.fixture
def env():
    """Create a default Ripley Environment."""
    return Environment()


@pytest.fixture
def env_unoptimized():
    """Create an Environment that skips the optimization passes."""
    return Environment(optimize=False)


@pytest.fixture
def compiler():
    """Create a bare Compiler (no optimization)."""
    return Compiler()
