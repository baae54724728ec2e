"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (fresh registry per test, never the process-wide one)
- Deterministic in what they assert
"""

import pytest
from datetime import date

from models import Bootcamp
from registry import BootcampRegistry


@pytest.fixture
def fixed_date():
    """Fixed date for deterministic tests."""
    return date(2024, 1, 15)


@pytest.fixture
def bootcamp():
    """Empty bootcamp."""
    return Bootcamp(name="Test Bootcamp", description="For tests")


@pytest.fixture
def registry():
    """Fresh registry with its own bootcamp."""
    return BootcampRegistry(name="Test Bootcamp", description="For tests")
