"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, no I/O
- integration/ Component boundaries, real I/O to temp locations

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from models import Course, Dev, JavaScriptXpStrategy, JavaXpStrategy, Mentorship


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")


@pytest.fixture
def java_course():
    """8h Java course - 96 XP."""
    return Course(
        title="Curso Java",
        description="Descrição curso Java",
        workload_hours=8,
        strategy=JavaXpStrategy(),
    )


@pytest.fixture
def js_course():
    """4h JavaScript course - 40 XP."""
    return Course(
        title="Curso JavaScript",
        description="Descrição curso JavaScript",
        workload_hours=4,
        strategy=JavaScriptXpStrategy(),
    )


@pytest.fixture
def mentorship():
    """Mentorship - always 30 XP."""
    return Mentorship(title="Mentoria de Java", description="Descrição mentoria Java")


@pytest.fixture
def joao():
    return Dev(name="João")
