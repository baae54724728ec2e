"""
Integration test fixtures.

Integration tests:
- Test component boundaries
- Use real I/O but to temp locations
"""

import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def catalog_file(temp_dir):
    """Catalog YAML with the stock demo contents."""
    path = temp_dir / "catalog.yaml"
    path.write_text(
        """
contents:
  - kind: course
    title: Curso Java
    description: Descrição curso Java
    workload_hours: 8
    strategy: java
  - kind: course
    title: Curso JavaScript
    description: Descrição curso JavaScript
    workload_hours: 4
    strategy: javascript
  - kind: mentorship
    title: Mentoria de Java
    description: Descrição mentoria Java
    date: 2024-01-15
""",
        encoding="utf-8",
    )
    return path
