"""Pytest configuration for MinRoot tests."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the root, so parent is the root)
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from primitives.field import BN254, GOLDILOCKS  # noqa: E402


@pytest.fixture(params=[BN254, GOLDILOCKS], ids=lambda f: f.name)
def field(request):
    """Every supported field configuration."""
    return request.param
