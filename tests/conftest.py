"""
Pytest configuration - runs before test collection.

Adds project root to sys.path so local modules can be imported.
Configures logging for test output.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path for local module imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from configs.link_models import AttachedPoint  # noqa: E402
from configs.link_models import LinkageDimensions  # noqa: E402

# Configure logging for tests
# Default to INFO level - use pytest -s --log-cli-level=DEBUG for more verbose output
logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s - %(name)s - %(message)s',
    datefmt='%H:%M:%S',
)

# Per-step solver output is DEBUG; keep the summaries
logging.getLogger('fourbar_tools').setLevel(logging.INFO)


@pytest.fixture
def double_crank() -> LinkageDimensions:
    """Standard case 1: ground is the shortest bar, both cranks rotate fully."""
    return LinkageDimensions(a=6, b=6, c=6, d=5)


@pytest.fixture
def rocker() -> LinkageDimensions:
    """Standard case 4: the driving crank oscillates between alpha_right and alpha_left."""
    return LinkageDimensions(a=6, b=4, c=6, d=5)


@pytest.fixture
def triple_rocker() -> LinkageDimensions:
    """Standard case 8: every side <= sum of the rest, oscillation symmetric about the ground."""
    return LinkageDimensions(a=4, b=4, c=4, d=5)


@pytest.fixture
def coupler_midpoint() -> AttachedPoint:
    return AttachedPoint(x=3, y=0)
