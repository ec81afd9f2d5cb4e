from __future__ import annotations

import numpy as np
import pytest

from configs.link_models import LinkageDimensions
from fourbar_tools.schemas import Configuration
from fourbar_tools.schemas import TrajectoryPoint
from fourbar_tools.trajectory_utils import closure_gap
from fourbar_tools.trajectory_utils import closure_residuals
from fourbar_tools.trajectory_utils import to_array
from fourbar_tools.trajectory_utils import trajectory_bounds


@pytest.fixture
def circle_trajectory() -> list[TrajectoryPoint]:
    """Create a simple circle trajectory for testing."""
    n_points = 24
    angles = np.linspace(0, 2 * np.pi, n_points, endpoint=False)
    radius = 10
    center = (50, 50)
    return [
        TrajectoryPoint(center[0] + radius * np.cos(a), center[1] + radius * np.sin(a))
        for a in angles
    ]


def test_to_array_shapes(circle_trajectory):
    arr = to_array(circle_trajectory)
    assert arr.shape == (24, 2)
    assert to_array([]).shape == (0, 2)
    np.testing.assert_allclose(to_array([(1, 2), (3, 4)]), [[1, 2], [3, 4]])


def test_trajectory_bounds(circle_trajectory):
    xmin, ymin, xmax, ymax = trajectory_bounds(circle_trajectory)
    assert (xmin, xmax) == (pytest.approx(40), pytest.approx(60))
    assert (ymin, ymax) == (pytest.approx(40, abs=0.5), pytest.approx(60, abs=0.5))


def test_trajectory_bounds_empty():
    with pytest.raises(ValueError):
        trajectory_bounds([])


def test_closure_gap(circle_trajectory):
    """Last point of a 24-gon sits one chord away from the first."""
    expected = 2 * 10 * np.sin(np.pi / 24)
    assert closure_gap(circle_trajectory) == pytest.approx(expected)
    assert closure_gap(circle_trajectory[:1]) == 0.0


def test_closure_residuals_square():
    dims = LinkageDimensions(a=1, b=1, c=1, d=1)
    configs = [Configuration(np.pi / 2, np.pi / 2), Configuration(0.0, 0.0)]
    residuals = closure_residuals(dims, configs)
    assert residuals.shape == (2,)
    assert residuals[0] == pytest.approx(0.0, abs=1e-12)
    # alpha = beta = 0 folds the square flat: |BC| = 1, f = 0 as well
    assert residuals[1] == pytest.approx(0.0, abs=1e-12)
