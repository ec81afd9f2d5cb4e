"""
trajectory_utils.py - Trajectory analysis utilities.

Small helpers for inspecting simulated motion:
  - to_array: (n, 2) float arrays from point/configuration sequences
  - trajectory_bounds: bounding box of a trajectory
  - closure_gap: distance between the first and last trajectory points
  - closure_residuals: closure equation residual at every configuration
"""
from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Sequence

import numpy as np

from configs.link_models import LinkageDimensions
from fourbar_tools.schemas import Configuration
from fourbar_tools.solver import closure_residual

TrajectoryArray = np.ndarray  # Shape: (n_points, 2)


def to_array(points: Iterable[Iterable[float]]) -> TrajectoryArray:
    """Stack (x, y) pairs (tuples, TrajectoryPoint, Configuration) into an (n, 2) array."""
    return np.array([tuple(p) for p in points], dtype=np.float64).reshape(-1, 2)


def trajectory_bounds(points: Iterable[Iterable[float]]) -> tuple[float, float, float, float]:
    """
    Axis-aligned bounding box of a trajectory.

    Returns:
        (xmin, ymin, xmax, ymax)
    """
    arr = to_array(points)
    if len(arr) == 0:
        raise ValueError('Trajectory must have at least 1 point')
    xmin, ymin = arr.min(axis=0)
    xmax, ymax = arr.max(axis=0)
    return float(xmin), float(ymin), float(xmax), float(ymax)


def closure_gap(points: Iterable[Iterable[float]]) -> float:
    """Distance between the first and the last point of a trajectory."""
    arr = to_array(points)
    if len(arr) < 2:
        return 0.0
    return float(np.linalg.norm(arr[-1] - arr[0]))


def closure_residuals(
    dimensions: LinkageDimensions,
    configurations: Sequence[Configuration],
) -> np.ndarray:
    """|f(alpha, beta)| of the closure equation for every configuration."""
    arr = to_array(configurations)
    return np.abs(closure_residual(dimensions, arr[:, 0], arr[:, 1]))
