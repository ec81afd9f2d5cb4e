"""
projection.py - Ground-frame positions from solved configurations.

Ground frame: origin on the ground hinge of the left crank, x axis along the
ground bar towards the right crank's hinge at (d, 0).
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from configs.link_models import AttachedPoint
from configs.link_models import LinkageDimensions
from fourbar_tools.schemas import Configuration
from fourbar_tools.schemas import TrajectoryPoint

Point2D = tuple[float, float]


def coupler_angle(dimensions: LinkageDimensions, alpha: float, beta: float) -> float:
    """Orientation of the coupler (from the left crank tip to the right one)."""
    a, _, c, d = dimensions.as_tuple()
    return float(np.arctan2(
        c * np.sin(beta) - a * np.sin(alpha),
        d + c * np.cos(beta) - a * np.cos(alpha),
    ))


def project_point(
    dimensions: LinkageDimensions,
    configuration: Configuration,
    point: AttachedPoint,
) -> TrajectoryPoint:
    """Absolute position of a coupler-fixed point for one configuration."""
    alpha, beta = configuration.alpha, configuration.beta
    gamma = coupler_angle(dimensions, alpha, beta)
    cos_g, sin_g = np.cos(gamma), np.sin(gamma)

    x_rot = point.x * cos_g - point.y * sin_g
    y_rot = point.x * sin_g + point.y * cos_g

    a = dimensions.a
    return TrajectoryPoint(
        x=float(x_rot + a * np.cos(alpha)),
        y=float(y_rot + a * np.sin(alpha)),
    )


def project_trajectory(
    dimensions: LinkageDimensions,
    configurations: Sequence[Configuration],
    point: AttachedPoint,
) -> list[TrajectoryPoint]:
    """Trajectory of the attached point, one entry per configuration, same order."""
    return [project_point(dimensions, cfg, point) for cfg in configurations]


def hinge_positions(
    dimensions: LinkageDimensions,
    configuration: Configuration,
) -> dict[str, Point2D]:
    """
    The four hinges of the linkage in the ground frame.

    A and D are the fixed ground hinges, B the tip of the left crank and C
    the tip of the right crank; the coupler runs from B to C.
    """
    a, _, c, d = dimensions.as_tuple()
    alpha, beta = configuration.alpha, configuration.beta
    return {
        'A': (0.0, 0.0),
        'B': (float(a * np.cos(alpha)), float(a * np.sin(alpha))),
        'C': (float(d + c * np.cos(beta)), float(c * np.sin(beta))),
        'D': (float(d), 0.0),
    }


def coupler_length(dimensions: LinkageDimensions, configuration: Configuration) -> float:
    """Distance between the crank tips; equals b for a solved configuration."""
    hinges = hinge_positions(dimensions, configuration)
    (bx, by), (cx, cy) = hinges['B'], hinges['C']
    return float(np.hypot(cx - bx, cy - by))
