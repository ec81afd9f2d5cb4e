"""
kinematic.py - Four-bar linkage simulation pipeline.

Runs the stages in dependency order:
  1. validation  - can the four bars close a loop at all?
  2. classify    - extreme angles and the driving angle sweep
  3. solver      - follower angle for every driving angle (continuation)
  4. projection  - trajectory of the point attached to the coupler

Each call is independent: nothing is cached or shared between runs, so the
same inputs always give the same result and separate linkages may be
simulated concurrently.
"""
from __future__ import annotations

import logging
from typing import Any

from configs.link_models import coerce_dimensions
from configs.link_models import coerce_point
from configs.link_models import SolverSettings
from fourbar_tools.classify import classify
from fourbar_tools.projection import project_trajectory
from fourbar_tools.schemas import LinkageResult
from fourbar_tools.solver import solve_configurations
from fourbar_tools.validation import require_valid

logger = logging.getLogger(__name__)


def simulate_linkage(
    dimensions: Any,
    point: Any = None,
    steps_per_angle: int | None = None,
    settings: SolverSettings | None = None,
) -> LinkageResult:
    """
    Simulate one four-bar linkage.

    Args:
        dimensions: LinkageDimensions, a mapping {'a', 'b', 'c', 'd'} or an
                    (a, b, c, d) sequence
        point: AttachedPoint, a mapping {'x', 'y'} or an (x, y) pair;
               defaults to the coupler origin
        steps_per_angle: Increments of the driving angle range; overrides
                         settings.steps_per_angle (default 300)
        settings: Solver tolerances and seeding

    Returns:
        LinkageResult with extrema, sweep policy, configurations and the
        trajectory of the attached point

    Raises:
        InvalidLinkage: the bars cannot form a closed loop
        NonConvergence: the closure equation failed at some driving angle
        pydantic.ValidationError: malformed input (e.g. non-positive bar)
    """
    dims = coerce_dimensions(dimensions)
    pt = coerce_point(point)
    if settings is None:
        settings = SolverSettings()
    if steps_per_angle is not None:
        settings = settings.with_steps(steps_per_angle)
    steps = settings.steps_per_angle

    require_valid(dims)

    extrema, policy = classify(dims)
    configurations = solve_configurations(dims, policy, steps, settings)
    trajectory = project_trajectory(dims, configurations, pt)

    logger.info(
        'Simulated a=%g b=%g c=%g d=%g: n=%d, %s over [%.4f, %.4f], %d configurations',
        dims.a, dims.b, dims.c, dims.d,
        policy.code,
        'oscillation' if policy.oscillates else 'full rotation',
        policy.alpha_min, policy.alpha_max,
        len(configurations),
    )

    return LinkageResult(
        dimensions=dims,
        point=pt,
        extrema=extrema,
        policy=policy,
        steps_per_angle=steps,
        configurations=configurations,
        trajectory=trajectory,
    )
