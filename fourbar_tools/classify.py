"""
classify.py - Geometric classification of a four-bar linkage.

Computes the four extreme angles at which the coupler lines up with one of
the cranks, the 3-bit Grashof-type code of the bar lengths, and from those
the range and traversal pattern of the driving angle.

Conventions (all angles in radians, measured from the ground bar):
  - alpha: angle of the left crank `a` about its ground hinge
  - beta:  angle of the right crank `c` about its ground hinge
  - each extremum comes from a triangle built on the ground bar `d`, the
    crank in question, and the coupler folded onto the other crank
"""
from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from configs.link_models import LinkageDimensions
from fourbar_tools.errors import DegenerateTriangle
from fourbar_tools.schemas import AngularExtrema
from fourbar_tools.schemas import SweepPolicy

logger = logging.getLogger(__name__)

TWO_PI = 2 * np.pi


def triangle_height(p: float, q: float, r: float) -> tuple[float, float]:
    """
    Squared area of the triangle (p, q, r) and its height relative to side r.

    Uses Heron's formula. If the three lengths do not describe a triangle the
    squared area is zero or negative and the height is reported as 0.

    Returns:
        (sq_area, height)
    """
    s = (p + q + r) / 2
    sq_area = s * (s - p) * (s - q) * (s - r)
    if sq_area > 0:
        return sq_area, 2 * np.sqrt(sq_area) / r
    return sq_area, 0.0


def _extremum_angle(
    p: float,
    q: float,
    r: float,
    obtuse: bool,
) -> float:
    """
    Angle between side q and base r of the triangle (p, q, r).

    `obtuse` selects the supplementary angle. Raises DegenerateTriangle when
    the triangle does not exist.
    """
    sq_area, height = triangle_height(p, q, r)
    if sq_area <= 0:
        raise DegenerateTriangle((p, q, r), sq_area)
    # Clip against rounding when the height equals the side
    angle = float(np.arcsin(np.clip(height / q, -1.0, 1.0)))
    if obtuse:
        angle = np.pi - angle
    return angle


def compute_extrema(dimensions: LinkageDimensions) -> AngularExtrema:
    """
    Compute the four singular angles of the linkage.

    An extremum whose triangle is degenerate keeps its default: pi for the
    left angles, 0 for the right angles.
    """
    a, b, c, d = dimensions.as_tuple()

    # name -> (triangle sides, supplementary angle?, default)
    triangles: dict[str, tuple[tuple[float, float, float], bool, float]] = {
        'beta_right': ((a + b, c, d), (a + b) ** 2 < d ** 2 + c ** 2, 0.0),
        'beta_left': ((abs(a - b), c, d), (a - b) ** 2 < d ** 2 + c ** 2, np.pi),
        'alpha_left': ((b + c, a, d), (b + c) ** 2 > d ** 2 + a ** 2, np.pi),
        'alpha_right': ((abs(b - c), a, d), (b - c) ** 2 > d ** 2 + a ** 2, 0.0),
    }

    angles: dict[str, float] = {}
    degenerate: list[str] = []
    for name, (sides, obtuse, default) in triangles.items():
        try:
            angles[name] = _extremum_angle(*sides, obtuse=obtuse)
        except DegenerateTriangle as e:
            logger.debug('%s unreachable, keeping default %.4f: %s', name, default, e)
            angles[name] = default
            degenerate.append(name)

    return AngularExtrema(
        alpha_left=angles['alpha_left'],
        alpha_right=angles['alpha_right'],
        beta_left=angles['beta_left'],
        beta_right=angles['beta_right'],
        degenerate=tuple(degenerate),
    )


def classification_code(dimensions: LinkageDimensions) -> int:
    """3-bit sign pattern of the Grashof-type bar sums, in [0, 7]."""
    a, b, c, d = dimensions.as_tuple()
    n = 4 * int(d + b - a - c >= 0)
    n += 2 * int(c + d - a - b >= 0)
    n += 1 * int(c + b - a - d >= 0)
    return n


# Row builders: extrema -> (alpha_min, alpha_max, oscillates)
_SweepRow = Callable[[AngularExtrema], tuple[float, float, bool]]


def _full_rotation(e: AngularExtrema) -> tuple[float, float, bool]:
    return 0.0, TWO_PI, False


def _right_to_left(e: AngularExtrema) -> tuple[float, float, bool]:
    return e.alpha_right, e.alpha_left, True


def _symmetric_about_ground(e: AngularExtrema) -> tuple[float, float, bool]:
    return -e.alpha_left, e.alpha_left, True


def _around_back(e: AngularExtrema) -> tuple[float, float, bool]:
    return e.alpha_right, TWO_PI - e.alpha_right, True


SWEEP_TABLE: dict[int, _SweepRow] = {
    0: _symmetric_about_ground,
    1: _full_rotation,
    2: _right_to_left,
    3: _around_back,
    4: _right_to_left,
    5: _around_back,
    6: _symmetric_about_ground,
    7: _full_rotation,
}


def sweep_policy(extrema: AngularExtrema, code: int) -> SweepPolicy:
    """Look up the driving angle range for a classification code."""
    alpha_min, alpha_max, oscillates = SWEEP_TABLE[code](extrema)
    return SweepPolicy(
        alpha_min=float(alpha_min),
        alpha_max=float(alpha_max),
        oscillates=oscillates,
        code=code,
    )


def classify(dimensions: LinkageDimensions) -> tuple[AngularExtrema, SweepPolicy]:
    """Extrema and sweep policy of a (valid) linkage."""
    extrema = compute_extrema(dimensions)
    code = classification_code(dimensions)
    policy = sweep_policy(extrema, code)
    logger.debug(
        'n=%d alpha_right=%.6f alpha_left=%.6f beta_right=%.6f beta_left=%.6f',
        code, extrema.alpha_right, extrema.alpha_left, extrema.beta_right, extrema.beta_left,
    )
    logger.debug(
        'sweep alpha_min=%.6f alpha_max=%.6f oscillates=%s',
        policy.alpha_min, policy.alpha_max, policy.oscillates,
    )
    return extrema, policy
