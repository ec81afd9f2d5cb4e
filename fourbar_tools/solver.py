"""
solver.py - Closure equation sweep of a four-bar linkage.

For a driving angle alpha the follower angle beta must satisfy

    f(beta) = a^2 - b^2 + c^2 + d^2 - 2ad cos(alpha)
              + 2cd cos(beta) - 2ac cos(alpha - beta) = 0

i.e. the distance between the two crank tips equals the coupler length.
The equation generally has two roots (the two assembly branches), so the
sweep uses continuation: each solve is seeded with the previous root pushed
a few steps further in the direction beta is moving. Crossing a limit
position of an oscillating linkage, the same extrapolation carries the
solution onto the other branch for the return stroke.

The whole sweep aborts with NonConvergence on the first failed step; a
broken continuation chain makes every later seed meaningless.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from scipy.optimize import fsolve

from configs.link_models import LinkageDimensions
from configs.link_models import SolverSettings
from fourbar_tools.errors import NonConvergence
from fourbar_tools.schemas import Configuration
from fourbar_tools.schemas import SweepPolicy

logger = logging.getLogger(__name__)


def closure_residual(
    dimensions: LinkageDimensions, alpha: float, beta: float | np.ndarray
) -> float | np.ndarray:
    """Value of the closure equation f at (alpha, beta). Accepts arrays for beta."""
    a, b, c, d = dimensions.as_tuple()
    return (
        a ** 2 - b ** 2 + c ** 2 + d ** 2
        - 2 * a * d * np.cos(alpha)
        + 2 * c * d * np.cos(beta)
        - 2 * a * c * np.cos(alpha - beta)
    )


def closure_derivative(
    dimensions: LinkageDimensions, alpha: float, beta: float | np.ndarray
) -> float | np.ndarray:
    """df/dbeta of the closure equation."""
    a, _, c, d = dimensions.as_tuple()
    return -2 * c * d * np.sin(beta) - 2 * a * c * np.sin(alpha - beta)


@dataclass
class SolverContext:
    """Continuation state threaded through one sweep."""
    seed: float
    step: float
    extrapolation: float = 3.0
    delta_beta: float = 0.0
    n_solved: int = 0

    def advance(self, beta: float) -> None:
        """Update the seed after solving for beta."""
        if self.n_solved > 0:
            self.delta_beta = self.step if beta >= self.seed else -self.step
        self.seed = beta + self.extrapolation * self.delta_beta
        self.n_solved += 1


def sweep_angles(policy: SweepPolicy, steps_per_angle: int) -> np.ndarray:
    """
    Driving angles visited by a sweep, in traversal order.

    Forward from alpha_min in `steps_per_angle` increments; an oscillating
    linkage then returns from alpha_max with the same increment.
    """
    if steps_per_angle < 1:
        raise ValueError(f'steps_per_angle must be at least 1, got {steps_per_angle}')
    step = policy.step(steps_per_angle)
    idx = np.arange(steps_per_angle, dtype=np.float64)
    forward = policy.alpha_min + idx * step
    if not policy.oscillates:
        return forward
    backward = policy.alpha_max - idx * step
    return np.concatenate([forward, backward])


def solve_beta(
    dimensions: LinkageDimensions,
    alpha: float,
    seed: float,
    settings: SolverSettings | None = None,
) -> float:
    """
    Solve the closure equation for beta near `seed`.

    A root is accepted when |f| is within residual_tol of the squared longest
    bar, whatever fsolve reports. At the double root of a limit position the
    derivative vanishes and fsolve may stop early (ier 4 or 5) while the
    residual is already negligible.

    Raises:
        NonConvergence: the residual stays above the tolerance.
    """
    if settings is None:
        settings = SolverSettings()

    beta_arr, _info, ier, message = fsolve(
        lambda x: closure_residual(dimensions, alpha, x),
        np.array([seed], dtype=np.float64),
        fprime=lambda x: np.atleast_2d(closure_derivative(dimensions, alpha, x)),
        full_output=True,
        xtol=settings.xtol,
        maxfev=settings.max_evaluations,
    )
    beta = float(beta_arr[0])
    residual = abs(float(closure_residual(dimensions, alpha, beta)))
    scale = dimensions.longest() ** 2
    converged = np.isfinite(beta) and residual <= settings.residual_tol * scale

    if not converged:
        logger.error(
            'fsolve failed at alpha=%.6f (seed=%.6f, ier=%d, |f|=%.3e): %s',
            alpha, seed, ier, residual, message,
        )
        raise NonConvergence(alpha, beta=beta, residual=residual, message=message)

    if ier != 1:
        logger.debug('alpha=%.6f accepted on residual |f|=%.3e (ier=%d)', alpha, residual, ier)
    return beta


def solve_configurations(
    dimensions: LinkageDimensions,
    policy: SweepPolicy,
    steps_per_angle: int = 300,
    settings: SolverSettings | None = None,
) -> list[Configuration]:
    """
    Solve the follower angle across the sweep of the driving angle.

    Args:
        dimensions: Bar lengths (must already be validated)
        policy: Driving angle range from classify()
        steps_per_angle: Number of increments of [alpha_min, alpha_max]
        settings: Root-finder tolerances and seeding; steps_per_angle here
                  takes precedence over settings.steps_per_angle

    Returns:
        Configurations in traversal order, steps_per_angle of them for a
        full rotation and 2 * steps_per_angle for an oscillation.

    Raises:
        NonConvergence: at the first driving angle that cannot be solved.
    """
    if settings is None:
        settings = SolverSettings(steps_per_angle=steps_per_angle)

    alphas = sweep_angles(policy, steps_per_angle)
    ctx = SolverContext(
        seed=settings.initial_guess,
        step=policy.step(steps_per_angle),
        extrapolation=settings.extrapolation,
    )

    configurations: list[Configuration] = []
    for alpha in alphas:
        alpha = float(alpha)
        beta = solve_beta(dimensions, alpha, ctx.seed, settings)
        configurations.append(Configuration(alpha=alpha, beta=beta))
        ctx.advance(beta)

    logger.debug(
        'Solved %d configurations over [%.4f, %.4f] (oscillates=%s)',
        len(configurations), policy.alpha_min, policy.alpha_max, policy.oscillates,
    )
    return configurations
