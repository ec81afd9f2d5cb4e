"""
Tests for fourbar_tools/solver.py - closure equation sweep.

Tests verify that:
- The sweep visits the expected driving angles in order
- Continuation seeding follows the extrapolation rule
- Every emitted configuration satisfies the closure equation
- Unsolvable driving angles raise NonConvergence instead of returning garbage
"""
from __future__ import annotations

import numpy as np
import pytest

from configs.link_models import LinkageDimensions
from configs.link_models import SolverSettings
from fourbar_tools.classify import classify
from fourbar_tools.errors import NonConvergence
from fourbar_tools.schemas import SweepPolicy
from fourbar_tools.solver import closure_derivative
from fourbar_tools.solver import closure_residual
from fourbar_tools.solver import solve_beta
from fourbar_tools.solver import solve_configurations
from fourbar_tools.solver import SolverContext
from fourbar_tools.solver import sweep_angles
from fourbar_tools.trajectory_utils import closure_residuals


class TestClosureEquation:
    def test_zero_for_assembled_square(self):
        """Unit square with the cranks standing upright: B=(0,1), C=(1,1)."""
        dims = LinkageDimensions(a=1, b=1, c=1, d=1)
        assert closure_residual(dims, np.pi / 2, np.pi / 2) == pytest.approx(0.0, abs=1e-12)

    def test_derivative_matches_finite_difference(self, rocker):
        alpha, beta, h = 1.1, 0.7, 1e-6
        numeric = (closure_residual(rocker, alpha, beta + h) - closure_residual(rocker, alpha, beta - h)) / (2 * h)
        assert closure_derivative(rocker, alpha, beta) == pytest.approx(numeric, rel=1e-6)

    def test_accepts_arrays(self, rocker):
        betas = np.linspace(0, np.pi, 5)
        assert closure_residual(rocker, 1.0, betas).shape == (5,)


class TestSweepAngles:
    def test_full_rotation(self):
        policy = SweepPolicy(alpha_min=0.0, alpha_max=2 * np.pi, oscillates=False, code=1)
        alphas = sweep_angles(policy, 4)
        np.testing.assert_allclose(alphas, [0, np.pi / 2, np.pi, 3 * np.pi / 2])

    def test_oscillation_goes_there_and_back(self):
        policy = SweepPolicy(alpha_min=0.5, alpha_max=1.5, oscillates=True, code=2)
        alphas = sweep_angles(policy, 4)
        np.testing.assert_allclose(alphas, [0.5, 0.75, 1.0, 1.25, 1.5, 1.25, 1.0, 0.75])

    def test_rejects_zero_steps(self):
        policy = SweepPolicy(alpha_min=0.0, alpha_max=1.0, oscillates=False, code=1)
        with pytest.raises(ValueError):
            sweep_angles(policy, 0)


class TestSolverContext:
    def test_first_solve_keeps_zero_delta(self):
        ctx = SolverContext(seed=np.pi / 2, step=0.1)
        ctx.advance(1.0)
        assert ctx.delta_beta == 0.0
        assert ctx.seed == 1.0

    def test_extrapolates_in_direction_of_motion(self):
        ctx = SolverContext(seed=np.pi / 2, step=0.1)
        ctx.advance(1.0)
        ctx.advance(1.2)
        assert ctx.delta_beta == 0.1
        assert ctx.seed == pytest.approx(1.5)
        ctx.advance(1.4)
        assert ctx.delta_beta == -0.1
        assert ctx.seed == pytest.approx(1.1)
        assert ctx.n_solved == 3


class TestSolveBeta:
    def test_finds_root_near_seed(self, double_crank):
        """a=b=c=6, d=5 at alpha=0 reduces to 1 - 12 cos(beta) = 0."""
        beta = solve_beta(double_crank, 0.0, np.pi / 2)
        assert beta == pytest.approx(np.arccos(1 / 12), abs=1e-8)

    def test_unreachable_angle_raises(self):
        """a=6, b=6, c=4, d=5 at alpha=0: crank tips 1 apart can't span |b - c| = 2."""
        dims = LinkageDimensions(a=6, b=6, c=4, d=5)
        with pytest.raises(NonConvergence) as exc_info:
            solve_beta(dims, 0.0, np.pi / 2)
        assert exc_info.value.alpha == 0.0
        assert exc_info.value.residual > 1.0


class TestNonConvergenceMessage:
    def test_residual_without_beta(self):
        err = NonConvergence(0.5, residual=1.0)
        assert err.beta is None
        assert str(err) == 'Closure equation did not converge at alpha=0.500000 (|f|=1.000e+00)'

    def test_beta_without_residual(self):
        err = NonConvergence(0.5, beta=1.25)
        assert err.residual is None
        assert str(err) == 'Closure equation did not converge at alpha=0.500000 (last beta=1.250000)'

    def test_alpha_only_with_message(self):
        err = NonConvergence(0.5, message='seed is NaN')
        assert str(err) == 'Closure equation did not converge at alpha=0.500000: seed is NaN'


class TestSolveConfigurations:
    def test_full_rotation_length_and_residual(self, double_crank):
        _, policy = classify(double_crank)
        configs = solve_configurations(double_crank, policy, 120)
        assert len(configs) == 120
        assert configs[0].alpha == 0.0
        assert closure_residuals(double_crank, configs).max() < 1e-9 * 36

    def test_oscillation_length_and_residual(self, rocker):
        _, policy = classify(rocker)
        configs = solve_configurations(rocker, policy, 90)
        assert len(configs) == 180
        assert configs[0].alpha == pytest.approx(policy.alpha_min)
        assert configs[90].alpha == pytest.approx(policy.alpha_max)
        assert closure_residuals(rocker, configs).max() < 1e-9 * 36

    def test_emitted_alpha_is_solved_alpha(self, triple_rocker):
        _, policy = classify(triple_rocker)
        configs = solve_configurations(triple_rocker, policy, 50)
        np.testing.assert_allclose([c.alpha for c in configs], sweep_angles(policy, 50))

    def test_unreachable_range_raises(self):
        dims = LinkageDimensions(a=6, b=6, c=4, d=5)
        policy = SweepPolicy(alpha_min=0.0, alpha_max=2 * np.pi, oscillates=False, code=1)
        with pytest.raises(NonConvergence):
            solve_configurations(dims, policy, 36)

    def test_settings_tolerance_is_used(self, double_crank):
        _, policy = classify(double_crank)
        settings = SolverSettings(steps_per_angle=40, residual_tol=1e-6)
        configs = solve_configurations(double_crank, policy, 40, settings)
        assert len(configs) == 40
