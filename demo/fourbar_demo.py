#!/usr/bin/env python3
"""
Four-Bar Linkage Demo - Classify and simulate the standard linkages.

WHAT THIS DEMO DOES:
====================
For each of the eight standard linkages (or one linkage given on the
command line):

1. Check that the bars can close a loop
2. Classify the linkage (extreme angles, full rotation vs. oscillation)
3. Sweep the driving angle and solve the follower angle at every step
4. Project the trajectory of the point attached to the coupler

and print a summary: classification code, driving angle range, number of
configurations, worst closure residual, trajectory bounding box and the gap
between the first and last trajectory points.

RUN THIS DEMO:
==============
    python demo/fourbar_demo.py
    python demo/fourbar_demo.py --dims 6 4 6 5 --point 2 0 --steps 120
    python demo/fourbar_demo.py --debug --trace-solver --steps 24
"""
from __future__ import annotations

import argparse
import logging
import math

from configs.link_models import AttachedPoint
from configs.link_models import LinkageDimensions
from configs.logging_config import get_logger
from configs.logging_config import setup_logging
from configs.presets import DEFAULT_STEPS_PER_ANGLE
from configs.presets import STANDARD_CASES
from fourbar_tools import LinkageError
from fourbar_tools import simulate_linkage
from fourbar_tools.trajectory_utils import closure_gap
from fourbar_tools.trajectory_utils import closure_residuals
from fourbar_tools.trajectory_utils import trajectory_bounds

def print_section(title: str, width: int = 70):
    """Print a formatted section header."""
    print('\n' + '=' * width)
    print(f'  {title}')
    print('=' * width)


def run_case(name: str, dims: LinkageDimensions, point: AttachedPoint, steps: int) -> bool:
    print_section(f'{name}: a={dims.a:g} b={dims.b:g} c={dims.c:g} d={dims.d:g}, P=({point.x:g}, {point.y:g})')
    try:
        result = simulate_linkage(dims, point, steps_per_angle=steps)
    except LinkageError as e:
        get_logger('demo').warning('%s failed: %s', name, e)
        print(f'  FAILED: {e}')
        return False

    e = result.extrema
    policy = result.policy
    deg = 180.0 / math.pi
    print(f'  Code n={policy.code} -> {"oscillation" if policy.oscillates else "full rotation"}')
    print(f'  alpha: [{e.alpha_right * deg:8.3f}, {e.alpha_left * deg:8.3f}] deg (right, left)')
    print(f'  beta:  [{e.beta_right * deg:8.3f}, {e.beta_left * deg:8.3f}] deg (right, left)')
    if e.degenerate:
        print(f'  Unreachable extrema (defaults kept): {", ".join(e.degenerate)}')
    print(f'  Sweep: {policy.alpha_min * deg:.3f} -> {policy.alpha_max * deg:.3f} deg')
    print(f'  Configurations: {len(result)}')
    print(f'  Max |f|: {closure_residuals(dims, result.configurations).max():.3e}')
    xmin, ymin, xmax, ymax = trajectory_bounds(result.trajectory)
    print(f'  Trajectory box: x [{xmin:.3f}, {xmax:.3f}]  y [{ymin:.3f}, {ymax:.3f}]')
    print(f'  First/last gap: {closure_gap(result.trajectory):.4f}')
    return True


def main():
    parser = argparse.ArgumentParser(description='Simulate planar four-bar linkages')
    parser.add_argument('--dims', nargs=4, type=float, metavar=('A', 'B', 'C', 'D'),
                        help='Bar lengths (left crank, coupler, right crank, ground)')
    parser.add_argument('--point', nargs=2, type=float, default=(0.0, 0.0), metavar=('X', 'Y'),
                        help='Attached point in the coupler frame')
    parser.add_argument('--steps', type=int, default=DEFAULT_STEPS_PER_ANGLE,
                        help='Increments of the driving angle range')
    parser.add_argument('--debug', action='store_true',
                        help='Log classification details at DEBUG level')
    parser.add_argument('--trace-solver', action='store_true',
                        help='Also log every closure equation solve (one line per driving angle)')
    args = parser.parse_args()

    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        solver_level=logging.DEBUG if args.trace_solver else logging.INFO,
    )

    if args.dims:
        a, b, c, d = args.dims
        cases = {'custom': (LinkageDimensions(a=a, b=b, c=c, d=d), AttachedPoint(x=args.point[0], y=args.point[1]))}
    else:
        cases = STANDARD_CASES

    print_section('FOUR-BAR LINKAGE DEMO')
    print(f'Linkages: {len(cases)}')
    print(f'Steps per angle: {args.steps}')

    n_ok = sum(run_case(name, dims, point, args.steps) for name, (dims, point) in cases.items())

    print_section('SUMMARY')
    print(f'  {n_ok}/{len(cases)} linkages simulated')


if __name__ == '__main__':
    main()
