"""
fourbar_tools - Planar four-bar linkage kinematics.

Key components:
  - simulate_linkage: full pipeline (validate, classify, solve, project)
  - is_valid / classify / solve_configurations / project_trajectory:
    the individual stages
  - InvalidLinkage / NonConvergence: the two fatal outcomes of a run

Example usage:
    from fourbar_tools import simulate_linkage

    result = simulate_linkage({'a': 6, 'b': 6, 'c': 6, 'd': 5}, point=(3, 0))
    if result.oscillates:
        ...
    for p in result.trajectory:
        print(p.x, p.y)
"""
from __future__ import annotations

from fourbar_tools.classify import classify
from fourbar_tools.errors import DegenerateTriangle
from fourbar_tools.errors import InvalidLinkage
from fourbar_tools.errors import LinkageError
from fourbar_tools.errors import NonConvergence
from fourbar_tools.kinematic import simulate_linkage
from fourbar_tools.projection import project_trajectory
from fourbar_tools.schemas import AngularExtrema
from fourbar_tools.schemas import Configuration
from fourbar_tools.schemas import LinkageResult
from fourbar_tools.schemas import SweepPolicy
from fourbar_tools.schemas import TrajectoryPoint
from fourbar_tools.solver import solve_configurations
from fourbar_tools.validation import is_valid

__all__ = [
    # Pipeline entry point
    'simulate_linkage',
    # Stages
    'is_valid',
    'classify',
    'solve_configurations',
    'project_trajectory',
    # Data types
    'AngularExtrema',
    'SweepPolicy',
    'Configuration',
    'TrajectoryPoint',
    'LinkageResult',
    # Errors
    'LinkageError',
    'InvalidLinkage',
    'NonConvergence',
    'DegenerateTriangle',
]
