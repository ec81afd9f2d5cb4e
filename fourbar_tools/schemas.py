"""
schemas.py - Data structures for four-bar linkage kinematics.

Dataclasses used across fourbar_tools modules. Inputs (bar lengths, attached
point, solver settings) are pydantic models in configs.link_models.
"""
from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from configs.link_models import AttachedPoint
    from configs.link_models import LinkageDimensions


@dataclass(frozen=True)
class AngularExtrema:
    """
    Angles (radians) at which the coupler and one crank become collinear.

    The driving angle swings between alpha_right and alpha_left, the
    follower angle between beta_right and beta_left. An extremum whose
    triangle does not exist keeps its default (pi for the left angles,
    0 for the right ones) and is listed in `degenerate`.
    """
    alpha_left: float = np.pi
    alpha_right: float = 0.0
    beta_left: float = np.pi
    beta_right: float = 0.0
    degenerate: tuple[str, ...] = ()


@dataclass(frozen=True)
class SweepPolicy:
    """Range and traversal pattern of the driving angle."""
    alpha_min: float
    alpha_max: float
    oscillates: bool
    code: int

    @property
    def swing(self) -> float:
        return self.alpha_max - self.alpha_min

    def step(self, steps_per_angle: int) -> float:
        return self.swing / steps_per_angle

    def n_configurations(self, steps_per_angle: int) -> int:
        return 2 * steps_per_angle if self.oscillates else steps_per_angle


@dataclass(frozen=True)
class Configuration:
    """One solved state: driving angle alpha and follower angle beta."""
    alpha: float
    beta: float

    def __iter__(self) -> Iterator[float]:
        yield self.alpha
        yield self.beta


@dataclass(frozen=True)
class TrajectoryPoint:
    """Ground-frame position of the attached point for one Configuration."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class LinkageResult:
    """
    Outcome of one simulation run.

    configurations and trajectory are in traversal order and correspond
    element for element.
    """
    dimensions: LinkageDimensions
    point: AttachedPoint
    extrema: AngularExtrema
    policy: SweepPolicy
    steps_per_angle: int
    configurations: list[Configuration] = field(default_factory=list)
    trajectory: list[TrajectoryPoint] = field(default_factory=list)

    @property
    def oscillates(self) -> bool:
        return self.policy.oscillates

    def __len__(self) -> int:
        return len(self.configurations)

    def configurations_array(self) -> np.ndarray:
        """(n, 2) array of [alpha, beta] rows."""
        return np.array([(c.alpha, c.beta) for c in self.configurations], dtype=np.float64).reshape(-1, 2)

    def trajectory_array(self) -> np.ndarray:
        """(n, 2) array of [x, y] rows."""
        return np.array([(p.x, p.y) for p in self.trajectory], dtype=np.float64).reshape(-1, 2)

    def for_each_configuration(self, visitor: Callable[[float, float], None]) -> None:
        for c in self.configurations:
            visitor(c.alpha, c.beta)

    def for_each_point(self, visitor: Callable[[float, float], None]) -> None:
        for p in self.trajectory:
            visitor(p.x, p.y)
