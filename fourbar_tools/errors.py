"""
errors.py - Failure conditions of the linkage pipeline.

  - InvalidLinkage: the bars cannot close a loop (raised before classification)
  - NonConvergence: a sweep step's root-finder failed (aborts the whole sweep)
  - DegenerateTriangle: an extremum triangle does not exist (absorbed by the
    classifier, which keeps the extremum at its default)
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from configs.link_models import LinkageDimensions


class LinkageError(Exception):
    """Base class for every error raised by fourbar_tools."""


class InvalidLinkage(LinkageError):
    """One bar is longer than the other three together."""

    def __init__(self, dimensions: LinkageDimensions, bar: str | None = None):
        self.dimensions = dimensions
        self.bar = bar
        detail = f' (bar {bar} exceeds the sum of the others)' if bar else ''
        super().__init__(
            f'No four-bar linkage can be built from a={dimensions.a}, b={dimensions.b}, '
            f'c={dimensions.c}, d={dimensions.d}{detail}',
        )


class NonConvergence(LinkageError):
    """The closure equation could not be solved at a driving angle."""

    def __init__(
        self,
        alpha: float,
        beta: float | None = None,
        residual: float | None = None,
        message: str = '',
    ):
        self.alpha = alpha
        self.beta = beta
        self.residual = residual
        text = f'Closure equation did not converge at alpha={alpha:.6f}'
        details = []
        if beta is not None:
            details.append(f'last beta={beta:.6f}')
        if residual is not None:
            details.append(f'|f|={residual:.3e}')
        if details:
            text += f' ({", ".join(details)})'
        if message:
            text += f': {message}'
        super().__init__(text)


class DegenerateTriangle(LinkageError):
    """Three lengths do not form a triangle with positive area."""

    def __init__(self, sides: tuple[float, float, float], sq_area: float):
        self.sides = sides
        self.sq_area = sq_area
        super().__init__(f'Sides {sides} do not form a triangle (squared area {sq_area:.3e})')
