import math
from typing import Any, Tuple

from pydantic import BaseModel, Field, field_validator
from typing_extensions import Annotated


class LinkageDimensions(BaseModel):
    """Bar lengths of a planar four-bar linkage with validation.

    Only positivity is checked here. Whether the four bars can close a loop
    is decided by fourbar_tools.validation so that such linkages can still be
    represented and reported as invalid.
    """

    a: Annotated[float, Field(gt=0, description="Length of the left (driving) crank")]
    b: Annotated[float, Field(gt=0, description="Length of the coupler (floating bar)")]
    c: Annotated[float, Field(gt=0, description="Length of the right (follower) crank")]
    d: Annotated[float, Field(gt=0, description="Length of the ground bar")]

    model_config = {
        "frozen": True,
    }

    @field_validator('a', 'b', 'c', 'd')
    @classmethod
    def validate_finite(cls, v):
        if not math.isfinite(v):
            raise ValueError("bar lengths must be finite numbers")
        return v

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.a, self.b, self.c, self.d)

    def longest(self) -> float:
        return max(self.as_tuple())


class AttachedPoint(BaseModel):
    """Point fixed to the coupler, in the coupler's local frame.

    The frame has its origin on the hinge between the left crank and the
    coupler, with the x axis running along the coupler.
    """

    x: float = Field(default=0.0, description="Coordinate along the coupler")
    y: float = Field(default=0.0, description="Coordinate normal to the coupler")

    model_config = {
        "frozen": True,
    }

    @field_validator('x', 'y')
    @classmethod
    def validate_finite(cls, v):
        if not math.isfinite(v):
            raise ValueError("attached point coordinates must be finite numbers")
        return v

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class SolverSettings(BaseModel):
    """Tuning knobs of the closure equation sweep."""

    steps_per_angle: Annotated[int, Field(ge=1, le=100000, description="Number of increments of the driving angle range")] = 300
    initial_guess: float = Field(default=math.pi / 2, description="Seed of the first follower angle solve")
    extrapolation: Annotated[float, Field(ge=0, description="Steps of delta_beta added to the seed after each solve")] = 3.0
    xtol: Annotated[float, Field(gt=0, description="Relative tolerance between iterates of the root-finder")] = 1e-12
    residual_tol: Annotated[float, Field(gt=0, description="Accepted |f| relative to the squared longest bar")] = 1e-9
    max_evaluations: Annotated[int, Field(ge=1, description="Function evaluations allowed per solve")] = 200

    model_config = {
        "frozen": True,
    }

    def with_steps(self, steps_per_angle: int) -> "SolverSettings":
        # model_copy(update=...) skips validation
        return SolverSettings(**{**self.model_dump(), 'steps_per_angle': steps_per_angle})


def coerce_dimensions(value: Any) -> LinkageDimensions:
    if isinstance(value, LinkageDimensions):
        return value
    if isinstance(value, (tuple, list)):
        a, b, c, d = value
        return LinkageDimensions(a=a, b=b, c=c, d=d)
    return LinkageDimensions.model_validate(value)


def coerce_point(value: Any) -> AttachedPoint:
    if value is None:
        return AttachedPoint()
    if isinstance(value, AttachedPoint):
        return value
    if isinstance(value, (tuple, list)):
        x, y = value
        return AttachedPoint(x=x, y=y)
    return AttachedPoint.model_validate(value)
