"""Tests for configs/link_models.py - validated input models."""
from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from configs.link_models import AttachedPoint
from configs.link_models import coerce_dimensions
from configs.link_models import coerce_point
from configs.link_models import LinkageDimensions
from configs.link_models import SolverSettings
from configs.presets import DEFAULT_DIMENSIONS


class TestLinkageDimensions:
    def test_defaults_from_presets(self):
        assert DEFAULT_DIMENSIONS.as_tuple() == (3.0, 5.0, 4.0, 6.0)
        assert DEFAULT_DIMENSIONS.longest() == 6.0

    @pytest.mark.parametrize('bad', [0, -1.0, math.inf, math.nan])
    def test_rejects_bad_lengths(self, bad):
        with pytest.raises(ValidationError):
            LinkageDimensions(a=bad, b=1, c=1, d=1)

    def test_frozen(self):
        dims = LinkageDimensions(a=1, b=2, c=3, d=4)
        with pytest.raises(ValidationError):
            dims.a = 5

    def test_coerce(self):
        expected = LinkageDimensions(a=1, b=2, c=3, d=4)
        assert coerce_dimensions((1, 2, 3, 4)) == expected
        assert coerce_dimensions({'a': 1, 'b': 2, 'c': 3, 'd': 4}) == expected
        assert coerce_dimensions(expected) is expected


class TestAttachedPoint:
    def test_default_is_coupler_origin(self):
        assert coerce_point(None) == AttachedPoint(x=0, y=0)

    def test_coerce(self):
        assert coerce_point((1.5, -2)).as_tuple() == (1.5, -2.0)
        assert coerce_point({'x': 1}).as_tuple() == (1.0, 0.0)

    def test_rejects_infinite(self):
        with pytest.raises(ValidationError):
            AttachedPoint(x=math.inf)


class TestSolverSettings:
    def test_defaults(self):
        settings = SolverSettings()
        assert settings.steps_per_angle == 300
        assert settings.initial_guess == pytest.approx(math.pi / 2)
        assert settings.extrapolation == 3.0

    def test_with_steps_validates(self):
        assert SolverSettings().with_steps(12).steps_per_angle == 12
        with pytest.raises(ValidationError):
            SolverSettings().with_steps(0)
