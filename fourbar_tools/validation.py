"""
validation.py - Closed-loop existence test for four bar lengths.

A four-bar loop can be assembled only if no bar is longer than the other
three laid end to end.
"""
from __future__ import annotations

import logging

from configs.link_models import LinkageDimensions
from fourbar_tools.errors import InvalidLinkage

logger = logging.getLogger(__name__)


def overlong_bar(dimensions: LinkageDimensions) -> str | None:
    """Name of the first bar exceeding the sum of the other three, if any."""
    a, b, c, d = dimensions.as_tuple()
    if a > b + c + d:
        return 'a'
    if b > a + c + d:
        return 'b'
    if c > a + b + d:
        return 'c'
    if d > a + b + c:
        return 'd'
    return None


def is_valid(dimensions: LinkageDimensions) -> bool:
    """True if the four bars can form a closed linkage."""
    return overlong_bar(dimensions) is None


def require_valid(dimensions: LinkageDimensions) -> None:
    """Raise InvalidLinkage unless the four bars can form a closed linkage."""
    bar = overlong_bar(dimensions)
    if bar is not None:
        error = InvalidLinkage(dimensions, bar)
        logger.error(str(error))
        raise error
