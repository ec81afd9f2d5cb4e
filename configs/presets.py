"""
Standard four-bar linkages used by the demo and the tests.

Together the eight standard cases exercise every motion regime the
classifier distinguishes (full rotation and the three oscillation ranges).
"""
from __future__ import annotations

from configs.link_models import AttachedPoint
from configs.link_models import LinkageDimensions

DEFAULT_DIMENSIONS = LinkageDimensions(a=3.0, b=5.0, c=4.0, d=6.0)
DEFAULT_STEPS_PER_ANGLE = 300

# name -> (dimensions, attached point)
STANDARD_CASES: dict[str, tuple[LinkageDimensions, AttachedPoint]] = {
    'case_1': (LinkageDimensions(a=6, b=6, c=6, d=5), AttachedPoint(x=3)),
    'case_2': (LinkageDimensions(a=4, b=6, c=6, d=5), AttachedPoint(x=3)),
    'case_3': (LinkageDimensions(a=6, b=6, c=4, d=5), AttachedPoint(x=3)),
    'case_4': (LinkageDimensions(a=6, b=4, c=6, d=5), AttachedPoint(x=2)),
    'case_5': (LinkageDimensions(a=6, b=4, c=4, d=5), AttachedPoint(x=2)),
    'case_6': (LinkageDimensions(a=4, b=4, c=6, d=5), AttachedPoint(x=2)),
    'case_7': (LinkageDimensions(a=4, b=6, c=4, d=5), AttachedPoint(x=3)),
    'case_8': (LinkageDimensions(a=4, b=4, c=4, d=5), AttachedPoint(x=2)),
}
