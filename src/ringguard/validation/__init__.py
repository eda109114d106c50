"""
Ring validation checks and the pipeline that runs them.
"""

from .defects import (
    TooFewPoints,
    CoordinateOutOfRange,
    ZeroLengthEdge,
    SelfIntersection,
    Valid,
    Invalid,
    InvalidGeometryError,
)
from .coordinates import validate_point, find_out_of_range, validate_position
from .closure import check_point_count, is_closed, close_ring
from .edges import find_zero_length_edge
from .intersection import LARGE_RING_VERTICES, are_adjacent, iter_self_intersections, find_self_intersection
from .orchestrator import validate_ring, validate_ring_or_raise

__all__ = [
    'TooFewPoints',
    'CoordinateOutOfRange',
    'ZeroLengthEdge',
    'SelfIntersection',
    'Valid',
    'Invalid',
    'InvalidGeometryError',
    'validate_point',
    'find_out_of_range',
    'validate_position',
    'check_point_count',
    'is_closed',
    'close_ring',
    'find_zero_length_edge',
    'LARGE_RING_VERTICES',
    'are_adjacent',
    'iter_self_intersections',
    'find_self_intersection',
    'validate_ring',
    'validate_ring_or_raise',
]
