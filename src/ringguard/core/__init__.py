"""
Core geometry types and predicates.
"""

from .geometry import (
    TOLERANCE,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MIN_RING_POINTS,
    Point,
    Edge,
    Ring,
    approximately_equal,
    cross_product_sign,
    on_segment,
    segments_intersect,
    as_point,
    as_points,
)

__all__ = [
    'TOLERANCE',
    'LATITUDE_RANGE',
    'LONGITUDE_RANGE',
    'MIN_RING_POINTS',
    'Point',
    'Edge',
    'Ring',
    'approximately_equal',
    'cross_product_sign',
    'on_segment',
    'segments_intersect',
    'as_point',
    'as_points',
]
