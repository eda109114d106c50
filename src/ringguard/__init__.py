"""
Ringguard - Validation of user-drawn polygon rings.

This package decides whether an ordered sequence of latitude/longitude
points describes a simple closed ring that is safe to hand to a
geospatial index:
- Coordinates are within WGS84 ranges
- The ring is closed (auto-closed when needed)
- No edge has zero length
- No two non-adjacent edges cross, touch or overlap

Main Functions
--------------
validate_ring : Validate a submitted ring, returning Valid or Invalid
validate_ring_or_raise : Validate and return the Ring, or raise
validate_position : Validate a single marker coordinate
close_ring : Close a point sequence into a Ring
ring_to_geojson : Encode a validated ring as a GeoJSON Polygon

Example
-------
>>> from ringguard import validate_ring

>>> outcome = validate_ring([(0, 0), (1, 1), (1, 0), (0, 1)])
>>> outcome.is_valid
False
>>> outcome.message
'Polygon edges 0 and 2 must not cross (self-intersection detected)'
"""

from .core.geometry import (
    TOLERANCE,
    Point,
    Edge,
    Ring,
    approximately_equal,
    cross_product_sign,
    segments_intersect,
    as_points,
)
from .validation.defects import (
    TooFewPoints,
    CoordinateOutOfRange,
    ZeroLengthEdge,
    SelfIntersection,
    Valid,
    Invalid,
    InvalidGeometryError,
)
from .validation.coordinates import validate_point, validate_position
from .validation.closure import close_ring, is_closed
from .validation.edges import find_zero_length_edge
from .validation.intersection import find_self_intersection, iter_self_intersections
from .validation.orchestrator import validate_ring, validate_ring_or_raise
from .interop.geojson import ring_to_geojson, ring_from_geojson
from .visualization.plotting import plot_ring

__all__ = [
    # Core geometry
    'TOLERANCE',
    'Point',
    'Edge',
    'Ring',
    'approximately_equal',
    'cross_product_sign',
    'segments_intersect',
    'as_points',
    # Outcomes and defects
    'TooFewPoints',
    'CoordinateOutOfRange',
    'ZeroLengthEdge',
    'SelfIntersection',
    'Valid',
    'Invalid',
    'InvalidGeometryError',
    # Checks
    'validate_point',
    'validate_position',
    'close_ring',
    'is_closed',
    'find_zero_length_edge',
    'find_self_intersection',
    'iter_self_intersections',
    'validate_ring',
    'validate_ring_or_raise',
    # GeoJSON
    'ring_to_geojson',
    'ring_from_geojson',
    # Visualization
    'plot_ring',
]
