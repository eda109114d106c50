"""
Coordinate range checks.

Latitude must lie in [-90, 90] and longitude in [-180, 180]. NaN and
infinities fail the same way as out-of-range values.
"""

import math
from typing import Iterable, Optional

from ..core.geometry import LATITUDE_RANGE, LONGITUDE_RANGE, Point, as_point
from .defects import LATITUDE, LONGITUDE, CoordinateOutOfRange, Invalid, Valid, ValidationOutcome


def _in_range(value: float, bounds) -> bool:
    low, high = bounds
    return math.isfinite(value) and low <= value <= high


def validate_point(point: Point, index: int = 0) -> Optional[CoordinateOutOfRange]:
    """
    Check a single point's latitude and longitude.

    Parameters
    ----------
    point : Point
        Point to check.
    index : int
        Position of the point in its sequence, reported in the defect.

    Returns
    -------
    CoordinateOutOfRange or None
        The first failing axis (latitude before longitude), or None.
    """
    if not _in_range(point.latitude, LATITUDE_RANGE):
        return CoordinateOutOfRange(index, LATITUDE, point.latitude)
    if not _in_range(point.longitude, LONGITUDE_RANGE):
        return CoordinateOutOfRange(index, LONGITUDE, point.longitude)
    return None


def find_out_of_range(points: Iterable[Point]) -> Optional[CoordinateOutOfRange]:
    """Return the defect for the first out-of-range point, or None."""
    for i, point in enumerate(points):
        defect = validate_point(point, i)
        if defect is not None:
            return defect
    return None


def validate_position(latitude: float, longitude: float) -> ValidationOutcome:
    """
    Validate the coordinate of a single map marker.

    Returns
    -------
    Valid or Invalid
        ``Valid(Point)`` when both components are in range.
    """
    point = as_point((latitude, longitude))
    defect = validate_point(point)
    if defect is not None:
        return Invalid(defect)
    return Valid(point)
