"""
Ring closure.

A ring is closed when its first and last points coincide within tolerance.
Closing is idempotent: an already closed sequence is returned unchanged.
"""

from typing import Optional, Sequence

from ..core.geometry import MIN_RING_POINTS, TOLERANCE, Point, Ring, approximately_equal
from .defects import InvalidGeometryError, TooFewPoints


def check_point_count(points: Sequence[Point]) -> Optional[TooFewPoints]:
    """Return ``TooFewPoints`` if fewer than three points were given."""
    if len(points) < MIN_RING_POINTS:
        return TooFewPoints(len(points))
    return None


def is_closed(points: Sequence[Point], tolerance: float = TOLERANCE) -> bool:
    """True if the sequence starts and ends at the same point."""
    return len(points) > 1 and approximately_equal(points[0], points[-1], tolerance)


def close_ring(points: Sequence[Point], tolerance: float = TOLERANCE) -> Ring:
    """
    Close a point sequence into a Ring.

    Parameters
    ----------
    points : sequence of Point
        At least three points, open or already closed.
    tolerance : float
        Per-component tolerance for comparing the first and last point.

    Returns
    -------
    Ring
        The input unchanged if already closed, otherwise the input with
        its first point appended.

    Raises
    ------
    InvalidGeometryError
        If fewer than three distinct vertices are given.
    """
    if isinstance(points, Ring):
        return points

    points = tuple(points)
    defect = check_point_count(points)
    if defect is not None:
        raise InvalidGeometryError(defect)

    if is_closed(points, tolerance):
        # [A, B, A] is closed but only has two vertices
        if len(points) <= MIN_RING_POINTS:
            raise InvalidGeometryError(TooFewPoints(len(points), closed=True))
        return Ring(points, tolerance)
    return Ring(points + (points[0],), tolerance)
