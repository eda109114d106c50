"""
Ring validation pipeline.

Runs the checks in a fixed order and stops at the first defect:

1. point count
2. coordinate ranges (first failing point)
3. closure
4. zero-length edges
5. self-intersection
"""

from ..core.geometry import TOLERANCE, Ring, _check_tolerance, as_points
from .closure import check_point_count, close_ring
from .coordinates import find_out_of_range
from .defects import Invalid, InvalidGeometryError, Valid, ValidationOutcome
from .edges import find_zero_length_edge
from .intersection import find_self_intersection


def validate_ring(points, tolerance: float = TOLERANCE) -> ValidationOutcome:
    """
    Validate a submitted polygon boundary.

    Parameters
    ----------
    points : np.ndarray or iterable
        Ordered (latitude, longitude) coordinates, open or closed. See
        ``as_points`` for the accepted shapes.
    tolerance : float
        Tolerance shared by every check. Default ``TOLERANCE`` (1e-12).

    Returns
    -------
    Valid or Invalid
        ``Valid(ring)`` with the closed ring, or ``Invalid(defect)`` with
        the first defect found.

    Raises
    ------
    ValueError
        If the input is structurally malformed or ``tolerance`` is invalid.

    Examples
    --------
    >>> outcome = validate_ring([(0, 0), (0, 1), (1, 1)])
    >>> outcome.is_valid
    True
    >>> len(outcome.ring)
    4
    """
    _check_tolerance(tolerance)
    points = as_points(points)

    defect = check_point_count(points)
    if defect is not None:
        return Invalid(defect)

    defect = find_out_of_range(points)
    if defect is not None:
        return Invalid(defect)

    try:
        ring = close_ring(points, tolerance)
    except InvalidGeometryError as e:
        return Invalid(e.defect)

    defect = find_zero_length_edge(ring, tolerance)
    if defect is not None:
        return Invalid(defect)

    defect = find_self_intersection(ring, tolerance)
    if defect is not None:
        return Invalid(defect)

    return Valid(ring)


def validate_ring_or_raise(points, tolerance: float = TOLERANCE) -> Ring:
    """
    Validate a polygon boundary and return the closed ring.

    Raises
    ------
    InvalidGeometryError
        Carrying the first defect found.
    """
    outcome = validate_ring(points, tolerance)
    if not outcome.is_valid:
        raise InvalidGeometryError(outcome.defect)
    return outcome.ring
