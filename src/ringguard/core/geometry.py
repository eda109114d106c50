"""
Core geometry types and planar predicates for ring validation.

Contains:
- Point / Edge / Ring value types
- Tolerance-aware equality (approximately_equal)
- Orientation predicate (cross_product_sign)
- Segment containment and intersection tests
- Input coercion from tuples, mappings and numpy arrays
- Shapely conversion

Planar predicates treat longitude as x and latitude as y.
"""

import math
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Sequence, Tuple, Union

import numpy as np
from shapely.geometry import Polygon


# Numerical tolerance for coordinate and cross-product comparisons
TOLERANCE = 1e-12

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# An open ring needs at least a triangle
MIN_RING_POINTS = 3


@dataclass(frozen=True)
class Point:
    """
    Immutable WGS84 coordinate.

    Attributes
    ----------
    latitude : float
        Degrees north, expected in [-90, 90].
    longitude : float
        Degrees east, expected in [-180, 180].
    """
    latitude: float
    longitude: float

    @property
    def x(self) -> float:
        return self.longitude

    @property
    def y(self) -> float:
        return self.latitude

    def approx_eq(self, other: "Point", tolerance: float = TOLERANCE) -> bool:
        """Component-wise equality within ``tolerance``."""
        return approximately_equal(self, other, tolerance)


@dataclass(frozen=True)
class Edge:
    """Directed segment between two consecutive ring points."""
    index: int
    start: Point
    end: Point


@dataclass(frozen=True)
class Ring:
    """
    Closed sequence of points describing a polygon boundary.

    The first and last points are equal within tolerance. Instances are
    produced by ``close_ring`` and are never mutated afterwards.

    ``Point.__eq__`` is exact, so an input closed only within tolerance keeps
    its own last point and ``ring[0] == ring[-1]`` can be False. Compare
    endpoints with ``ring[0].approx_eq(ring[-1], ring.tolerance)``.

    Attributes
    ----------
    points : tuple of Point
        Ring points including the closing duplicate.
    tolerance : float
        Tolerance the closure was decided with.
    """
    points: Tuple[Point, ...]
    tolerance: float = field(default=TOLERANCE, compare=False, repr=False)

    def __post_init__(self):
        points = tuple(self.points)
        if len(points) < MIN_RING_POINTS + 1:
            raise ValueError(
                f"A ring needs at least {MIN_RING_POINTS + 1} points, got {len(points)}"
            )
        if not approximately_equal(points[0], points[-1], self.tolerance):
            raise ValueError("A ring must start and end at the same point")
        object.__setattr__(self, 'points', points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def n_edges(self) -> int:
        return len(self.points) - 1

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Ring points without the closing duplicate."""
        return self.points[:-1]

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(
            Edge(i, self.points[i], self.points[i + 1])
            for i in range(self.n_edges)
        )

    def to_array(self) -> np.ndarray:
        """
        Ring as a numpy array.

        Returns
        -------
        np.ndarray
            Array of shape (M, 2) with (latitude, longitude) rows,
            closing point included.
        """
        return np.array([[p.latitude, p.longitude] for p in self.points], dtype=np.float64)

    def to_shapely(self) -> Polygon:
        """Shapely polygon in (longitude, latitude) axis order."""
        return Polygon([(p.longitude, p.latitude) for p in self.points])


PointLike = Union[Point, Sequence[float], Mapping[str, float]]


def _check_tolerance(tolerance: float) -> None:
    if not math.isfinite(tolerance) or tolerance < 0:
        raise ValueError(f"tolerance must be a finite non-negative number, got {tolerance}")


def approximately_equal(a: Point, b: Point, tolerance: float = TOLERANCE) -> bool:
    """
    Test whether two points coincide within ``tolerance`` on each axis.

    Parameters
    ----------
    a, b : Point
        Points to compare.
    tolerance : float
        Maximum absolute difference per component.

    Returns
    -------
    bool
        True if both latitude and longitude differ by at most ``tolerance``.
    """
    return (
        abs(a.latitude - b.latitude) <= tolerance
        and abs(a.longitude - b.longitude) <= tolerance
    )


def cross_product_sign(p: Point, q: Point, r: Point, tolerance: float = TOLERANCE) -> int:
    """
    Orientation of the triple (p, q, r).

    Computes the z-component of (q - p) x (r - p) in the lon/lat plane.

    Parameters
    ----------
    p, q, r : Point
        Points forming the turn p -> q -> r.
    tolerance : float
        Cross-product magnitudes at or below this count as collinear.

    Returns
    -------
    int
        +1 for a counter-clockwise turn, -1 for clockwise, 0 for collinear.
    """
    cross = (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)
    if abs(cross) <= tolerance:
        return 0
    return 1 if cross > 0 else -1


def on_segment(p: Point, q: Point, r: Point, tolerance: float = TOLERANCE) -> bool:
    """
    Test whether ``q`` lies within the bounding box of segment p-r.

    Only meaningful when p, q and r are already known to be collinear.
    """
    return (
        min(p.x, r.x) - tolerance <= q.x <= max(p.x, r.x) + tolerance
        and min(p.y, r.y) - tolerance <= q.y <= max(p.y, r.y) + tolerance
    )


def segments_intersect(
    p1: Point,
    q1: Point,
    p2: Point,
    q2: Point,
    tolerance: float = TOLERANCE
) -> bool:
    """
    Test whether segments p1-q1 and p2-q2 cross, touch or overlap.

    Parameters
    ----------
    p1, q1 : Point
        Endpoints of the first segment.
    p2, q2 : Point
        Endpoints of the second segment.
    tolerance : float
        Shared tolerance for orientation and containment tests.

    Returns
    -------
    bool
        True if the segments share at least one point.
    """
    o1 = cross_product_sign(p1, q1, p2, tolerance)
    o2 = cross_product_sign(p1, q1, q2, tolerance)
    o3 = cross_product_sign(p2, q2, p1, tolerance)
    o4 = cross_product_sign(p2, q2, q1, tolerance)

    # Proper crossing: each segment straddles the other's supporting line
    if o1 * o2 < 0 and o3 * o4 < 0:
        return True

    # Collinear endpoint lying on the other segment
    if o1 == 0 and on_segment(p1, p2, q1, tolerance):
        return True
    if o2 == 0 and on_segment(p1, q2, q1, tolerance):
        return True
    if o3 == 0 and on_segment(p2, p1, q2, tolerance):
        return True
    if o4 == 0 and on_segment(p2, q1, q2, tolerance):
        return True

    return False


def as_point(value: PointLike) -> Point:
    """
    Coerce a single coordinate into a Point.

    Accepts a Point, a (latitude, longitude) pair, or a mapping with
    ``latitude`` and ``longitude`` keys. Both forms reject values that
    ``float()`` cannot convert, such as None.
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        try:
            lat, lon = value['latitude'], value['longitude']
        except KeyError as e:
            raise ValueError(f"Coordinate mapping is missing {e.args[0]!r}") from e
    else:
        # object dtype keeps None from silently becoming NaN
        pair = np.asarray(value, dtype=object)
        if pair.shape != (2,):
            raise ValueError(f"Expected a (latitude, longitude) pair, got shape {pair.shape}")
        lat, lon = pair
    try:
        return Point(float(lat), float(lon))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Coordinate values must be numeric, got ({lat!r}, {lon!r})") from e


def as_points(values) -> Tuple[Point, ...]:
    """
    Coerce caller input into a tuple of Points.

    Parameters
    ----------
    values : np.ndarray or iterable
        Array of shape (N, 2) with (latitude, longitude) rows, or an
        iterable of Points, pairs or coordinate mappings.

    Returns
    -------
    tuple of Point
        Points in input order. Non-finite values are preserved.
    """
    if isinstance(values, Ring):
        return values.points
    if isinstance(values, np.ndarray):
        if values.size == 0:
            return ()
        if values.ndim != 2 or values.shape[1] != 2:
            raise ValueError(f"Expected points of shape (N, 2), got {values.shape}")
        if values.dtype == object:
            return tuple(as_point(row) for row in values)
        arr = values.astype(np.float64)
        return tuple(Point(float(lat), float(lon)) for lat, lon in arr)
    if isinstance(values, (str, bytes, Mapping)):
        raise ValueError(f"Expected a sequence of coordinates, got {type(values).__name__}")
    return tuple(as_point(v) for v in values)

