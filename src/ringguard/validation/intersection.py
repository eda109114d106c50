"""
Self-Intersection Detection Module

Tests every pair of non-adjacent edges of a closed ring for a shared point.
Adjacent edges (consecutive ones, and the first/last pair meeting at the
closing vertex) share an endpoint by construction and are skipped.

The pairwise scan is O(n^2) in the number of edges. That is fine for rings
drawn by hand (tens to a few hundred vertices); very large rings trigger a
RuntimeWarning.
"""

import warnings
from typing import Iterator, Optional

from ..core.geometry import TOLERANCE, Ring, segments_intersect
from .defects import SelfIntersection


# Above this many vertices the quadratic scan gets noticeably slow
LARGE_RING_VERTICES = 5000


def are_adjacent(i: int, j: int, n_edges: int) -> bool:
    """True if edges i < j share an endpoint by construction."""
    if j == i + 1:
        return True
    return i == 0 and j == n_edges - 1


def iter_self_intersections(ring: Ring, tolerance: float = TOLERANCE) -> Iterator[SelfIntersection]:
    """
    Yield every pair of non-adjacent edges that intersect.

    Parameters
    ----------
    ring : Ring
        Closed ring without zero-length edges.
    tolerance : float
        Shared tolerance for orientation and on-segment tests.

    Yields
    ------
    SelfIntersection
        Offending edge pairs in (i, j) lexicographic order.
    """
    points = ring.points
    n_edges = ring.n_edges

    if n_edges > LARGE_RING_VERTICES:
        warnings.warn(
            f"Checking {n_edges} edges for self-intersection is quadratic "
            f"and may be slow",
            RuntimeWarning,
            stacklevel=2,
        )

    for i in range(n_edges):
        a1, a2 = points[i], points[i + 1]
        for j in range(i + 1, n_edges):
            if are_adjacent(i, j, n_edges):
                continue
            b1, b2 = points[j], points[j + 1]
            if segments_intersect(a1, a2, b1, b2, tolerance):
                yield SelfIntersection(i, j)


def find_self_intersection(ring: Ring, tolerance: float = TOLERANCE) -> Optional[SelfIntersection]:
    """Return the first intersecting edge pair, or None if the ring is simple."""
    return next(iter_self_intersections(ring, tolerance), None)
