"""
Zero-length edge detection on a closed ring.
"""

from typing import Optional

from ..core.geometry import TOLERANCE, Ring, approximately_equal
from .defects import ZeroLengthEdge


def find_zero_length_edge(ring: Ring, tolerance: float = TOLERANCE) -> Optional[ZeroLengthEdge]:
    """
    Find the first edge whose endpoints coincide.

    Runs on the closed ring, so the closing edge is covered and a
    triangle with its closing duplicate is not flagged.

    Parameters
    ----------
    ring : Ring
        Closed ring to check.
    tolerance : float
        Per-component tolerance for point equality.

    Returns
    -------
    ZeroLengthEdge or None
        Defect naming the start index of the first degenerate edge.
    """
    points = ring.points
    for i in range(len(points) - 1):
        if approximately_equal(points[i], points[i + 1], tolerance):
            return ZeroLengthEdge(i)
    return None
