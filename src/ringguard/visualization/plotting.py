"""
Visualization utilities for submitted rings.

Draws a ring in the lon/lat plane and highlights the defect that made it
invalid: the offending point, the zero-length edge, or every intersecting
edge pair.
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from ..core.geometry import TOLERANCE, as_points
from ..validation.closure import close_ring, is_closed
from ..validation.defects import (
    CoordinateOutOfRange,
    SelfIntersection,
    ValidationOutcome,
    ZeroLengthEdge,
)
from ..validation.intersection import iter_self_intersections
from ..validation.orchestrator import validate_ring


def plot_ring(
    points,
    outcome: Optional[ValidationOutcome] = None,
    ax: Optional[plt.Axes] = None,
    title: str = "Ring",
    show_all_intersections: bool = True,
    tolerance: float = TOLERANCE
) -> plt.Axes:
    """
    Visualize a submitted ring and its validation outcome.

    Parameters
    ----------
    points : np.ndarray or iterable
        Submitted (latitude, longitude) coordinates.
    outcome : Valid or Invalid, optional
        Result of ``validate_ring``. Computed if None.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    show_all_intersections : bool
        Highlight every intersecting edge pair instead of only the first.
    tolerance : float
        Tolerance passed to the validation checks.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    points = as_points(points)
    if outcome is None:
        outcome = validate_ring(points, tolerance)

    if outcome.is_valid:
        ring_points = outcome.ring.points
    elif len(points) >= 3 and not is_closed(points, tolerance):
        ring_points = points + (points[0],)
    else:
        ring_points = points

    # x = longitude, y = latitude
    xy = np.array([[p.longitude, p.latitude] for p in ring_points], dtype=np.float64).reshape(-1, 2)

    if len(xy):
        ax.plot(xy[:, 0], xy[:, 1], 'k-', linewidth=2, zorder=2)
        ax.scatter(xy[:-1, 0], xy[:-1, 1], c='black', s=40, marker='s', zorder=3)

    if outcome.is_valid:
        ax.fill(xy[:, 0], xy[:, 1], alpha=0.15, color='green', zorder=1)
        status = f"Valid ({outcome.ring.n_edges} edges)"
    else:
        defect = outcome.defect
        status = defect.message

        if isinstance(defect, CoordinateOutOfRange):
            bad = xy[defect.index]
            ax.scatter([bad[0]], [bad[1]], c='red', s=150, marker='x', zorder=5,
                       label='Out of range')

        elif isinstance(defect, ZeroLengthEdge):
            bad = xy[defect.index]
            ax.scatter([bad[0]], [bad[1]], edgecolors='red', facecolors='none', s=150,
                       marker='o', zorder=5, label='Zero-length edge')

        elif isinstance(defect, SelfIntersection):
            pairs = [defect]
            if show_all_intersections:
                pairs = list(iter_self_intersections(close_ring(points, tolerance), tolerance))
            for pair in pairs:
                for index in (pair.edge_a, pair.edge_b):
                    seg = xy[[index, index + 1]]
                    ax.plot(seg[:, 0], seg[:, 1], 'r-', linewidth=3, zorder=4)
            ax.plot([], [], 'r-', linewidth=3, label=f'Intersecting edges ({len(pairs)} pairs)')

    ax.text(
        0.02, 0.98, status,
        transform=ax.transAxes,
        verticalalignment='top',
        fontfamily='monospace',
        fontsize=9,
        bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
    )

    ax.set_xlabel('Longitude')
    ax.set_ylabel('Latitude')
    ax.set_title(title)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)

    return ax
