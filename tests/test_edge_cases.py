"""
Edge case tests for ring validation.

Tests cover:
1. Tolerance handling near the 1e-12 default and with a caller override
2. Rings crossing the antimeridian and poles in planar terms
3. Agreement with shapely's validity check on random rings
4. Large rings near the size limit of hand-drawn input
"""

import numpy as np
import pytest
from shapely.geometry import Polygon

from ringguard import Point, SelfIntersection, ZeroLengthEdge, validate_ring


class TestTolerance:
    """Tests for the shared tolerance."""

    def test_near_duplicate_within_default(self):
        outcome = validate_ring([(0, 0), (0, 1), (0 + 1e-13, 1), (1, 1)])
        assert outcome.defect == ZeroLengthEdge(1)

    def test_near_duplicate_outside_default(self):
        """Points 1e-9 degrees apart are distinct at the default tolerance."""
        outcome = validate_ring([(0, 0), (0, 1), (1e-9, 1 + 1e-9), (1, 1)])
        assert outcome.is_valid
        assert outcome.ring.n_edges == 4

    def test_caller_tolerance_flags_drift(self):
        """A looser tolerance catches sub-micro-degree drift."""
        points = [(0, 0), (0, 1), (1e-9, 1 + 1e-9), (1, 1)]
        outcome = validate_ring(points, tolerance=1e-7)
        assert outcome.defect == ZeroLengthEdge(1)

    def test_caller_tolerance_closes_ring(self):
        points = [(0, 0), (0, 1), (1, 1), (1e-8, -1e-8)]
        assert validate_ring(points).ring.n_edges == 4
        assert validate_ring(points, tolerance=1e-6).ring.n_edges == 3

    def test_zero_tolerance(self):
        outcome = validate_ring([(0, 0), (0, 1), (1, 1)], tolerance=0.0)
        assert outcome.is_valid


class TestPlanarCoordinates:
    """Rings are treated as planar in degrees."""

    def test_antimeridian_spanning_ring_is_planar(self):
        """A ring drawn across the antimeridian spans the whole map in lon/lat."""
        outcome = validate_ring([(0, 179), (0, -179), (1, -179), (1, 179)])
        assert outcome.is_valid
        assert outcome.ring.to_shapely().bounds == (-179.0, 0.0, 179.0, 1.0)

    def test_polar_cap(self):
        outcome = validate_ring([(89, -180), (89, 0), (90, 0), (90, -180)])
        assert outcome.is_valid


class TestAgreementWithShapely:
    """Accepted rings are valid OGC polygons."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_rings(self, seed):
        rng = np.random.default_rng(seed)
        points = rng.uniform(-10, 10, size=(6, 2))
        outcome = validate_ring(points)
        shapely_valid = Polygon(points[:, ::-1]).is_valid

        if outcome.is_valid:
            assert shapely_valid
            assert outcome.ring.to_shapely().is_valid
        elif isinstance(outcome.defect, SelfIntersection):
            assert not shapely_valid

    def test_star_shaped_ring(self):
        angles = np.linspace(0, 2 * np.pi, 40, endpoint=False)
        radii = np.where(np.arange(40) % 2 == 0, 1.0, 0.4)
        points = np.column_stack([radii * np.sin(angles), radii * np.cos(angles)])
        outcome = validate_ring(points)
        assert outcome.is_valid
        assert outcome.ring.to_shapely().is_valid


class TestLargeRings:
    """Hand-drawn rings of a few hundred vertices."""

    def test_many_vertices(self):
        angles = np.linspace(0, 2 * np.pi, 400, endpoint=False)
        points = np.column_stack([45 + 0.01 * np.sin(angles), 7 + 0.01 * np.cos(angles)])
        outcome = validate_ring(points)
        assert outcome.is_valid
        assert len(outcome.ring) == 401

    def test_late_crossing_found(self):
        """A crossing near the end of a long ring is still found."""
        angles = np.linspace(0, np.pi, 300)
        arc = [Point(float(np.sin(a)), float(np.cos(a))) for a in angles]
        # Closing stroke cuts back across the arc
        points = arc + [Point(1.5, 0.0), Point(0.5, 0.0)]
        outcome = validate_ring(points)
        assert isinstance(outcome.defect, SelfIntersection)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
