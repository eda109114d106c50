"""
Tests for GeoJSON encoding and decoding of rings.
"""

import pytest

from ringguard import Point, validate_ring
from ringguard.interop.geojson import is_valid_for_shapely, ring_from_geojson, ring_to_geojson


SQUARE = [(10, 20), (10, 21), (11, 21), (11, 20)]


class TestRingToGeoJSON:
    """Tests for ring_to_geojson()."""

    def test_polygon_structure(self):
        geometry = ring_to_geojson(validate_ring(SQUARE).ring)
        assert geometry['type'] == 'Polygon'
        assert len(geometry['coordinates']) == 1
        assert len(geometry['coordinates'][0]) == 5

    def test_positions_are_lon_lat(self):
        geometry = ring_to_geojson(validate_ring(SQUARE).ring)
        assert geometry['coordinates'][0][1] == [21.0, 10.0]

    def test_ring_is_closed(self):
        positions = ring_to_geojson(validate_ring(SQUARE).ring)['coordinates'][0]
        assert positions[0] == positions[-1]

    def test_accepted_by_shapely(self):
        geometry = ring_to_geojson(validate_ring(SQUARE).ring)
        assert is_valid_for_shapely(geometry)


class TestRingFromGeoJSON:
    """Tests for ring_from_geojson()."""

    def test_decodes_lat_lon(self):
        geometry = {
            'type': 'Polygon',
            'coordinates': [[[20, 10], [21, 10], [21, 11], [20, 10]]],
        }
        points = ring_from_geojson(geometry)
        assert points[1] == Point(10.0, 21.0)

    def test_decoded_points_validate(self):
        geometry = ring_to_geojson(validate_ring(SQUARE).ring)
        outcome = validate_ring(ring_from_geojson(geometry))
        assert outcome.is_valid
        assert outcome.ring == validate_ring(SQUARE).ring

    def test_rejects_other_geometry_types(self):
        with pytest.raises(ValueError):
            ring_from_geojson({'type': 'Point', 'coordinates': [0, 0]})

    def test_rejects_holes(self):
        outer = [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]
        hole = [[1, 1], [2, 1], [2, 2], [1, 1]]
        with pytest.raises(ValueError):
            ring_from_geojson({'type': 'Polygon', 'coordinates': [outer, hole]})

    def test_rejects_short_positions(self):
        with pytest.raises(ValueError):
            ring_from_geojson({'type': 'Polygon', 'coordinates': [[[0], [1, 1], [2, 0]]]})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
