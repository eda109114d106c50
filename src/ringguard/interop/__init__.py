"""
GeoJSON interchange.
"""

from .geojson import ring_to_geojson, ring_from_geojson, is_valid_for_shapely

__all__ = ['ring_to_geojson', 'ring_from_geojson', 'is_valid_for_shapely']
