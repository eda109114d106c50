"""
GeoJSON encoding for validated rings.

GeoJSON positions are ``[longitude, latitude]``, the reverse of the
(latitude, longitude) order used by Point.
"""

from typing import Any, Dict, Mapping, Tuple

from shapely.geometry import shape

from ..core.geometry import Point, Ring


def ring_to_geojson(ring: Ring) -> Dict[str, Any]:
    """
    Encode a ring as a GeoJSON Polygon with a single exterior ring.

    Parameters
    ----------
    ring : Ring
        Closed, validated ring.

    Returns
    -------
    dict
        ``{"type": "Polygon", "coordinates": [[[lon, lat], ...]]}``
    """
    return {
        'type': 'Polygon',
        'coordinates': [[[p.longitude, p.latitude] for p in ring.points]],
    }


def ring_from_geojson(geometry: Mapping[str, Any]) -> Tuple[Point, ...]:
    """
    Decode the exterior ring of a GeoJSON Polygon into Points.

    The result is plain input for ``validate_ring``; it is not trusted
    as a Ring until validated.

    Raises
    ------
    ValueError
        If the geometry is not a Polygon or carries holes.
    """
    if geometry.get('type') != 'Polygon':
        raise ValueError(f"Expected a GeoJSON Polygon, got {geometry.get('type')!r}")

    rings = geometry.get('coordinates') or []
    if len(rings) != 1:
        raise ValueError(f"Expected exactly one linear ring, got {len(rings)}")

    points = []
    for position in rings[0]:
        if len(position) < 2:
            raise ValueError(f"GeoJSON position needs [longitude, latitude], got {position!r}")
        lon, lat = position[0], position[1]
        points.append(Point(float(lat), float(lon)))
    return tuple(points)


def is_valid_for_shapely(geometry: Mapping[str, Any]) -> bool:
    """Independent OGC validity check of a GeoJSON Polygon through shapely."""
    return bool(shape(geometry).is_valid)
