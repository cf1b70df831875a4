# src/astrolabe/spatial/points.py

from __future__ import annotations

from shapely.geometry import Point

from astrolabe.codec.typedefs import Communities, encode_location


def to_point(communities: Communities) -> Point:
    """
    Decode communities into a shapely Point in (lon, lat, alt) order.
    """
    loc = communities.decode()
    return Point(loc.longitude, loc.latitude, loc.altitude)


def from_point(point: Point) -> Communities:
    """
    Encode a shapely Point (x=lon, y=lat, optional z=alt in meters).

    2D points are encoded at sea level.
    """
    if not isinstance(point, Point):
        raise TypeError(f"from_point() requires a shapely Point, got: {type(point).__name__}")
    if point.is_empty:
        raise ValueError("Cannot encode an empty Point")

    alt = point.z if point.has_z else 0.0
    return encode_location(point.y, point.x, alt)
