"""Bounding box computation around a point."""

import math

from geocalc.models import BoundingBox, Point

from .constants import WGS84_SEMI_MAJOR_AXIS_M, WGS84_SEMI_MINOR_AXIS_M


def earth_radius_at(lat: float) -> float:
    """
    Geocentric Earth radius at a latitude on the WGS-84 ellipsoid.

    Args:
        lat: Latitude in radians

    Returns:
        Distance from the Earth's centre to the surface, in meters
    """
    a = WGS84_SEMI_MAJOR_AXIS_M
    b = WGS84_SEMI_MINOR_AXIS_M

    an = a * a * math.cos(lat)
    bn = b * b * math.sin(lat)
    ad = a * math.cos(lat)
    bd = b * math.sin(lat)

    return math.sqrt((an * an + bn * bn) / (ad * ad + bd * bd))


def compute_bounding_box(point: Point, radius_m: float) -> BoundingBox:
    """
    Compute an axis-aligned bounding box around a point.

    The half-height is the radius converted to an angle using the local
    Earth radius; the half-width is widened by 1/cos(lat) to account for
    meridians converging towards the poles. Nothing is clamped, so a box
    that would reach past a pole or the antimeridian comes back with
    out-of-range coordinates.

    Args:
        point: Center of the box
        radius_m: Half the side of the box, in meters

    Returns:
        Bounding box with south-west and north-east corners in degrees
    """
    lat = math.radians(point.lat)
    lon = math.radians(point.lon)

    radius = earth_radius_at(lat)
    # Radius of the parallel through the point
    parallel_radius = radius * math.cos(lat)

    lat_delta = radius_m / radius
    lon_delta = radius_m / parallel_radius

    return BoundingBox(
        south_west=Point(lat=math.degrees(lat - lat_delta), lon=math.degrees(lon - lon_delta)),
        north_east=Point(lat=math.degrees(lat + lat_delta), lon=math.degrees(lon + lon_delta)),
    )
