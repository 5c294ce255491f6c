"""Intersections of great circles with each other and with parallels."""

import math

from geocalc.models import Point

from .angles import normalize_longitude
from .constants import EPSILON
from .distance import angular_distance
from .errors import NoCrossingFound, NoIntersectionFound


def _in_unit_range(value: float) -> bool:
    return -1.0 <= value <= 1.0


def intersection(p1: Point, bearing_1: float, p2: Point, bearing_2: float) -> Point:
    """
    Find where two paths, each given by a start point and a bearing, meet.

    Solves the spherical triangle formed by the two start points and the
    intersection. Every step that would leave the domain of a square root,
    inverse trig function or division is checked up front.

    Args:
        p1: Start of the first path
        bearing_1: Bearing of the first path in radians
        p2: Start of the second path
        bearing_2: Bearing of the second path in radians

    Returns:
        The intersection point (the one ahead of both start points)

    Raises:
        NoIntersectionFound: If the triangle is degenerate
    """
    if not (math.isfinite(bearing_1) and math.isfinite(bearing_2)):
        raise NoIntersectionFound("bearing is not finite")

    lat1 = math.radians(p1.lat)
    lon1 = math.radians(p1.lon)
    lat2 = math.radians(p2.lat)
    lon2 = math.radians(p2.lon)

    delta_12 = angular_distance(p1, p2)
    if abs(delta_12) < EPSILON:
        raise NoIntersectionFound("start points coincide")

    denominator_a = math.sin(delta_12) * math.cos(lat1)
    denominator_b = math.sin(delta_12) * math.cos(lat2)
    if abs(denominator_a) < EPSILON or abs(denominator_b) < EPSILON:
        raise NoIntersectionFound("start point on a pole or start points antipodal")

    # Bearings between the two start points
    cos_theta_a = (math.sin(lat2) - math.sin(lat1) * math.cos(delta_12)) / denominator_a
    cos_theta_b = (math.sin(lat1) - math.sin(lat2) * math.cos(delta_12)) / denominator_b
    if not (_in_unit_range(cos_theta_a) and _in_unit_range(cos_theta_b)):
        raise NoIntersectionFound("bearing between start points is undefined")

    theta_a = math.acos(cos_theta_a)
    theta_b = math.acos(cos_theta_b)

    if math.sin(lon2 - lon1) > 0:
        theta_12 = theta_a
        theta_21 = 2 * math.pi - theta_b
    else:
        theta_12 = 2 * math.pi - theta_a
        theta_21 = theta_b

    # Angles at p1 and p2 inside the triangle
    alpha_1 = bearing_1 - theta_12
    alpha_2 = theta_21 - bearing_2

    sin_alpha_1 = math.sin(alpha_1)
    sin_alpha_2 = math.sin(alpha_2)
    if abs(sin_alpha_1) < EPSILON and abs(sin_alpha_2) < EPSILON:
        raise NoIntersectionFound("paths lie on the same great circle")
    if sin_alpha_1 * sin_alpha_2 < 0:
        raise NoIntersectionFound("paths diverge")

    cos_alpha_3 = (
        -math.cos(alpha_1) * math.cos(alpha_2)
        + sin_alpha_1 * sin_alpha_2 * math.cos(delta_12)
    )
    if not _in_unit_range(cos_alpha_3):
        raise NoIntersectionFound("angle at intersection is undefined")
    alpha_3 = math.acos(cos_alpha_3)

    delta_13 = math.atan2(
        math.sin(delta_12) * sin_alpha_1 * sin_alpha_2,
        math.cos(alpha_2) + math.cos(alpha_1) * math.cos(alpha_3),
    )

    sin_lat3 = math.sin(lat1) * math.cos(delta_13) + math.cos(lat1) * math.sin(delta_13) * math.cos(bearing_1)
    if not _in_unit_range(sin_lat3):
        raise NoIntersectionFound("intersection latitude is undefined")
    lat3 = math.asin(sin_lat3)

    dlon_13 = math.atan2(
        math.sin(bearing_1) * math.sin(delta_13) * math.cos(lat1),
        math.cos(delta_13) - math.sin(lat1) * math.sin(lat3),
    )
    lon3 = lon1 + dlon_13

    return Point(lat=math.degrees(lat3), lon=math.degrees(lon3))


def crossing_parallels(p1: Point, p2: Point, latitude: float) -> tuple[float, float]:
    """
    Find the meridians where the great circle through two points crosses a latitude.

    Args:
        p1: First point on the great circle
        p2: Second point on the great circle
        latitude: The parallel to cross, in degrees

    Returns:
        The two crossing longitudes in degrees, each in [-180, 180)

    Raises:
        NoCrossingFound: If the great circle never reaches the latitude
    """
    lat = math.radians(latitude)
    lat1 = math.radians(p1.lat)
    lon1 = math.radians(p1.lon)
    lat2 = math.radians(p2.lat)
    lon2 = math.radians(p2.lon)

    dlon = lon2 - lon1

    x = math.sin(lat1) * math.cos(lat2) * math.cos(lat) * math.sin(dlon)
    y = (
        math.sin(lat1) * math.cos(lat2) * math.cos(lat) * math.cos(dlon)
        - math.cos(lat1) * math.sin(lat2) * math.cos(lat)
    )
    z = math.cos(lat1) * math.cos(lat2) * math.sin(lat) * math.sin(dlon)

    r_squared = x * x + y * y
    if r_squared == 0:
        raise NoCrossingFound("great circle has no distinct crossings of latitude")
    if z * z > r_squared:
        raise NoCrossingFound("great circle does not reach latitude")

    # Longitude of the great circle's highest point
    lon_max = math.atan2(-y, x)
    dlon_i = math.acos(max(-1.0, min(1.0, z / math.sqrt(r_squared))))

    lon_i1 = lon1 + lon_max - dlon_i
    lon_i2 = lon1 + lon_max + dlon_i

    return (
        normalize_longitude(math.degrees(lon_i1)),
        normalize_longitude(math.degrees(lon_i2)),
    )
