"""Distance calculations using the Haversine formula."""

import math

from geocalc.models import Point

from .bearing import initial_bearing
from .constants import EARTH_RADIUS_M


def angular_distance(p1: Point, p2: Point) -> float:
    """
    Calculate the central angle between two points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Angle subtended at the Earth's centre, in radians
    """
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    dlat = math.radians(p2.lat - p1.lat)
    dlon = math.radians(p2.lon - p1.lon)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push a a hair past 1 for antipodal points
    a = min(a, 1.0)

    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_distance(p1: Point, p2: Point) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Uses the Haversine formula, which stays accurate at all distances
    including antipodal points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance in meters
    """
    return EARTH_RADIUS_M * angular_distance(p1, p2)


def point_within(radius: float, center: Point, point: Point) -> bool:
    """
    Test if a point lies within a radius of a center point.

    A negative radius never contains anything and no distance is computed.
    The boundary is inclusive.

    Args:
        radius: Radius in meters
        center: Center of the circle
        point: The point to test

    Returns:
        True if the point is at most radius meters from the center
    """
    if radius < 0:
        return False
    return haversine_distance(center, point) <= radius


def cross_track_distance(point: Point, path_start: Point, path_end: Point) -> float:
    """
    Calculate the distance from a point to the great circle through a path.

    Args:
        point: The point off the path
        path_start: First point defining the great circle
        path_end: Second point defining the great circle

    Returns:
        Signed distance in meters; negative when the point lies left of
        the direction of travel from path_start to path_end
    """
    delta_13 = angular_distance(path_start, point)
    theta_13 = initial_bearing(path_start, point)
    theta_12 = initial_bearing(path_start, path_end)

    return math.asin(math.sin(delta_13) * math.sin(theta_13 - theta_12)) * EARTH_RADIUS_M
