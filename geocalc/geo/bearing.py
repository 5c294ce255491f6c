"""Bearings and travel along a great circle."""

import math

from geocalc.models import Point

from .constants import EARTH_RADIUS_M


def initial_bearing(p1: Point, p2: Point) -> float:
    """
    Calculate the initial bearing from one point towards another.

    The result comes straight from atan2 and is in (-pi, pi]; it is not
    normalized to [0, 2*pi).

    Args:
        p1: Start point
        p2: End point

    Returns:
        Bearing in radians, clockwise from true north
    """
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    dlon = math.radians(p2.lon - p1.lon)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    return math.atan2(y, x)


def destination(start: Point, bearing: float, distance: float) -> Point:
    """
    Find the point reached by travelling a distance on a bearing.

    Args:
        start: Start point
        bearing: Initial bearing in radians
        distance: Distance to travel in meters

    Returns:
        The destination point
    """
    lat1 = math.radians(start.lat)
    lon1 = math.radians(start.lon)
    delta = distance / EARTH_RADIUS_M

    sin_lat2 = math.sin(lat1) * math.cos(delta) + math.cos(lat1) * math.sin(delta) * math.cos(bearing)
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    return Point(lat=math.degrees(lat2), lon=math.degrees(lon2))


def max_latitude(point: Point, bearing: float) -> float:
    """
    Maximum latitude reached on a great circle (Clairaut's formula).

    Negate the result for the minimum latitude. Longitude plays no part.

    Args:
        point: Any point on the great circle
        bearing: Bearing at that point, in radians

    Returns:
        Latitude in degrees
    """
    lat = math.radians(point.lat)
    return math.degrees(math.acos(abs(math.sin(bearing) * math.cos(lat))))
