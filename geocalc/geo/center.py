"""Geographic midpoint of a set of points."""

import logging
import math
from collections.abc import Iterable

from geocalc.models import Point

from .constants import EPSILON

logger = logging.getLogger(__name__)


def geographic_center(points: Iterable[Point]) -> Point:
    """
    Compute the geographic center of a set of points.

    Each point becomes a unit vector, the vectors are averaged and the
    average is projected back onto the sphere.

    When the average has (numerically) zero length there is no meaningful
    center, e.g. for two antipodal points or an empty input. In that case
    a point with NaN coordinates is returned.

    Args:
        points: Points to average

    Returns:
        The center point in degrees
    """
    x = y = z = 0.0
    count = 0

    for point in points:
        lat = math.radians(point.lat)
        lon = math.radians(point.lon)
        x += math.cos(lat) * math.cos(lon)
        y += math.cos(lat) * math.sin(lon)
        z += math.sin(lat)
        count += 1

    if count == 0:
        logger.warning("Geographic center requested for no points")
        return Point(lat=math.nan, lon=math.nan)

    x /= count
    y /= count
    z /= count

    if math.sqrt(x * x + y * y + z * z) < EPSILON:
        logger.warning(f"Geographic center of {count} points is undefined (vectors cancel out)")
        return Point(lat=math.nan, lon=math.nan)

    lon = math.atan2(y, x)
    hyp = math.sqrt(x * x + y * y)
    lat = math.atan2(z, hyp)

    return Point(lat=math.degrees(lat), lon=math.degrees(lon))
