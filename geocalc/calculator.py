"""
Public geodesy API.

Every function accepts points in any shape understood by
`geocalc.validation.to_point`. Operations without a solution return a
`Failure` instead of raising.
"""

import logging
from collections.abc import Iterable
from numbers import Real

from geocalc import geo
from geocalc.models import BoundingBox, CrossingResult, Failure, Point, PointResult
from geocalc.validation import InvalidPointError, PointLike, to_point

logger = logging.getLogger(__name__)


def _bearing_towards(start: Point, bearing_or_point: float | PointLike) -> float:
    """Use a number as a bearing in radians, anything else as a point to head for."""
    if isinstance(bearing_or_point, Real) and not isinstance(bearing_or_point, bool):
        return float(bearing_or_point)
    return geo.initial_bearing(start, to_point(bearing_or_point))


def distance_between(point_1: PointLike, point_2: PointLike) -> float:
    """Great-circle distance between two points, in meters."""
    return geo.haversine_distance(to_point(point_1), to_point(point_2))


def within(radius: float, center: PointLike, point: PointLike) -> bool:
    """
    Check whether a point lies within radius meters of a center.

    A negative radius is always False. The check happens here, before the
    points are converted, so malformed points are not reported for it.
    """
    if radius < 0:
        return False
    return geo.point_within(radius, to_point(center), to_point(point))


def bearing(point_1: PointLike, point_2: PointLike) -> float:
    """Initial bearing from point_1 towards point_2, in radians (-pi, pi]."""
    return geo.initial_bearing(to_point(point_1), to_point(point_2))


def destination_point(
    start: PointLike, bearing_or_point: float | PointLike, distance: float
) -> PointResult:
    """
    Find the point distance meters from start.

    Args:
        start: Start point
        bearing_or_point: Bearing in radians, or a point to head towards
        distance: Distance in meters

    Returns:
        PointResult with the destination
    """
    origin = to_point(start)
    heading = _bearing_towards(origin, bearing_or_point)
    return PointResult(point=geo.destination(origin, heading, distance))


def intersection_point(
    point_1: PointLike,
    bearing_1: float | PointLike,
    point_2: PointLike,
    bearing_2: float | PointLike,
) -> PointResult | Failure:
    """
    Find where two paths meet.

    Each path is a start point plus either a bearing in radians or a point
    the path heads towards.

    Returns:
        PointResult with the intersection, or
        Failure("No intersection point found") for degenerate geometry
    """
    start_1 = to_point(point_1)
    start_2 = to_point(point_2)
    heading_1 = _bearing_towards(start_1, bearing_1)
    heading_2 = _bearing_towards(start_2, bearing_2)

    try:
        point = geo.intersection(start_1, heading_1, start_2, heading_2)
    except geo.NoIntersectionFound as e:
        logger.debug(f"No intersection from {start_1} and {start_2}: {e.reason}")
        return Failure(error=e.message)

    return PointResult(point=point)


def bounding_box(point: PointLike, radius_in_m: float) -> BoundingBox:
    """Bounding box reaching radius_in_m meters from point in each direction."""
    return geo.compute_bounding_box(to_point(point), radius_in_m)


def geographic_center(points: Iterable[PointLike]) -> Point:
    """
    Geographic midpoint of a set of points.

    Entries that are not readable as points are skipped. If the points
    cancel out (e.g. two antipodal points) the result has NaN coordinates.
    """
    valid = []
    for value in points:
        try:
            valid.append(to_point(value))
        except InvalidPointError as e:
            logger.debug(f"Skipping entry without coordinates: {e}")

    return geo.geographic_center(valid)


def radians_to_degrees(radians: float) -> float:
    return geo.radians_to_degrees(radians)


def degrees_to_radians(degrees: float) -> float:
    return geo.degrees_to_radians(degrees)


def max_latitude(point: PointLike, bearing: float) -> float:
    """
    Maximum latitude in degrees reached on a great circle.

    Negate the result for the minimum latitude.
    """
    return geo.max_latitude(to_point(point), bearing)


def cross_track_distance_to(
    point: PointLike, path_start_point: PointLike, path_end_point: PointLike
) -> float:
    """Signed distance in meters from point to the great circle through the path."""
    return geo.cross_track_distance(
        to_point(point), to_point(path_start_point), to_point(path_end_point)
    )


def crossing_parallels(
    point_1: PointLike, point_2: PointLike, latitude: float
) -> CrossingResult | Failure:
    """
    Longitudes where the great circle through two points crosses a latitude.

    Returns:
        CrossingResult with both longitudes, or Failure("Not found") when
        the great circle never reaches the latitude
    """
    try:
        lon1, lon2 = geo.crossing_parallels(to_point(point_1), to_point(point_2), latitude)
    except geo.NoCrossingFound as e:
        logger.debug(f"No crossing of latitude {latitude}: {e.reason}")
        return Failure(error=e.message)

    return CrossingResult(lon1=lon1, lon2=lon2)
