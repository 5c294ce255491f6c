"""Spherical geometry formulas."""

from .angles import degrees_to_radians, normalize_longitude, radians_to_degrees
from .bbox import compute_bounding_box, earth_radius_at
from .bearing import destination, initial_bearing, max_latitude
from .center import geographic_center
from .constants import EARTH_RADIUS_M
from .distance import angular_distance, cross_track_distance, haversine_distance, point_within
from .errors import GeodesyError, NoCrossingFound, NoIntersectionFound
from .intersect import crossing_parallels, intersection

__all__ = [
    "EARTH_RADIUS_M",
    "degrees_to_radians",
    "radians_to_degrees",
    "normalize_longitude",
    "angular_distance",
    "haversine_distance",
    "point_within",
    "cross_track_distance",
    "initial_bearing",
    "destination",
    "max_latitude",
    "compute_bounding_box",
    "earth_radius_at",
    "geographic_center",
    "intersection",
    "crossing_parallels",
    "GeodesyError",
    "NoIntersectionFound",
    "NoCrossingFound",
]
