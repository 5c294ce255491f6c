"""
geocalc - great-circle calculations on a spherical Earth.

Distance, bearing, destination, intersection, bounding box, geographic
center and more between latitude/longitude points.
"""

__version__ = "0.1.0"

from geocalc.calculator import (
    bearing,
    bounding_box,
    cross_track_distance_to,
    crossing_parallels,
    degrees_to_radians,
    destination_point,
    distance_between,
    geographic_center,
    intersection_point,
    max_latitude,
    radians_to_degrees,
    within,
)
from geocalc.models import BoundingBox, CrossingResult, Failure, Point, PointResult
from geocalc.validation import InvalidPointError, to_point

__all__ = [
    "__version__",
    "distance_between",
    "within",
    "bearing",
    "destination_point",
    "intersection_point",
    "bounding_box",
    "geographic_center",
    "radians_to_degrees",
    "degrees_to_radians",
    "max_latitude",
    "cross_track_distance_to",
    "crossing_parallels",
    "Point",
    "BoundingBox",
    "PointResult",
    "CrossingResult",
    "Failure",
    "InvalidPointError",
    "to_point",
]
