"""Normalization of the point shapes accepted by the public API."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any, Union

from geocalc.models import Point

# Lookup order matters: the first key present wins
LATITUDE_KEYS = ("lat", "latitude")
LONGITUDE_KEYS = ("lon", "lng", "longitude")

PointLike = Union[Point, Sequence[float], Mapping[str, float]]


class InvalidPointError(ValueError):
    """A value could not be read as a (latitude, longitude) pair."""


def _coordinate(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidPointError(f"{name} must be a number, got {value!r}")
    return float(value)


def _lookup(mapping: Mapping, keys: tuple[str, ...], name: str) -> float:
    for key in keys:
        if key in mapping:
            return _coordinate(mapping[key], name)
    raise InvalidPointError(f"point has no {name} (expected one of {', '.join(keys)})")


def to_point(value: PointLike) -> Point:
    """Read a point from any supported representation.

    Accepted shapes:
    - a Point, returned unchanged
    - a list or tuple of two numbers, read as [lat, lon]
    - a mapping with lat/latitude and lon/lng/longitude keys

    Raises InvalidPointError for anything else. No range checks or
    clamping are applied.
    """
    if isinstance(value, Point):
        return value

    if isinstance(value, Mapping):
        return Point(
            lat=_lookup(value, LATITUDE_KEYS, "latitude"),
            lon=_lookup(value, LONGITUDE_KEYS, "longitude"),
        )

    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise InvalidPointError(f"point must have exactly 2 coordinates, got {len(value)}")
        return Point(
            lat=_coordinate(value[0], "latitude"),
            lon=_coordinate(value[1], "longitude"),
        )

    raise InvalidPointError(f"unsupported point representation: {type(value).__name__}")
