"""Angle conversions."""

import math


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180 / math.pi


def normalize_longitude(degrees: float) -> float:
    """Wrap a longitude in degrees into [-180, 180)."""
    return (degrees + 540) % 360 - 180
