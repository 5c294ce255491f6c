"""
Pydantic models for geocalc.

These models define the values passed in and out of the public API.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# -----------------------------------------------------------------------------
# Core Geometry Models
# -----------------------------------------------------------------------------


class Point(BaseModel):
    """A point on the sphere in degrees.

    Ranges are not validated: out-of-range coordinates are
    accepted and flow through the formulas unchanged.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude in degrees")
    lon: float = Field(..., description="Longitude in degrees")

    def as_list(self) -> list[float]:
        return [self.lat, self.lon]


class BoundingBox(BaseModel):
    """Axis-aligned box given by its south-west and north-east corners."""

    model_config = ConfigDict(frozen=True)

    south_west: Point
    north_east: Point

    @property
    def min_lat(self) -> float:
        return self.south_west.lat

    @property
    def max_lat(self) -> float:
        return self.north_east.lat

    @property
    def min_lon(self) -> float:
        return self.south_west.lon

    @property
    def max_lon(self) -> float:
        return self.north_east.lon

    def as_list(self) -> list[list[float]]:
        return [self.south_west.as_list(), self.north_east.as_list()]


# -----------------------------------------------------------------------------
# Result Models
# -----------------------------------------------------------------------------


class PointResult(BaseModel):
    """Successful outcome carrying a single point."""

    status: Literal["ok"] = "ok"
    point: Point

    @property
    def ok(self) -> bool:
        return True


class CrossingResult(BaseModel):
    """Successful outcome carrying the two longitudes of a parallel crossing."""

    status: Literal["ok"] = "ok"
    lon1: float = Field(description="First crossing longitude in degrees")
    lon2: float = Field(description="Second crossing longitude in degrees")

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """Outcome of an operation that has no solution for its inputs."""

    status: Literal["error"] = "error"
    error: str

    @property
    def ok(self) -> bool:
        return False
