"""Errors raised by the geodesic formulas."""


class GeodesyError(Exception):
    """Base class for geometry that has no solution."""

    def __init__(self, message: str, reason: str | None = None):
        self.message = message
        self.reason = reason
        super().__init__(message)


class NoIntersectionFound(GeodesyError):
    """Two bearing paths do not meet in a single well-defined point."""

    def __init__(self, reason: str | None = None):
        super().__init__("No intersection point found", reason)


class NoCrossingFound(GeodesyError):
    """A great circle never reaches the requested latitude."""

    def __init__(self, reason: str | None = None):
        super().__init__("Not found", reason)
