"""Physical constants for spherical geodesy."""

# Mean Earth radius used by every spherical formula
EARTH_RADIUS_M = 6_371_000

# WGS-84 semi-axes, only used to scale bounding boxes
WGS84_SEMI_MAJOR_AXIS_M = 6_378_137.0
WGS84_SEMI_MINOR_AXIS_M = 6_356_752.3

# Angular tolerance (radians) below which geometry is treated as degenerate
EPSILON = 1e-12
