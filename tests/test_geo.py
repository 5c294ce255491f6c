"""Tests for the spherical geometry formulas."""

import math

import pytest

from geocalc.geo import (
    EARTH_RADIUS_M,
    NoCrossingFound,
    NoIntersectionFound,
    angular_distance,
    compute_bounding_box,
    cross_track_distance,
    crossing_parallels,
    destination,
    earth_radius_at,
    geographic_center,
    haversine_distance,
    initial_bearing,
    intersection,
    max_latitude,
    normalize_longitude,
    point_within,
)
from geocalc.models import Point


class TestHaversineDistance:
    """Tests for haversine distance calculation."""

    def test_same_point(self):
        """Distance from a point to itself should be zero."""
        p = Point(lat=-33.8568, lon=151.2153)
        assert haversine_distance(p, p) == 0

    def test_berlin_paris(self):
        berlin = Point(lat=52.5075419, lon=13.4251364)
        paris = Point(lat=48.8588589, lon=2.3475569)
        assert haversine_distance(berlin, paris) == pytest.approx(878327.4291149472, abs=1e-6)

    def test_antipodal_points(self):
        """Pole to pole is exactly half the circumference."""
        north_pole = Point(lat=90, lon=0)
        south_pole = Point(lat=-90, lon=0)
        assert haversine_distance(north_pole, south_pole) == pytest.approx(math.pi * EARTH_RADIUS_M)

    def test_antipodal_on_equator(self):
        """Antipodes on the equator should not trip over rounding."""
        assert angular_distance(Point(lat=0, lon=0), Point(lat=0, lon=180)) == pytest.approx(math.pi)

    def test_symmetric(self):
        a = Point(lat=50.0663889, lon=-5.7147222)
        b = Point(lat=58.6438889, lon=-3.07)
        assert haversine_distance(a, b) == haversine_distance(b, a)

    def test_lands_end_to_john_o_groats(self):
        a = Point(lat=50.0663889, lon=-5.7147222)
        b = Point(lat=58.6438889, lon=-3.07)
        assert haversine_distance(a, b) == pytest.approx(968_853.5, abs=0.05)


class TestPointWithin:
    """Tests for radius containment."""

    def test_point_inside(self):
        center = Point(lat=0, lon=0)
        assert point_within(1000, center, Point(lat=0.001, lon=0.001))

    def test_point_outside(self):
        center = Point(lat=0, lon=0)
        # ~157km away
        assert not point_within(100, center, Point(lat=1, lon=1))

    def test_boundary_is_inclusive(self):
        center = Point(lat=10, lon=20)
        point = Point(lat=10.5, lon=20.5)
        assert point_within(haversine_distance(center, point), center, point)

    def test_negative_radius(self):
        p = Point(lat=0, lon=0)
        assert not point_within(-1, p, p)


class TestBearing:
    """Tests for bearings and destinations."""

    def test_due_north(self):
        assert initial_bearing(Point(lat=0, lon=0), Point(lat=10, lon=0)) == 0.0

    def test_due_east(self):
        assert initial_bearing(Point(lat=0, lon=0), Point(lat=0, lon=10)) == pytest.approx(math.pi / 2)

    def test_westward_bearing_is_negative(self):
        """Bearings are not normalized to [0, 2*pi)."""
        assert initial_bearing(Point(lat=0, lon=0), Point(lat=0, lon=-10)) == pytest.approx(-math.pi / 2)

    def test_destination_along_equator(self):
        p = destination(Point(lat=0, lon=0), math.pi / 2, 1_000_000)
        assert p.lat == pytest.approx(0, abs=1e-12)
        assert p.lon == pytest.approx(8.993216059187306)

    def test_destination_zero_distance(self):
        start = Point(lat=12.5, lon=-45.25)
        p = destination(start, 1.234, 0)
        assert p.lat == pytest.approx(start.lat)
        assert p.lon == pytest.approx(start.lon)

    def test_destination_from_pole(self):
        """Starting on a pole must not leave the domain of asin."""
        p = destination(Point(lat=90, lon=0), math.pi, 1000)
        assert p.lat < 90

    def test_max_latitude_north(self):
        assert max_latitude(Point(lat=0, lon=0), 0) == 90.0

    def test_max_latitude_east(self):
        assert max_latitude(Point(lat=0, lon=0), math.pi / 2) == 0.0

    def test_max_latitude_ignores_longitude(self):
        assert max_latitude(Point(lat=30, lon=0), 1.0) == max_latitude(Point(lat=30, lon=120), 1.0)


class TestCrossTrack:
    """Tests for cross-track distance."""

    def test_point_on_path(self):
        start = Point(lat=0, lon=0)
        end = Point(lat=0, lon=10)
        assert cross_track_distance(Point(lat=0, lon=5), start, end) == pytest.approx(0, abs=1e-6)

    def test_sign_gives_side(self):
        """Left of an eastbound path is north and negative."""
        start = Point(lat=0, lon=0)
        end = Point(lat=0, lon=10)
        assert cross_track_distance(Point(lat=1, lon=5), start, end) < 0
        assert cross_track_distance(Point(lat=-1, lon=5), start, end) > 0

    def test_magnitude(self):
        start = Point(lat=0, lon=0)
        end = Point(lat=0, lon=10)
        expected = math.radians(1) * EARTH_RADIUS_M
        assert cross_track_distance(Point(lat=-1, lon=5), start, end) == pytest.approx(expected)


class TestBoundingBox:
    """Tests for bounding box computation."""

    def test_small_box(self):
        """A small radius should give a tight box around the point."""
        bbox = compute_bounding_box(Point(lat=0, lon=0), 1000)

        assert bbox.min_lat < 0 < bbox.max_lat
        assert bbox.min_lon < 0 < bbox.max_lon

        # 1km radius ~ 0.009 degrees
        assert (bbox.max_lat - bbox.min_lat) < 0.1
        assert (bbox.max_lon - bbox.min_lon) < 0.1

    def test_near_pole(self):
        """Box near a pole should have a wide longitude range."""
        bbox = compute_bounding_box(Point(lat=89, lon=0), 10000)

        lon_range = bbox.max_lon - bbox.min_lon
        assert lon_range > 1

    def test_symmetric_around_center(self):
        bbox = compute_bounding_box(Point(lat=45, lon=7), 5000)
        assert 45 - bbox.min_lat == pytest.approx(bbox.max_lat - 45)
        assert 7 - bbox.min_lon == pytest.approx(bbox.max_lon - 7)

    def test_earth_radius_at_equator_and_pole(self):
        assert earth_radius_at(0) == pytest.approx(6_378_137.0)
        assert earth_radius_at(math.pi / 2) == pytest.approx(6_356_752.3)


class TestGeographicCenter:
    """Tests for the vector-average midpoint."""

    def test_two_points(self):
        center = geographic_center([Point(lat=0, lon=0), Point(lat=0, lon=1)])
        assert center.lat == pytest.approx(0, abs=1e-12)
        assert center.lon == pytest.approx(0.5)

    def test_single_point(self):
        center = geographic_center([Point(lat=40, lon=-70)])
        assert center.lat == pytest.approx(40)
        assert center.lon == pytest.approx(-70)

    def test_antipodal_points_are_undefined(self):
        center = geographic_center([Point(lat=0, lon=0), Point(lat=0, lon=180)])
        assert math.isnan(center.lat)
        assert math.isnan(center.lon)

    def test_no_points_is_undefined(self):
        center = geographic_center([])
        assert math.isnan(center.lat)
        assert math.isnan(center.lon)


class TestIntersection:
    """Tests for the intersection of two bearing paths."""

    def test_known_intersection(self):
        p = intersection(
            Point(lat=51.8853, lon=0.2545),
            math.radians(108.56),
            Point(lat=49.0034, lon=2.5735),
            math.radians(32.47),
        )
        assert p.lat == pytest.approx(50.90673507027868, abs=1e-9)
        assert p.lon == pytest.approx(4.509919730256895, abs=1e-9)

    def test_crossing_meridian_and_equator(self):
        """Northbound from the equator meets eastbound along the equator at the start."""
        p = intersection(Point(lat=-10, lon=20), 0.0, Point(lat=0, lon=0), math.pi / 2)
        assert p.lat == pytest.approx(0, abs=1e-9)
        assert p.lon == pytest.approx(20, abs=1e-9)

    def test_coincident_start_points(self):
        p = Point(lat=53.8838884, lon=27.5949741)
        with pytest.raises(NoIntersectionFound):
            intersection(p, 0.0, p, 0.0)

    def test_perpendicular_from_same_point(self):
        p = Point(lat=0, lon=0)
        with pytest.raises(NoIntersectionFound):
            intersection(p, 0.0, p, math.pi / 2)

    def test_paths_from_same_meridian(self):
        """Eastbound paths from two points on one meridian have no usable triangle."""
        with pytest.raises(NoIntersectionFound):
            intersection(Point(lat=30, lon=0), math.pi / 2, Point(lat=60, lon=0), math.pi / 2)

    @pytest.mark.parametrize("bearing", [math.inf, -math.inf, math.nan])
    def test_non_finite_bearing(self, bearing):
        with pytest.raises(NoIntersectionFound, match="No intersection point found"):
            intersection(Point(lat=0, lon=0), bearing, Point(lat=10, lon=10), 1.0)

    def test_same_great_circle(self):
        """Two eastbound paths along the equator never meet in one point."""
        with pytest.raises(NoIntersectionFound):
            intersection(Point(lat=0, lon=0), math.pi / 2, Point(lat=0, lon=10), math.pi / 2)

    def test_start_on_pole(self):
        with pytest.raises(NoIntersectionFound):
            intersection(Point(lat=90, lon=0), 0.0, Point(lat=0, lon=0), 0.0)

    def test_error_message(self):
        p = Point(lat=1, lon=1)
        with pytest.raises(NoIntersectionFound, match="No intersection point found"):
            intersection(p, 1.0, p, 1.0)


class TestCrossingParallels:
    """Tests for great circle / parallel crossings."""

    def test_known_crossing(self):
        lon1, lon2 = crossing_parallels(
            Point(lat=46.1189424, lon=150.402832),
            Point(lat=21.9131082, lon=-160.1937128),
            45.0,
        )
        assert lon1 == pytest.approx(106.52361930066911, abs=1e-9)
        assert lon2 == pytest.approx(155.95500236778844, abs=1e-9)

    def test_equator_crossings_of_meridian_circle(self):
        """A circle through both poles' meridian 0/180 crosses the equator there."""
        lon1, lon2 = crossing_parallels(Point(lat=10, lon=0), Point(lat=20, lon=0), 0.0)
        assert sorted([abs(lon1), abs(lon2)]) == pytest.approx([0, 180], abs=1e-9)

    def test_unreachable_latitude(self):
        with pytest.raises(NoCrossingFound):
            crossing_parallels(Point(lat=0, lon=0), Point(lat=-180, lon=-90), 45.0)

    def test_equator_never_reaches_other_latitudes(self):
        with pytest.raises(NoCrossingFound, match="Not found"):
            crossing_parallels(Point(lat=0, lon=0), Point(lat=0, lon=30), 10.0)

    def test_longitudes_are_normalized(self):
        lon1, lon2 = crossing_parallels(
            Point(lat=52.5075419, lon=13.4251364),
            Point(lat=48.8588589, lon=2.3475569),
            12.3456,
        )
        assert -180 <= lon1 < 180
        assert -180 <= lon2 < 180


class TestNormalizeLongitude:
    def test_wraps(self):
        assert normalize_longitude(190) == pytest.approx(-170)
        assert normalize_longitude(-190) == pytest.approx(170)
        assert normalize_longitude(45) == pytest.approx(45)
