import math

import pytest

from cartesian_spatial import (
    Point,
    PreconditionError,
    approx_equal,
    distinct_points,
    ords_to_points,
    points_to_ords,
    round_point,
)


def test_point_coerces_ordinates_to_float():
    point = Point(1, 2)

    assert isinstance(point.lon, float)
    assert isinstance(point.lat, float)


def test_point_equality_uses_tolerance():
    assert Point(1.0, 2.0) == Point(1.0 + 1e-12, 2.0 - 1e-12)
    assert Point(1.0, 2.0) != Point(1.001, 2.0)


def test_points_are_not_hashable():
    with pytest.raises(TypeError):
        hash(Point(0.0, 0.0))


@pytest.mark.parametrize('lon, lat', [(math.nan, 0.0), (0.0, math.inf)])
def test_point_rejects_non_finite_ordinates(lon, lat):
    with pytest.raises(PreconditionError):
        Point(lon, lat)


def test_approx_equal_with_explicit_delta():
    assert approx_equal(Point(0.0, 0.0), Point(0.000001, 0.0), 1e-5)
    assert not approx_equal(Point(0.0, 0.0), Point(0.0001, 0.0), 1e-5)


def test_round_point_rounds_both_ordinates():
    point = round_point(Point(1.123456789012345, -0.0000000000001), 11)

    assert point.lon == 1.12345678901
    assert point.lat == 0.0
    assert math.copysign(1.0, point.lat) == 1.0


def test_ords_round_trip():
    ords = [1.5, -2.25, 3.0, 4.0, 170.0, -89.5]

    points = ords_to_points(*ords)

    assert points == [Point(1.5, -2.25), Point(3.0, 4.0), Point(170.0, -89.5)]
    assert points_to_ords(points) == ords


def test_ords_to_points_requires_pairs():
    with pytest.raises(PreconditionError):
        ords_to_points(1.0, 2.0, 3.0)


def test_distinct_points_keeps_first_occurrence_order():
    points = [Point(1, 1), Point(2, 2), Point(1 + 1e-12, 1), Point(3, 3), Point(2, 2)]

    assert distinct_points(points) == [Point(1, 1), Point(2, 2), Point(3, 3)]
