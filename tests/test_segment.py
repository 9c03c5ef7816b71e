import pytest

from cartesian_spatial import (
    DerivedCalculator,
    Point,
    PreconditionError,
    Rectangle,
    Sloped,
    Vertical,
    calculate_derived,
    course,
    distance,
    is_horizontal,
    is_vertical,
    line_segment,
    line_segment_to_ords,
    ords_to_line_segment,
    point_on_segment,
    points_to_line_segments,
    segment_lat_to_lon,
    segment_length,
    segment_lon_to_lat,
)

SEGMENTS = [
    (0.0, 0.0, 10.0, 5.0),
    (3.0, 0.0, 3.0, 10.0),
    (0.0, 3.0, 10.0, 3.0),
    (10.0, 5.0, -4.0, -2.5),
    (1.0, 1.0, 1.0, 1.0),
    (179.5, -45.25, 170.125, 60.0),
]


@pytest.mark.parametrize('ords', SEGMENTS)
def test_ords_round_trip(ords):
    assert line_segment_to_ords(ords_to_line_segment(*ords)) == list(ords)


@pytest.mark.parametrize('ords', SEGMENTS)
def test_segment_contains_its_own_endpoints(ords):
    ls = ords_to_line_segment(*ords)

    assert point_on_segment(ls, ls.point1)
    assert point_on_segment(ls, ls.point2)


def test_derived_fields_for_sloped_segment():
    ls = ords_to_line_segment(1.0, 1.0, 3.0, 5.0)

    assert ls.orientation == Sloped(2.0, -1.0)
    assert ls.mbr == Rectangle(1.0, 5.0, 3.0, 1.0)


def test_derived_fields_for_vertical_segment():
    ls = ords_to_line_segment(3.0, 10.0, 3.0, 0.0)

    assert ls.orientation == Vertical(3.0)
    assert ls.mbr == Rectangle(3.0, 10.0, 3.0, 0.0)
    assert is_vertical(ls)
    assert not is_horizontal(ls)


def test_mbr_is_not_treated_as_crossing_antimeridian():
    ls = ords_to_line_segment(175.0, 1.0, -175.0, 4.0)

    assert ls.mbr == Rectangle(-175.0, 4.0, 175.0, 1.0)


@pytest.mark.parametrize(
    'ords',
    [
        (170.0, 0.0, 190.0, 0.0),
        (-181.0, 0.0, 0.0, 0.0),
        (0.0, 95.0, 10.0, 0.0),
        (0.0, 0.0, 10.0, -90.5),
    ],
)
def test_segment_rejects_ordinates_outside_the_globe(ords):
    with pytest.raises(PreconditionError):
        ords_to_line_segment(*ords)


def test_segment_accepts_ordinates_on_the_globe_limits():
    ls = ords_to_line_segment(-180.0, -90.0, 180.0, 90.0)

    assert ls.mbr == Rectangle(-180.0, 90.0, 180.0, -90.0)


def test_horizontal_segment():
    ls = ords_to_line_segment(0.0, 3.0, 10.0, 3.0)

    assert is_horizontal(ls)
    assert not is_vertical(ls)
    assert ls.orientation == Sloped(0.0, 3.0)


def test_calculate_derived_returns_fully_derived_shapes():
    ls = ords_to_line_segment(0.0, 0.0, 1.0, 1.0)

    assert isinstance(ls, DerivedCalculator)
    assert calculate_derived(ls) is ls
    assert calculate_derived(ls.point1) is ls.point1
    assert calculate_derived(ls.mbr) is ls.mbr


def test_calculate_derived_rejects_unknown_types():
    with pytest.raises(TypeError):
        calculate_derived(object())


@pytest.mark.parametrize(
    'ords, expected',
    [
        ((0.0, 10.0, 0.0, 0.0), 180.0),
        ((0.0, 0.0, 0.0, 10.0), 360.0),
        ((0.0, 0.0, 1.0, 1.0), 315.0),
        ((1.0, 1.0, 0.0, 0.0), 135.0),
        ((0.0, 0.0, 1.0, 0.0), 270.0),
        ((1.0, 0.0, 0.0, 0.0), 90.0),
    ],
)
def test_course(ords, expected):
    assert course(ords_to_line_segment(*ords)) == pytest.approx(expected)


def test_segment_lon_to_lat():
    ls = ords_to_line_segment(0.0, 0.0, 10.0, 5.0)

    assert segment_lon_to_lat(ls, 4.0) == pytest.approx(2.0)
    assert segment_lon_to_lat(ls, 10.0) == pytest.approx(5.0)
    assert segment_lon_to_lat(ls, 11.0) is None


def test_segment_lon_to_lat_fails_for_vertical_segment():
    with pytest.raises(PreconditionError):
        segment_lon_to_lat(ords_to_line_segment(3.0, 0.0, 3.0, 10.0), 3.0)


def test_segment_lat_to_lon():
    ls = ords_to_line_segment(0.0, 0.0, 10.0, 5.0)

    assert segment_lat_to_lon(ls, 2.5) == pytest.approx(5.0)
    assert segment_lat_to_lon(ls, 6.0) is None


def test_segment_lat_to_lon_for_vertical_segment():
    ls = ords_to_line_segment(3.0, 0.0, 3.0, 10.0)

    assert segment_lat_to_lon(ls, 5.0) == 3.0
    assert segment_lat_to_lon(ls, 11.0) is None


def test_segment_lat_to_lon_fails_for_horizontal_segment():
    with pytest.raises(PreconditionError):
        segment_lat_to_lon(ords_to_line_segment(0.0, 3.0, 10.0, 3.0), 3.0)


@pytest.mark.parametrize(
    'point, expected',
    [
        (Point(5.0, 2.5), True),
        (Point(5.000005, 2.5), True),
        (Point(5.0, 2.6), False),
        (Point(12.0, 6.0), False),
    ],
)
def test_point_on_sloped_segment(point, expected):
    ls = ords_to_line_segment(0.0, 0.0, 10.0, 5.0)

    assert point_on_segment(ls, point) is expected


def test_point_on_horizontal_and_vertical_segments():
    horizontal = ords_to_line_segment(0.0, 3.0, 10.0, 3.0)
    vertical = ords_to_line_segment(3.0, 0.0, 3.0, 10.0)

    assert point_on_segment(horizontal, Point(4.0, 3.0))
    assert not point_on_segment(horizontal, Point(11.0, 3.0))
    assert point_on_segment(vertical, Point(3.0, 7.5))
    assert not point_on_segment(vertical, Point(3.5, 7.5))


def test_distance():
    p1 = Point(0.0, 0.0)
    p2 = Point(3.0, 4.0)

    assert distance(p1, p2) == pytest.approx(5.0)
    assert distance(p2, p1) == distance(p1, p2)
    assert distance(p2, p2) == 0.0
    assert segment_length(line_segment(p1, p2)) == pytest.approx(5.0)


def test_points_to_line_segments_joins_consecutive_points():
    points = [Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 0.0)]

    segments = points_to_line_segments(points)

    assert [line_segment_to_ords(ls) for ls in segments] == [
        [0.0, 0.0, 1.0, 1.0],
        [1.0, 1.0, 2.0, 0.0],
    ]
    assert points_to_line_segments(points[:1]) == []
