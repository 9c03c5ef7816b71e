"""Cartesian line segments: lines between two points in a 2D plane."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .config import DEFAULT_TOLERANCES, DENSIFY_STEP, Tolerances
from .math_utils import approx_eq, within_range
from .mbr import Rectangle, covers_lat, covers_lon, covers_point, mbr_from_point, union
from .point import Point, ords_to_points, same_ordinates
from .types import Orientation, PreconditionError, Sloped, Vertical

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineSegment:
    """Segment between two points with its orientation and bounding rectangle.

    Build instances with :func:`line_segment`; the derived fields are computed
    there once and never change.
    """

    point1: Point
    point2: Point
    orientation: Orientation
    mbr: Rectangle

    def calculate_derived(self) -> "LineSegment":
        return self


def _check_ordinates(point: Point) -> None:
    if not within_range(point.lon, -180.0, 180.0):
        raise PreconditionError(f"longitude {point.lon!r} is outside [-180, 180]")
    if not within_range(point.lat, -90.0, 90.0):
        raise PreconditionError(f"latitude {point.lat!r} is outside [-90, 90]")


def line_segment(point1: Point, point2: Point) -> LineSegment:
    """Build a segment from ``point1`` to ``point2``.

    Both endpoints must lie within [-180, 180] x [-90, 90]. The segment is
    planar, so together with the non-crossing union it never spans the
    antimeridian.
    """

    _check_ordinates(point1)
    _check_ordinates(point2)
    lon1, lat1 = point1.lon, point1.lat
    lon2, lat2 = point2.lon, point2.lat

    orientation: Orientation
    if lon1 == lon2:
        orientation = Vertical(lon1)
    else:
        m = (lat2 - lat1) / (lon2 - lon1)
        orientation = Sloped(m, lat1 - m * lon1)

    # A segment never spans the antimeridian; union rejects crossing input.
    mbr = union(mbr_from_point(point1), mbr_from_point(point2), allow_crossing=False)
    return LineSegment(point1, point2, orientation, mbr)


def ords_to_line_segment(lon1: float, lat1: float, lon2: float, lat2: float) -> LineSegment:
    return line_segment(*ords_to_points(lon1, lat1, lon2, lat2))


def line_segment_to_ords(ls: LineSegment) -> List[float]:
    """Return ``[lon1, lat1, lon2, lat2]``."""

    return [ls.point1.lon, ls.point1.lat, ls.point2.lon, ls.point2.lat]


def points_to_line_segments(points: Sequence[Point]) -> List[LineSegment]:
    """Join each pair of consecutive points with a segment."""

    return [line_segment(a, b) for a, b in zip(points, points[1:])]


def is_vertical(ls: LineSegment) -> bool:
    return ls.point1.lon == ls.point2.lon


def is_horizontal(ls: LineSegment) -> bool:
    return ls.point1.lat == ls.point2.lat


def course(ls: LineSegment) -> float:
    """Return the compass heading along the segment."""

    lon1, lat1 = ls.point1.lon, ls.point1.lat
    lon2, lat2 = ls.point2.lon, ls.point2.lat
    if isinstance(ls.orientation, Vertical):
        return 180.0 if lat1 > lat2 else 360.0

    slope_angle = math.degrees(math.atan(ls.orientation.m))
    if lon1 > lon2:
        return 90.0 + slope_angle
    return 270.0 + slope_angle


def segment_lon_to_lat(ls: LineSegment, lon: float) -> Optional[float]:
    """Latitude of the segment at ``lon``, or ``None`` outside its longitude range."""

    if isinstance(ls.orientation, Vertical):
        raise PreconditionError(
            "Can not determine latitude of points at a given longitude in a vertical line"
        )
    if not covers_lon(ls.mbr, lon):
        return None
    return ls.orientation.m * lon + ls.orientation.b


def segment_lat_to_lon(ls: LineSegment, lat: float) -> Optional[float]:
    """Longitude of the segment at ``lat``, or ``None`` outside its latitude range.

    Horizontal segments are rejected because every longitude of the segment
    shares their latitude.
    """

    if is_horizontal(ls):
        raise PreconditionError(
            "Can not determine longitude of points at a given latitude in a horizontal line"
        )
    if not covers_lat(ls.mbr, lat):
        return None
    if isinstance(ls.orientation, Vertical):
        return ls.orientation.lon
    return (lat - ls.orientation.b) / ls.orientation.m


def point_on_segment(
    ls: LineSegment, point: Point, *, tolerances: Tolerances = DEFAULT_TOLERANCES
) -> bool:
    """Return ``True`` if ``point`` is approximately on the segment."""

    if same_ordinates(ls.point1, point) or same_ordinates(ls.point2, point):
        return True
    if not covers_point(ls.mbr, point):
        return False
    if is_horizontal(ls):
        return approx_eq(ls.point1.lat, point.lat, tolerances.covers)
    expected_lon = segment_lat_to_lon(ls, point.lat)
    if expected_lon is None:
        return False
    return approx_eq(expected_lon, point.lon, tolerances.covers)


def distance(point1: Point, point2: Point) -> float:
    """Planar distance in degrees (hypotenuse of the ordinate deltas)."""

    return math.hypot(point2.lat - point1.lat, point2.lon - point1.lon)


def segment_length(ls: LineSegment) -> float:
    return distance(ls.point1, ls.point2)


def densify_line_segment(ls: LineSegment, step: float = DENSIFY_STEP) -> List[Point]:
    """Return points spaced ``step`` degrees apart along the segment.

    Used to approximate the segment in another coordinate system. Vertical
    segments are not densified. The last point is always ``ls.point2``.
    """

    if step <= 0.0:
        raise PreconditionError(f"densification step must be positive, got {step}")
    if isinstance(ls.orientation, Vertical):
        return [ls.point1, ls.point2]

    angle = math.atan(ls.orientation.m)
    lat_diff = step * math.sin(angle)
    lon_diff = step * math.cos(angle)
    if ls.point1.lon > ls.point2.lon:
        lat_diff, lon_diff = -lat_diff, -lon_diff

    num_points = int(math.floor(segment_length(ls) / step))
    steps = np.arange(num_points + 1, dtype=float)
    lons = ls.point1.lon + lon_diff * steps
    lats = ls.point1.lat + lat_diff * steps
    points = [Point(lon, lat) for lon, lat in zip(lons.tolist(), lats.tolist())]

    if points[-1] != ls.point2:
        points.append(ls.point2)
    logger.debug("Densified segment at step %s into %d point(s)", step, len(points))
    return points


__all__ = [
    "LineSegment",
    "course",
    "densify_line_segment",
    "distance",
    "is_horizontal",
    "is_vertical",
    "line_segment",
    "line_segment_to_ords",
    "ords_to_line_segment",
    "point_on_segment",
    "points_to_line_segments",
    "segment_lat_to_lon",
    "segment_length",
    "segment_lon_to_lat",
]
