"""Intersection points between line segments and rectangle boundaries."""

from __future__ import annotations

import logging
from typing import List, Optional

from .boundary import mbr_to_line_segments
from .config import DEFAULT_TOLERANCES, Tolerances
from .segment import LineSegment, point_on_segment, segment_lon_to_lat
from .logging_utils import apply_debug_logging
from .math_utils import within_range
from .mbr import Rectangle, covers_point, intersections, is_single_point
from .point import Point, distinct_points
from .types import Vertical

logger = logging.getLogger(__name__)


def _intersection_both_vertical(ls1: LineSegment, ls2: LineSegment) -> Optional[Point]:
    lon = ls1.point1.lon
    if lon != ls2.point1.lon:
        return None
    mbr1, mbr2 = ls1.mbr, ls2.mbr
    # Checked in this order so overlapping segments always yield the same point.
    if within_range(mbr2.north, mbr1.south, mbr1.north):
        return Point(lon, mbr2.north)
    if within_range(mbr2.south, mbr1.south, mbr1.north):
        return Point(lon, mbr2.south)
    if within_range(mbr1.south, mbr2.south, mbr2.north):
        return Point(lon, mbr1.south)
    return None


def _intersection_one_vertical(
    ls1: LineSegment, ls2: LineSegment, tolerance: float
) -> Optional[Point]:
    if isinstance(ls1.orientation, Vertical):
        vert_ls, ls = ls1, ls2
    else:
        vert_ls, ls = ls2, ls1
    lon = vert_ls.point1.lon
    # m*lon + b can miss an endpoint's own latitude by an ulp.
    if lon == ls.point1.lon:
        lat = ls.point1.lat
    elif lon == ls.point2.lon:
        lat = ls.point2.lat
    else:
        lat = segment_lon_to_lat(ls, lon)
    if lat is None:
        return None
    point = Point(lon, lat)
    if covers_point(ls.mbr, point, tolerance) and covers_point(vert_ls.mbr, point, tolerance):
        return point
    return None


def _intersection_parallel(ls1: LineSegment, ls2: LineSegment) -> Optional[Point]:
    if ls1.orientation.b != ls2.orientation.b:
        return None
    overlaps = intersections(ls1.mbr, ls2.mbr)
    if not overlaps:
        return None
    west = overlaps[0].west
    lat = segment_lon_to_lat(ls1, west)
    if lat is None:
        return None
    return Point(west, lat)


def _intersection_normal(
    ls1: LineSegment, ls2: LineSegment, tolerance: float
) -> Optional[Point]:
    m1, b1 = ls1.orientation.m, ls1.orientation.b
    m2, b2 = ls2.orientation.m, ls2.orientation.b
    lon = (b2 - b1) / (m1 - m2)
    lat = m1 * lon + b1
    point = Point(lon, lat)
    if covers_point(ls1.mbr, point, tolerance) and covers_point(ls2.mbr, point, tolerance):
        return point
    return None


def intersection(
    ls1: LineSegment, ls2: LineSegment, *, tolerances: Tolerances = DEFAULT_TOLERANCES
) -> Optional[Point]:
    """Return the point where the two segments intersect, or ``None``."""

    o1, o2 = ls1.orientation, ls2.orientation
    if isinstance(o1, Vertical) and isinstance(o2, Vertical):
        return _intersection_both_vertical(ls1, ls2)
    if isinstance(o1, Vertical) or isinstance(o2, Vertical):
        return _intersection_one_vertical(ls1, ls2, tolerances.point_equality)
    if o1.m == o2.m:
        return _intersection_parallel(ls1, ls2)
    return _intersection_normal(ls1, ls2, tolerances.intersection_covers)


def mbr_intersections(
    ls: LineSegment, mbr: Rectangle, *, tolerances: Tolerances = DEFAULT_TOLERANCES
) -> List[Point]:
    """Return the distinct points where ``ls`` meets the edges of ``mbr``."""

    if is_single_point(mbr):
        point = Point(mbr.west, mbr.north)
        return [point] if point_on_segment(ls, point, tolerances=tolerances) else []

    points = []
    for edge in mbr_to_line_segments(mbr):
        point = intersection(ls, edge, tolerances=tolerances)
        if point is not None:
            points.append(point)
    return distinct_points(points, tolerances.point_equality)


apply_debug_logging(globals(), logger=logger)


__all__ = ["intersection", "mbr_intersections"]
