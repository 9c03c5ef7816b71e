"""Decomposition of bounding rectangles into their edge segments."""

from __future__ import annotations

import logging
from typing import List

from .segment import LineSegment, line_segment
from .logging_utils import apply_debug_logging
from .mbr import Rectangle, corner_points, crosses_antimeridian, is_single_point
from .point import Point
from .types import PreconditionError

logger = logging.getLogger(__name__)


def mbr_to_line_segments(mbr: Rectangle) -> List[LineSegment]:
    """Return the segments forming the exterior of ``mbr``.

    Edges of antimeridian crossing rectangles are split at +/-180 so that no
    returned segment spans the antimeridian. ``mbr`` must cover more than a
    single point.
    """

    west, north, east, south = mbr.west, mbr.north, mbr.east, mbr.south

    if is_single_point(mbr):
        raise PreconditionError("Can not build boundary segments for a single point rectangle")

    if west == east:
        return [line_segment(Point(west, north), Point(east, south))]

    if north == south:
        if crosses_antimeridian(mbr):
            return [
                line_segment(Point(west, north), Point(180.0, north)),
                line_segment(Point(-180.0, north), Point(east, north)),
            ]
        return [line_segment(Point(west, north), Point(east, south))]

    ul, ur, lr, ll = corner_points(mbr)
    if crosses_antimeridian(mbr):
        return [
            line_segment(ul, Point(180.0, north)),
            line_segment(Point(-180.0, north), ur),
            line_segment(ur, lr),
            line_segment(lr, Point(-180.0, south)),
            line_segment(Point(180.0, south), ll),
            line_segment(ll, ul),
        ]
    return [
        line_segment(ul, ur),
        line_segment(ur, lr),
        line_segment(lr, ll),
        line_segment(ll, ul),
    ]


apply_debug_logging(globals(), logger=logger)


__all__ = ["mbr_to_line_segments"]
