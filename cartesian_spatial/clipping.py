"""Clipping of line segments to bounding rectangles.

Clipping a segment with a rectangle can produce sub-segments as well as
isolated points (where the segment only touches the rectangle), so results are
returned as a :class:`SubselectResult` holding both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .config import DEFAULT_TOLERANCES, Tolerances
from .intersect import mbr_intersections
from .segment import LineSegment, distance, line_segment
from .logging_utils import apply_debug_logging
from .mbr import Rectangle, covers_point, split_across_antimeridian
from .point import Point, approx_equal, distinct_points, round_point
from .types import GeometryInvariantError, PreconditionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubselectResult:
    """Portions of a segment that fall inside a rectangle."""

    line_segments: Tuple[LineSegment, ...] = ()
    points: Tuple[Point, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.line_segments or self.points)

    def merge(self, other: "SubselectResult") -> "SubselectResult":
        return SubselectResult(
            self.line_segments + other.line_segments,
            self.points + other.points,
        )


EMPTY_RESULT = SubselectResult()


def keep_farthest_points(points: Sequence[Point]) -> List[Point]:
    """Return the two points that are farthest from each other.

    Pairs are considered in input order (``(0, 1), (0, 2), ..., (1, 2), ...``)
    and on a tie the last maximal pair wins.
    """

    if len(points) < 2:
        raise PreconditionError(f"need at least two points, got {len(points)}")
    coords = np.array([(p.lon, p.lat) for p in points], dtype=float)
    first, second = np.triu_indices(len(points), k=1)
    deltas = coords[second] - coords[first]
    dists = np.hypot(deltas[:, 0], deltas[:, 1])
    k = int(np.flatnonzero(dists == dists.max())[-1])
    return [points[int(first[k])], points[int(second[k])]]


def _directed_segment(ls: LineSegment, a: Point, b: Point) -> LineSegment:
    # Keep the direction of the segment being clipped.
    if distance(ls.point1, a) <= distance(ls.point1, b):
        return line_segment(a, b)
    return line_segment(b, a)


def _subselect_not_across_am(
    ls: LineSegment, mbr: Rectangle, tolerances: Tolerances
) -> SubselectResult:
    point1, point2 = ls.point1, ls.point2
    point1_in_mbr = covers_point(mbr, point1)
    point2_in_mbr = covers_point(mbr, point2)

    if point1_in_mbr and point2_in_mbr:
        return SubselectResult(line_segments=(ls,))

    found = mbr_intersections(ls, mbr, tolerances=tolerances)
    candidates = distinct_points(
        [round_point(p, tolerances.dedup_round_digits) for p in found],
        tolerances.point_equality,
    )
    if len(candidates) > 2:
        # Near-tangential hits close to a corner can produce extra points.
        logger.debug("Reducing %d boundary intersections to the farthest pair", len(candidates))
        candidates = keep_farthest_points(candidates)

    if len(candidates) > 2:
        raise GeometryInvariantError(f"Found too many intersection points {candidates!r}")
    if not candidates:
        return EMPTY_RESULT
    if len(candidates) == 2:
        return SubselectResult(line_segments=(_directed_segment(ls, *candidates),))

    boundary_point = candidates[0]
    for endpoint, inside in ((point2, point2_in_mbr), (point1, point1_in_mbr)):
        if not inside:
            continue
        if approx_equal(endpoint, boundary_point, tolerances.covers):
            # endpoint sits on the rectangle's edge
            return SubselectResult(points=(endpoint,))
        return SubselectResult(line_segments=(line_segment(endpoint, boundary_point),))
    return SubselectResult(points=(boundary_point,))


def subselect(
    ls: LineSegment, mbr: Rectangle, *, tolerances: Tolerances = DEFAULT_TOLERANCES
) -> SubselectResult:
    """Select the portions of ``ls`` inside ``mbr``.

    Rectangles crossing the antimeridian are split first and each half is
    clipped separately. An empty (falsy) result means the segment and the
    rectangle do not overlap.
    """

    result = EMPTY_RESULT
    for part in split_across_antimeridian(mbr):
        result = result.merge(_subselect_not_across_am(ls, part, tolerances))
    return result


apply_debug_logging(globals(), logger=logger)


__all__ = ["EMPTY_RESULT", "SubselectResult", "keep_farthest_points", "subselect"]
