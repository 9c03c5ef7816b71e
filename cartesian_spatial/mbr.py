"""Axis aligned minimum bounding rectangles, possibly crossing the antimeridian."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .math_utils import is_finite, lon_span, within_range
from .point import Point
from .types import PreconditionError


@dataclass(frozen=True)
class Rectangle:
    """Bounding rectangle; ``west > east`` wraps through +/-180 degrees."""

    west: float
    north: float
    east: float
    south: float

    def __post_init__(self) -> None:
        for name in ("west", "north", "east", "south"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if not is_finite(self.west, self.north, self.east, self.south):
            raise PreconditionError(f"rectangle ordinates must be finite: {self}")
        if self.north < self.south:
            raise PreconditionError(f"rectangle north {self.north} is below south {self.south}")

    def calculate_derived(self) -> "Rectangle":
        return self


def mbr_from_point(point: Point) -> Rectangle:
    return Rectangle(point.lon, point.lat, point.lon, point.lat)


def crosses_antimeridian(mbr: Rectangle) -> bool:
    return mbr.west > mbr.east


def is_single_point(mbr: Rectangle) -> bool:
    return mbr.west == mbr.east and mbr.north == mbr.south


def covers_lon(mbr: Rectangle, lon: float, delta: float = 0.0) -> bool:
    if crosses_antimeridian(mbr):
        return lon >= mbr.west - delta or lon <= mbr.east + delta
    return within_range(lon, mbr.west - delta, mbr.east + delta)


def covers_lat(mbr: Rectangle, lat: float, delta: float = 0.0) -> bool:
    return within_range(lat, mbr.south - delta, mbr.north + delta)


def covers_point(mbr: Rectangle, point: Point, delta: float = 0.0) -> bool:
    """Return ``True`` if ``point`` is inside ``mbr`` (edges included) widened by ``delta``."""

    return covers_lat(mbr, point.lat, delta) and covers_lon(mbr, point.lon, delta)


def _lon_range_covers(west: float, east: float, other_west: float, other_east: float) -> bool:
    width = lon_span(west, east)
    if width >= 360.0:
        return True
    offset = (other_west - west) % 360.0
    return offset + lon_span(other_west, other_east) <= width


def union(r1: Rectangle, r2: Rectangle, allow_crossing: bool = True) -> Rectangle:
    """Return the smallest rectangle covering ``r1`` and ``r2``.

    With ``allow_crossing=False`` neither input may cross the antimeridian and
    the result never does. Otherwise the narrowest longitude range covering
    both inputs is chosen, which can wrap through +/-180.
    """

    north = max(r1.north, r2.north)
    south = min(r1.south, r2.south)

    if not allow_crossing:
        if crosses_antimeridian(r1) or crosses_antimeridian(r2):
            raise PreconditionError(
                f"cannot build a non-crossing union of antimeridian crossing rectangles {r1} and {r2}"
            )
        return Rectangle(min(r1.west, r2.west), north, max(r1.east, r2.east), south)

    candidates = []
    for west in (r1.west, r2.west):
        for east in (r1.east, r2.east):
            if _lon_range_covers(west, east, r1.west, r1.east) and _lon_range_covers(
                west, east, r2.west, r2.east
            ):
                candidates.append((lon_span(west, east), west > east, west, east))
    if not candidates:
        return Rectangle(-180.0, north, 180.0, south)
    _, _, west, east = min(candidates)
    return Rectangle(west, north, east, south)


def split_across_antimeridian(mbr: Rectangle) -> List[Rectangle]:
    """Split ``mbr`` into one or two rectangles that do not cross the antimeridian."""

    if crosses_antimeridian(mbr):
        return [
            Rectangle(mbr.west, mbr.north, 180.0, mbr.south),
            Rectangle(-180.0, mbr.north, mbr.east, mbr.south),
        ]
    return [mbr]


def corner_points(mbr: Rectangle) -> List[Point]:
    """Return the upper-left, upper-right, lower-right and lower-left corners."""

    return [
        Point(mbr.west, mbr.north),
        Point(mbr.east, mbr.north),
        Point(mbr.east, mbr.south),
        Point(mbr.west, mbr.south),
    ]


def intersections(r1: Rectangle, r2: Rectangle) -> List[Rectangle]:
    """Return the non-crossing rectangles where ``r1`` and ``r2`` overlap."""

    overlaps: List[Rectangle] = []
    for a in split_across_antimeridian(r1):
        for b in split_across_antimeridian(r2):
            west = max(a.west, b.west)
            east = min(a.east, b.east)
            north = min(a.north, b.north)
            south = max(a.south, b.south)
            if west <= east and south <= north:
                overlaps.append(Rectangle(west, north, east, south))
    return overlaps


def intersects(r1: Rectangle, r2: Rectangle) -> bool:
    return bool(intersections(r1, r2))


__all__ = [
    "Rectangle",
    "corner_points",
    "covers_lat",
    "covers_lon",
    "covers_point",
    "crosses_antimeridian",
    "intersections",
    "intersects",
    "is_single_point",
    "mbr_from_point",
    "split_across_antimeridian",
    "union",
]
