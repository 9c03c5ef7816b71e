"""Planar points with tolerance based equality."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .config import POINT_EQUALITY_DELTA
from .math_utils import approx_eq, is_finite, round_to
from .types import PreconditionError


@dataclass(frozen=True, eq=False)
class Point:
    """Immutable 2D coordinate.

    ``==`` compares within :data:`~cartesian_spatial.config.POINT_EQUALITY_DELTA`,
    so points are deliberately unhashable.
    """

    lon: float
    lat: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lon", float(self.lon))
        object.__setattr__(self, "lat", float(self.lat))
        if not is_finite(self.lon, self.lat):
            raise PreconditionError(f"point ordinates must be finite, got ({self.lon}, {self.lat})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return approx_equal(self, other, POINT_EQUALITY_DELTA)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Point(lon={self.lon!r}, lat={self.lat!r})"

    def calculate_derived(self) -> "Point":
        return self


def approx_equal(p1: Point, p2: Point, delta: float = POINT_EQUALITY_DELTA) -> bool:
    """Return ``True`` when both ordinates differ by at most ``delta``."""

    return approx_eq(p1.lon, p2.lon, delta) and approx_eq(p1.lat, p2.lat, delta)


def same_ordinates(p1: Point, p2: Point) -> bool:
    """Exact (bitwise float) comparison of two points."""

    return p1.lon == p2.lon and p1.lat == p2.lat


def round_point(point: Point, digits: int) -> Point:
    return Point(round_to(point.lon, digits), round_to(point.lat, digits))


def ords_to_points(*ords: float) -> List[Point]:
    """Build points from a flat ``lon1, lat1, lon2, lat2, ...`` sequence."""

    if len(ords) % 2:
        raise PreconditionError(f"expected an even number of ordinates, got {len(ords)}")
    return [Point(ords[i], ords[i + 1]) for i in range(0, len(ords), 2)]


def points_to_ords(points: Iterable[Point]) -> List[float]:
    ords: List[float] = []
    for point in points:
        ords.extend((point.lon, point.lat))
    return ords


def distinct_points(points: Sequence[Point], delta: float = POINT_EQUALITY_DELTA) -> List[Point]:
    """Drop points equal (within ``delta``) to an earlier one, keeping order."""

    kept: List[Point] = []
    for point in points:
        if not any(approx_equal(point, other, delta) for other in kept):
            kept.append(point)
    return kept


__all__ = [
    "Point",
    "approx_equal",
    "distinct_points",
    "ords_to_points",
    "points_to_ords",
    "round_point",
    "same_ordinates",
]
