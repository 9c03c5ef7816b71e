"""Tolerance settings used by the geometry operations."""

from __future__ import annotations

from dataclasses import dataclass

# Maximum difference for two ordinates to compare equal as points.
POINT_EQUALITY_DELTA = 1e-10

# Tolerance for deciding whether a point lies on a segment.
COVERS_TOLERANCE = 1e-5

# Rectangle containment slack for solved intersection points; the solved
# ordinates accumulate floating point error.
INTERSECTION_COVERS_TOLERANCE = 1e-7

# Digits kept when rounding boundary intersections before deduplication.
DEDUP_ROUND_DIGITS = 11

# Default densification spacing in degrees.
DENSIFY_STEP = 0.1


@dataclass(frozen=True)
class Tolerances:
    """Bundle of tolerances passed explicitly to the engine operations."""

    point_equality: float = POINT_EQUALITY_DELTA
    covers: float = COVERS_TOLERANCE
    intersection_covers: float = INTERSECTION_COVERS_TOLERANCE
    dedup_round_digits: int = DEDUP_ROUND_DIGITS


DEFAULT_TOLERANCES = Tolerances()


def get_default_tolerances() -> Tolerances:
    return DEFAULT_TOLERANCES


__all__ = [
    "COVERS_TOLERANCE",
    "DEDUP_ROUND_DIGITS",
    "DEFAULT_TOLERANCES",
    "DENSIFY_STEP",
    "INTERSECTION_COVERS_TOLERANCE",
    "POINT_EQUALITY_DELTA",
    "Tolerances",
    "get_default_tolerances",
]
