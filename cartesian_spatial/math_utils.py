from __future__ import annotations

import math


def approx_eq(a: float, b: float, delta: float) -> bool:
    return abs(a - b) <= delta


def within_range(value: float, low: float, high: float) -> bool:
    """Return ``True`` when ``low <= value <= high``."""

    return low <= value <= high


def round_to(value: float, digits: int) -> float:
    rounded = round(value, digits)
    # normalise negative zero so rounded points compare and print cleanly
    return rounded + 0.0


def is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def lon_span(west: float, east: float) -> float:
    """Width in degrees of the longitude range running east from ``west`` to ``east``."""

    if west <= east:
        return east - west
    return 360.0 - (west - east)


__all__ = [
    "approx_eq",
    "is_finite",
    "lon_span",
    "round_to",
    "within_range",
]
