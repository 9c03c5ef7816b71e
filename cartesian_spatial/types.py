"""Shared error types and the segment orientation variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class GeometryError(Exception):
    """Base class for errors raised by the geometry engine."""


class PreconditionError(GeometryError, ValueError):
    """Raised when an operation is called with arguments it cannot accept."""


class GeometryInvariantError(GeometryError, RuntimeError):
    """Raised when a computed result breaks a geometric invariant."""


@dataclass(frozen=True)
class Vertical:
    """Orientation of a segment whose endpoints share a longitude."""

    lon: float


@dataclass(frozen=True)
class Sloped:
    """Orientation of a non-vertical segment on the line ``lat = m * lon + b``."""

    m: float
    b: float


Orientation = Union[Vertical, Sloped]


__all__ = [
    "GeometryError",
    "GeometryInvariantError",
    "Orientation",
    "PreconditionError",
    "Sloped",
    "Vertical",
]
