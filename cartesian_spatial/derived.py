"""Shared capability for shapes that carry derived fields."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

S = TypeVar("S", bound="DerivedCalculator")


@runtime_checkable
class DerivedCalculator(Protocol):
    """Protocol implemented by every shape type."""

    def calculate_derived(self: S) -> S:
        """Return a copy of the shape with all derived fields populated."""


def calculate_derived(shape: S) -> S:
    if not isinstance(shape, DerivedCalculator):
        raise TypeError(f"{type(shape).__name__} does not support derived calculation")
    return shape.calculate_derived()


__all__ = ["DerivedCalculator", "calculate_derived"]
