"""
Common types for the quadtree index.

This module provides the value types shared across the package:
- Point: Immutable 2D coordinate stored in the index
- PointLike: Anything accepted where a point is expected
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union


@dataclass(frozen=True)
class Point:
    """
    An immutable 2D coordinate.

    Equality and hashing are structural, so two points with the same
    coordinates are interchangeable.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as an (x, y) tuple."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"Point({self.x:.1f}, {self.y:.1f})"


PointLike = Union[Point, Sequence[float]]


def to_point(value: PointLike) -> Point:
    """Convert a Point or an (x, y) pair to a Point."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


__all__ = ["Point", "PointLike", "to_point"]
