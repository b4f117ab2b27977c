"""
Axis-aligned rectangles used for every spatial decision in the quadtree.

A Bounds is defined by an origin corner (x, y) and a strictly positive
width and height. Containment and intersection are inclusive on all four
edges, so a point lying exactly on a boundary belongs to the rectangle and
rectangles that share only an edge or a corner intersect.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from typing_extensions import Self

from ..types import Point
from ..validation import validate_dimensions, validate_origin


@dataclass(frozen=True)
class Bounds:
    """
    Immutable axis-aligned rectangle.

    Attributes:
        x, y: Origin corner (the corner with the smallest coordinates)
        width, height: Extents along each axis, both > 0

    Raises:
        InvalidGeometryError: If width or height is not strictly positive
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        x, y = validate_origin(self.x, self.y)
        width, height = validate_dimensions(self.width, self.height)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)

    @classmethod
    def from_extent(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> Self:
        """
        Build a rectangle covering the (min_x, min_y, max_x, max_y) extent.

        Width and height are nudged up by an ulp where needed so that the
        max corner is contained despite float rounding.
        """
        width = max_x - min_x
        height = max_y - min_y
        if width > 0:
            while min_x + width < max_x:
                width = math.nextafter(width, math.inf)
        if height > 0:
            while min_y + height < max_y:
                height = math.nextafter(height, math.inf)
        return cls(min_x, min_y, width, height)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def contains(self, point: Point) -> bool:
        """Check if point lies within [x, x+width] x [y, y+height]."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )

    def intersects(self, other: Bounds) -> bool:
        """
        Check if two rectangles overlap.

        Touching rectangles (shared edge or corner) count as intersecting.
        """
        return not (
            other.x > self.x + self.width
            or other.x + other.width < self.x
            or other.y > self.y + self.height
            or other.y + other.height < self.y
        )

    def subdivide(self) -> Tuple[Bounds, Bounds, Bounds, Bounds]:
        """
        Split into four equal quadrants.

        The east and south quadrants end exactly at the parent's max edges,
        so every point the parent contains lies in at least one quadrant.

        Returns:
            (NW, NE, SW, SE). QuadTree child slots rely on this order.
        """
        half_width = self.width / 2
        half_height = self.height / 2
        mid_x = self.x + half_width
        mid_y = self.y + half_height
        cls = type(self)
        return (
            cls(self.x, self.y, half_width, half_height),
            cls.from_extent(mid_x, self.y, self.max_x, mid_y),
            cls.from_extent(self.x, mid_y, mid_x, self.max_y),
            cls.from_extent(mid_x, mid_y, self.max_x, self.max_y),
        )

    def center(self) -> Point:
        """Center point of the rectangle."""
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def area(self) -> float:
        return self.width * self.height

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def __str__(self) -> str:
        return f"Bounds({self.x:.1f}, {self.y:.1f}, {self.width:.1f}, {self.height:.1f})"


__all__ = ["Bounds"]
