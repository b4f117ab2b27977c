"""
Input validation utilities for the quadtree index.

Provides centralized validation functions for rectangle dimensions,
node capacity and required arguments. Raises descriptive exceptions on
invalid input.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Optional, TypeVar

T = TypeVar("T")


class ValidationError(ValueError):
    """Base exception for quadtree validation errors."""

    pass


class InvalidGeometryError(ValidationError):
    """Raised when rectangle dimensions are invalid."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when a caller passes a missing or malformed argument."""

    pass


def validate_dimensions(width: float, height: float) -> tuple[float, float]:
    """
    Validate rectangle dimensions.

    Args:
        width: Rectangle width
        height: Rectangle height

    Returns:
        Validated (width, height) tuple

    Raises:
        InvalidGeometryError: If either dimension is not strictly positive
    """
    width, height = float(width), float(height)

    if not math.isfinite(width) or width <= 0:
        raise InvalidGeometryError(f"width must be positive, got {width}")
    if not math.isfinite(height) or height <= 0:
        raise InvalidGeometryError(f"height must be positive, got {height}")

    return width, height


def validate_origin(x: float, y: float) -> tuple[float, float]:
    """Validate that a rectangle origin is finite."""
    x, y = float(x), float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidGeometryError(f"origin must be finite, got ({x}, {y})")
    return x, y


def validate_capacity(capacity: int) -> int:
    """
    Validate node capacity is a positive integer.

    Args:
        capacity: Maximum points a leaf holds before subdividing

    Returns:
        Validated capacity

    Raises:
        InvalidArgumentError: If capacity is not an int >= 1
    """
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
        raise InvalidArgumentError(
            f"capacity must be an integer, got {type(capacity).__name__}"
        )
    if capacity < 1:
        raise InvalidArgumentError(f"capacity must be >= 1, got {capacity}")
    return int(capacity)


def validate_not_none(value: Optional[T], name: str) -> T:
    """
    Validate that a required argument was supplied.

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None")
    return value


def validate_padding(padding: Any) -> float:
    """Validate bounding-box padding is a finite, non-negative number."""
    padding = float(padding)
    if not math.isfinite(padding) or padding < 0:
        raise InvalidArgumentError(f"padding must be >= 0, got {padding}")
    return padding


__all__ = [
    "ValidationError",
    "InvalidGeometryError",
    "InvalidArgumentError",
    "validate_dimensions",
    "validate_origin",
    "validate_capacity",
    "validate_not_none",
    "validate_padding",
]
