"""
quadtree-index: A two-dimensional region quadtree in Python.

This package stores points in a recursively subdivided region and answers
axis-aligned rectangular range queries.

Available components:
- types: Point value type
- spatial: Bounds rectangle and the QuadTree index
- validation: Exceptions and argument validators
"""

__version__ = "0.1.0"

# Spatial data structures
from .spatial import (
    DEFAULT_CAPACITY,
    MAX_DEPTH,
    Bounds,
    DepthLimitWarning,
    QuadTree,
)

# Shared types
from .types import Point, PointLike

# Validation utilities
from .validation import (
    InvalidArgumentError,
    InvalidGeometryError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Point",
    "PointLike",
    # Spatial data structures
    "Bounds",
    "QuadTree",
    "DEFAULT_CAPACITY",
    "MAX_DEPTH",
    "DepthLimitWarning",
    # Validation
    "ValidationError",
    "InvalidGeometryError",
    "InvalidArgumentError",
]
