"""
Spatial data structures for point indexing.

Provides the Bounds rectangle primitive and a region quadtree that
answers axis-aligned range queries.
"""

from .bounds import Bounds
from .quadtree import DEFAULT_CAPACITY, MAX_DEPTH, DepthLimitWarning, QuadTree

__all__ = ["Bounds", "DEFAULT_CAPACITY", "DepthLimitWarning", "MAX_DEPTH", "QuadTree"]
