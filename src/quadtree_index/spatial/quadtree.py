"""
Region quadtree for point storage and rectangular range queries.

The quadtree recursively subdivides 2D space into quadrants. Each node
holds up to ``capacity`` points; the first insert that would overflow a
leaf splits it into four children and pushes its points down. Range
queries skip every subtree whose region does not intersect the query
rectangle.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..types import Point, PointLike, to_point
from ..validation import validate_capacity, validate_not_none, validate_padding
from .bounds import Bounds

if TYPE_CHECKING:
    from typing_extensions import Self

DEFAULT_CAPACITY = 4
MAX_DEPTH = 12

# Child slot order, matching Bounds.subdivide()
NW, NE, SW, SE = 0, 1, 2, 3


class DepthLimitWarning(UserWarning):
    """Warning issued when a node at maximum depth exceeds its capacity."""

    pass


class QuadTree:
    """
    Region quadtree node.

    A node with no children is a leaf and stores its points directly. A
    divided node owns exactly four children whose regions tile its own,
    in [NW, NE, SW, SE] order. A divided node may still hold overflow
    points that none of its children accepted.

    Usage:
        tree = QuadTree(Bounds(0, 0, 100, 100), capacity=4)
        tree.insert(Point(10, 10))
        found = tree.query(Bounds(0, 0, 25, 25))

    The tree is not safe for concurrent mutation. Read-only queries
    against a tree that is not being modified are safe.
    """

    def __init__(self, bounds: Bounds, capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize an empty root node.

        Args:
            bounds: Region covered by the tree
            capacity: Points a leaf holds before it subdivides

        Raises:
            InvalidArgumentError: If bounds is None or capacity is not a
                positive integer
        """
        self._bounds: Bounds = validate_not_none(bounds, "bounds")
        self._capacity: int = validate_capacity(capacity)
        self._depth: int = 0
        self._points: List[Point] = []
        self._children: Optional[Tuple[QuadTree, QuadTree, QuadTree, QuadTree]] = None
        self._depth_warned = False

    @classmethod
    def _child(cls, bounds: Bounds, capacity: int, depth: int) -> Self:
        """Create a child node without re-validating inherited parameters."""
        node = cls.__new__(cls)
        node._bounds = bounds
        node._capacity = capacity
        node._depth = depth
        node._points = []
        node._children = None
        node._depth_warned = False
        return node

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def bounds(self) -> Bounds:
        """Region governed by this node."""
        return self._bounds

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def depth(self) -> int:
        """Distance from the root (root = 0)."""
        return self._depth

    @property
    def points(self) -> Tuple[Point, ...]:
        """Points stored directly at this node."""
        return tuple(self._points)

    @property
    def children(self) -> Optional[Tuple[QuadTree, QuadTree, QuadTree, QuadTree]]:
        """Four children as (NW, NE, SW, SE), or None for a leaf."""
        return self._children

    def is_divided(self) -> bool:
        """True if this node has four children."""
        return self._children is not None

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self._children is None

    # -------------------------------------------------------------------------
    # Insertion
    # -------------------------------------------------------------------------

    def insert(self, point: Optional[Point]) -> bool:
        """
        Insert a point into the subtree rooted at this node.

        Args:
            point: Point to store

        Returns:
            True if the point was stored, False if it is None or lies
            outside this node's bounds
        """
        crowded: List[QuadTree] = []
        accepted = self._insert(point, crowded)
        self._warn_crowded(crowded)
        return accepted

    def insert_many(self, points: Iterable[Optional[PointLike]]) -> int:
        """
        Insert several points.

        Accepts Point objects, (x, y) pairs or the rows of an (n, 2) array.

        Returns:
            Number of points accepted
        """
        crowded: List[QuadTree] = []
        accepted = 0
        for value in points:
            point = None if value is None else to_point(value)
            if self._insert(point, crowded):
                accepted += 1
        self._warn_crowded(crowded)
        return accepted

    def _insert(self, point: Optional[Point], crowded: List[QuadTree]) -> bool:
        if point is None or not self._bounds.contains(point):
            return False

        if self._children is None and (
            len(self._points) < self._capacity or self._depth >= MAX_DEPTH
        ):
            self._store(point, crowded)
            return True

        if self._children is None:
            self._subdivide(crowded)

        if self._insert_into_children(point, crowded):
            return True

        # Boundary point no quadrant captured: keep it here as overflow
        self._points.append(point)
        return True

    def _store(self, point: Point, crowded: List[QuadTree]) -> None:
        """Append a point to this node's own list."""
        self._points.append(point)
        if (
            self._depth >= MAX_DEPTH
            and not self._depth_warned
            and len(self._points) > self._capacity
        ):
            self._depth_warned = True
            crowded.append(self)

    @staticmethod
    def _warn_crowded(crowded: List[QuadTree]) -> None:
        """Warn about max-depth nodes that just went over capacity."""
        for node in crowded:
            warnings.warn(
                f"Quadtree node {node._bounds} reached maximum depth {MAX_DEPTH} "
                f"and holds more than {node._capacity} points. "
                "Coincident or near-coincident points accumulate without further "
                "subdivision; queries over this region degrade to a linear scan.",
                DepthLimitWarning,
                stacklevel=3,
            )

    def _insert_into_children(self, point: Point, crowded: List[QuadTree]) -> bool:
        """Offer point to children in NW, NE, SW, SE order; first taker wins."""
        assert self._children is not None
        for child in self._children:
            if child._insert(point, crowded):
                return True
        return False

    def _subdivide(self, crowded: List[QuadTree]) -> None:
        """Split this leaf into four children and push its points down."""
        if self._children is not None or self._depth >= MAX_DEPTH:
            return

        depth = self._depth + 1
        self._children = tuple(  # type: ignore[assignment]
            self._child(quadrant, self._capacity, depth)
            for quadrant in self._bounds.subdivide()
        )

        pending = self._points
        self._points = []

        for point in pending:
            if not self._insert_into_children(point, crowded):
                # Unplaceable boundary point: the NW child takes it
                self._children[NW]._store(point, crowded)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def query(self, region: Bounds, found: Optional[List[Point]] = None) -> List[Point]:
        """
        Find every stored point inside a rectangle.

        Traversal visits this node's own points, then NW, NE, SW, SE
        recursively, so the result order is deterministic for a given tree.

        Args:
            region: Query rectangle (edges inclusive)
            found: Optional accumulator to append matches to

        Returns:
            The accumulator (a new list if none was given)

        Raises:
            InvalidArgumentError: If region is None
        """
        validate_not_none(region, "region")
        if found is None:
            found = []
        self._query(region, found)
        return found

    def _query(self, region: Bounds, found: List[Point]) -> None:
        if not self._bounds.intersects(region):
            return

        for point in self._points:
            if region.contains(point):
                found.append(point)

        if self._children is not None:
            for child in self._children:
                child._query(region, found)

    def query_array(self, region: Bounds) -> np.ndarray:
        """Matching points as an (n, 2) float array of x, y coordinates."""
        found = self.query(region)
        return np.array([p.as_tuple() for p in found], dtype=float).reshape(-1, 2)

    # -------------------------------------------------------------------------
    # Aggregates and traversal
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Total points stored in this subtree (recomputed on every call)."""
        count = len(self._points)
        if self._children is not None:
            for child in self._children:
                count += child.size()
        return count

    def is_empty(self) -> bool:
        return self.size() == 0

    def clear(self) -> None:
        """Reset this node to an empty leaf, discarding all descendants."""
        self._points = []
        self._children = None
        self._depth_warned = False

    def get_depth(self) -> int:
        """Maximum node depth reached in this subtree."""
        if self._children is None:
            return self._depth
        return max(child.get_depth() for child in self._children)

    def nodes(self) -> Iterator[QuadTree]:
        """Iterate over every node of this subtree in pre-order (NW, NE, SW, SE)."""
        yield self
        if self._children is not None:
            for child in self._children:
                yield from child.nodes()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Point]:
        for node in self.nodes():
            yield from node._points

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Point) or not self._bounds.contains(point):
            return False
        # Points placed by the NW fallback may lie outside their node's bounds
        return any(point in node._points for node in self.nodes())

    def __repr__(self) -> str:
        return (
            f"QuadTree[bounds={self._bounds}, points={len(self._points)}, "
            f"divided={self.is_divided()}, depth={self._depth}]"
        )

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    @classmethod
    def from_points(
        cls,
        points: Iterable[Optional[PointLike]],
        capacity: int = DEFAULT_CAPACITY,
        padding: float = 1.0,
    ) -> Self:
        """
        Build a quadtree covering a set of points.

        Args:
            points: Point objects, (x, y) pairs, or an (n, 2) array; None
                entries are skipped
            capacity: Points a leaf holds before it subdivides
            padding: Margin added around the points' bounding box

        Returns:
            QuadTree with all points inserted
        """
        padding = validate_padding(padding)
        pts = [to_point(p) for p in points if p is not None]

        if not pts:
            return cls(Bounds(0, 0, 100, 100), capacity=capacity)

        coords = np.array([p.as_tuple() for p in pts], dtype=float)
        min_x, min_y = coords.min(axis=0) - padding
        max_x, max_y = coords.max(axis=0) + padding

        # Degenerate extent (single point or collinear input without padding)
        if max_x <= min_x:
            min_x, max_x = min_x - 0.5, max_x + 0.5
        if max_y <= min_y:
            min_y, max_y = min_y - 0.5, max_y + 0.5

        tree = cls(
            Bounds.from_extent(float(min_x), float(min_y), float(max_x), float(max_y)),
            capacity=capacity,
        )
        tree.insert_many(pts)
        return tree


__all__ = ["DEFAULT_CAPACITY", "MAX_DEPTH", "DepthLimitWarning", "QuadTree"]
