"""Tests for the Point value type."""

import dataclasses

import numpy as np
import pytest

from quadtree_index import Point
from quadtree_index.types import to_point


class TestPoint:
    """Tests for the Point dataclass."""

    def test_point_creation(self):
        """Test basic point creation."""
        point = Point(x=10.0, y=20.0)
        assert point.x == 10.0
        assert point.y == 20.0

    def test_point_is_immutable(self):
        """Assigning a coordinate raises."""
        point = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 5.0  # type: ignore[misc]

    def test_structural_equality(self):
        """Points with equal coordinates are equal and hash alike."""
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(2.0, 1.0)
        assert hash(Point(1.0, 2.0)) == hash(Point(1.0, 2.0))
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(3.0, 4.0)}) == 2

    def test_str(self):
        """String form uses one decimal place."""
        assert str(Point(1.0, 2.24)) == "Point(1.0, 2.2)"

    def test_as_tuple(self):
        assert Point(3.0, 4.0).as_tuple() == (3.0, 4.0)


class TestToPoint:
    """Tests for point coercion."""

    def test_point_passthrough(self):
        """A Point is returned unchanged."""
        point = Point(1.0, 1.0)
        assert to_point(point) is point

    def test_tuple(self):
        assert to_point((1, 2)) == Point(1.0, 2.0)

    def test_numpy_row(self):
        """Rows of an (n, 2) array convert to plain float points."""
        row = np.array([[5.5, 6.5]])[0]
        point = to_point(row)
        assert point == Point(5.5, 6.5)
        assert type(point.x) is float

    def test_wrong_arity_raises(self):
        with pytest.raises(ValueError):
            to_point((1.0, 2.0, 3.0))
