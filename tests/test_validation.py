"""Tests for input validation module."""

import numpy as np
import pytest

from quadtree_index.validation import (
    InvalidArgumentError,
    InvalidGeometryError,
    ValidationError,
    validate_capacity,
    validate_dimensions,
    validate_not_none,
    validate_origin,
    validate_padding,
)


class TestDimensionValidation:
    """Tests for rectangle dimension validation."""

    def test_valid_dimensions(self):
        """Valid dimensions return a float tuple."""
        w, h = validate_dimensions(800, 600)
        assert w == 800.0
        assert h == 600.0
        assert isinstance(w, float)

    def test_negative_width_raises(self):
        """Negative width raises InvalidGeometryError."""
        with pytest.raises(InvalidGeometryError, match="width must be positive"):
            validate_dimensions(-100, 600)

    def test_zero_height_raises(self):
        """Zero height raises InvalidGeometryError."""
        with pytest.raises(InvalidGeometryError, match="height must be positive"):
            validate_dimensions(800, 0)

    def test_infinite_width_raises(self):
        with pytest.raises(InvalidGeometryError):
            validate_dimensions(float("inf"), 1)

    def test_nan_origin_raises(self):
        with pytest.raises(InvalidGeometryError, match="origin must be finite"):
            validate_origin(float("nan"), 0)


class TestCapacityValidation:
    """Tests for node capacity validation."""

    def test_valid(self):
        assert validate_capacity(1) == 1
        assert validate_capacity(64) == 64

    def test_numpy_integer(self):
        """NumPy integers are accepted and returned as int."""
        value = validate_capacity(np.int64(8))
        assert value == 8
        assert type(value) is int

    def test_zero_raises(self):
        with pytest.raises(InvalidArgumentError, match="capacity must be >= 1"):
            validate_capacity(0)

    @pytest.mark.parametrize("capacity", [2.0, "4", None, True])
    def test_non_integer_raises(self, capacity):
        with pytest.raises(InvalidArgumentError, match="capacity must be an integer"):
            validate_capacity(capacity)


class TestMiscValidation:
    """Tests for argument presence and padding validation."""

    def test_not_none(self):
        value = object()
        assert validate_not_none(value, "value") is value

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError, match="bounds cannot be None"):
            validate_not_none(None, "bounds")

    def test_padding(self):
        assert validate_padding(0) == 0.0
        assert validate_padding(2) == 2.0

    def test_negative_padding_raises(self):
        with pytest.raises(InvalidArgumentError, match="padding must be >= 0"):
            validate_padding(-0.5)


class TestExceptionHierarchy:
    """Tests that exception classes are properly related."""

    def test_geometry_error_is_validation_error(self):
        assert issubclass(InvalidGeometryError, ValidationError)

    def test_argument_error_is_validation_error(self):
        assert issubclass(InvalidArgumentError, ValidationError)

    def test_validation_error_is_value_error(self):
        assert issubclass(ValidationError, ValueError)
