"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_2d: dimensionality
    - check_dimension: positive integer dimensions
    - check_index: zero-based bounds, no wrapping
    - check_length: flat value sequences
    - check_same_shape / check_square: operand shapes
"""

import numpy as np
import pytest

from densematrix import Matrix
from densematrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_length,
    check_same_shape,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-real data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.5, 2.5], dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


class TestCheck2D:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "X")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_3d_rejected(self):
        with pytest.raises(DimensionError, match="3D"):
            check_2d(np.zeros((2, 2, 2)), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_dimension / check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_positive_int(self):
        assert check_dimension(3, "rows") == 3

    def test_numpy_int(self):
        assert check_dimension(np.int64(4), "rows") == 4

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            check_dimension(value, "rows")

    @pytest.mark.parametrize("value", [2.0, "3", None, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_dimension(value, "rows")


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(0, 3, "row") == 0
        assert check_index(2, 3, "row") == 2

    def test_upper_bound_exclusive(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(3, 3, "row")
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == "row"

    def test_negative_not_wrapped(self):
        with pytest.raises(IndexOutOfRangeError, match="column index -1"):
            check_index(-1, 3, "column")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_index(1.0, 3, "row")


# ═══════════════════════════════════════════════════════════════════════
# Shapes
# ═══════════════════════════════════════════════════════════════════════


class TestCheckLength:

    def test_exact_length_passes(self):
        check_length(np.zeros(4), 4, "values")

    def test_wrong_length(self):
        with pytest.raises(DimensionError, match="expected 3 values, got 2"):
            check_length(np.zeros(2), 3, "values")

    def test_nested_rejected(self):
        with pytest.raises(DimensionError, match="flat sequence"):
            check_length(np.zeros((1, 3)), 3, "values")


class TestCheckShapes:

    def test_same_shape_passes(self):
        check_same_shape(Matrix(2, 3), Matrix(2, 3), "add")

    def test_different_shape(self):
        with pytest.raises(DimensionError, match="add: inconsistent matrix sizes 2x3 and 3x2"):
            check_same_shape(Matrix(2, 3), Matrix(3, 2), "add")

    def test_square_returns_dimension(self):
        assert check_square(Matrix(4), "inverse") == 4

    def test_not_square(self):
        with pytest.raises(NotSquareError, match="inverse: requires a square matrix, got 2x3"):
            check_square(Matrix(2, 3), "inverse")
