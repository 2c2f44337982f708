"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting,
clamping or wrapping caller input.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No wrapping of negative indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex input, which the engine does not represent.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, only real values are supported"
        )

    return result.astype(np.float64, copy=False)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a positive integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer or is not positive
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        n = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e
    if n < 1:
        raise ValidationError(f"{name}: must be positive, got {n}")
    return n


def check_index(value: Any, bound: int, axis: str) -> int:
    """
    Verify a zero-based index satisfies ``0 <= value < bound``.

    Args:
        value: Candidate index
        bound: Exclusive upper bound (row or column count)
        axis: 'row' or 'column', used in the error message

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfRangeError: If the index is outside [0, bound)
        ValidationError: If the index is not an integer
    """
    if isinstance(value, bool):
        raise ValidationError(f"{axis} index: expected an integer, got bool")
    try:
        i = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{axis} index: expected an integer, got {type(value).__name__}"
        ) from e
    if i < 0 or i >= bound:
        raise IndexOutOfRangeError(
            f"{axis} index {i} out of range for {axis} count {bound}",
            index=i,
            bound=bound,
            axis=axis,
        )
    return i


def check_length(values: NDArray[np.floating[Any]], expected: int, name: str) -> None:
    """
    Verify a 1D value sequence has exactly ``expected`` entries.

    Raises:
        DimensionError: If the length differs
    """
    if values.ndim != 1:
        raise DimensionError(
            f"{name}: expected a flat sequence, got shape {values.shape}"
        )
    if values.shape[0] != expected:
        raise DimensionError(
            f"{name}: expected {expected} values, got {values.shape[0]}",
            expected=(expected,),
            actual=values.shape,
        )


def check_same_shape(left: Any, right: Any, operation: str) -> None:
    """
    Verify two matrices have identical dimensions.

    Args:
        left, right: Objects exposing a ``shape`` tuple
        operation: Operation name for the error message

    Raises:
        DimensionError: If the shapes differ
    """
    if left.shape != right.shape:
        raise DimensionError(
            f"{operation}: inconsistent matrix sizes {left.shape[0]}x{left.shape[1]} "
            f"and {right.shape[0]}x{right.shape[1]}",
            expected=left.shape,
            actual=right.shape,
        )


def check_square(matrix: Any, operation: str) -> int:
    """
    Verify a matrix is square and return its dimension.

    Raises:
        NotSquareError: If row count differs from column count
    """
    rows, cols = matrix.shape
    if rows != cols:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            expected=(rows, rows),
            actual=(rows, cols),
        )
    return rows
