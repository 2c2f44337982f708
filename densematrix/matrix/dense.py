"""
Dense real matrix.

The Matrix class owns a single column-major float64 buffer (see
``_storage``) and exposes indexed access, elementwise operators, shape
predicates and entry points to the multiplication kernels and the
elimination solvers.

Equality is fuzzy by contract: ``a == b`` holds when the shapes match and
every pair of entries differs by less than ``a.epsilon``. It is not an
exact comparison; compare ``to_array()`` results when bitwise equality is
what you need.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.tolerances import DEFAULT_EPSILON
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_length,
    check_same_shape,
)
from densematrix.matrix import _shape
from densematrix.matrix._storage import (
    allocate,
    buffer_from_grid,
    grid_view,
    offset,
)


class Matrix:
    """
    Two dimensional dense matrix of float64 entries.

    Dimensions are fixed at construction. Every operation that produces a
    matrix returns one with its own buffer; no two matrices share memory.

    Attributes:
        epsilon: Tolerance used by fuzzy equality and the shape predicates.
            Defaults to 1e-12. Not structural; safe to change at any time.

    Examples:
        >>> a = Matrix.from_array([[1, 2], [3, 4]])
        >>> b = Matrix.from_array([[5, 6], [7, 8]])
        >>> (a * b).to_list()
        [[19.0, 22.0], [43.0, 50.0]]
    """

    __slots__ = ('_rows', '_cols', '_data', 'epsilon')

    # mutable with fuzzy equality, so no meaningful hash exists
    __hash__ = None  # type: ignore[assignment]

    # numpy scalars defer to __rmul__ instead of wrapping us in an object array
    __array_ufunc__ = None

    def __init__(self, row_count: int, column_count: int | None = None):
        """
        Zero-filled matrix.

        Args:
            row_count: Number of rows (positive)
            column_count: Number of columns (positive). Defaults to
                ``row_count``, giving a square matrix.
        """
        rows = check_dimension(row_count, 'row_count')
        cols = rows if column_count is None else check_dimension(column_count, 'column_count')
        self._rows = rows
        self._cols = cols
        self._data = allocate(rows, cols)
        self.epsilon = DEFAULT_EPSILON

    @classmethod
    def _wrap(cls, data: NDArray[np.float64], rows: int, cols: int,
              epsilon: float = DEFAULT_EPSILON) -> Matrix:
        """Adopt an already column-major buffer without copying it."""
        mtx = cls.__new__(cls)
        mtx._rows = rows
        mtx._cols = cols
        mtx._data = data
        mtx.epsilon = epsilon
        return mtx

    def _grid(self) -> NDArray[np.float64]:
        """Fortran-ordered 2D view sharing this matrix's buffer."""
        return grid_view(self._data, self._rows, self._cols)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        mtx = cls(n, n)
        mtx._data[::n + 1] = 1.0
        return mtx

    @classmethod
    def zeros(cls, m: int, n: int | None = None) -> Matrix:
        """m x n (or m x m) matrix filled with zeros."""
        return cls(m, n)

    @classmethod
    def ones(cls, m: int, n: int | None = None) -> Matrix:
        """m x n (or m x m) matrix filled with ones."""
        mtx = cls(m, n)
        mtx._data[:] = 1.0
        return mtx

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Matrix holding a copy of a row-major 2D array-like.

        Args:
            array: Nested sequence or numpy array of shape (rows, cols)

        Raises:
            ValidationError: If the input is not real numeric data or has an
                empty dimension
            DimensionError: If the input is not 2D
        """
        values = check_array(array, 'array')
        check_2d(values, 'array')
        rows = check_dimension(values.shape[0], 'array rows')
        cols = check_dimension(values.shape[1], 'array columns')
        return cls._wrap(buffer_from_grid(values), rows, cols)

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def column_count(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> float:
        """Entry at (row, col), zero-based."""
        i = check_index(row, self._rows, 'row')
        j = check_index(col, self._cols, 'column')
        return float(self._data[offset(i, j, self._rows)])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the entry at (row, col), zero-based."""
        i = check_index(row, self._rows, 'row')
        j = check_index(col, self._cols, 'column')
        self._data[offset(i, j, self._rows)] = value

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, column) pair, got {key!r}")
        return key

    def set_row(self, i: int, values: ArrayLike | Matrix) -> None:
        """
        Overwrite row ``i`` with ``values``.

        Raises:
            IndexOutOfRangeError: If ``i`` is not a valid row
            DimensionError: If ``values`` doesn't hold exactly one entry per column
        """
        row = check_index(i, self._rows, 'row')
        flat = self._as_vector(values)
        check_length(flat, self._cols, 'values')
        self._grid()[row, :] = flat

    def set_column(self, j: int, values: ArrayLike | Matrix) -> None:
        """
        Overwrite column ``j`` with ``values``.

        Raises:
            IndexOutOfRangeError: If ``j`` is not a valid column
            DimensionError: If ``values`` doesn't hold exactly one entry per row
        """
        col = check_index(j, self._cols, 'column')
        flat = self._as_vector(values)
        check_length(flat, self._rows, 'values')
        start = col * self._rows
        self._data[start:start + self._rows] = flat

    @staticmethod
    def _as_vector(values: ArrayLike | Matrix) -> NDArray[np.float64]:
        if isinstance(values, Matrix):
            # row and column vectors are laid out identically in the buffer
            return values._data
        return check_array(values, 'values')

    def extract_row(self, i: int) -> Matrix:
        """Copy of row ``i`` as a new 1 x n matrix. The receiver is unchanged."""
        row = check_index(i, self._rows, 'row')
        return Matrix._wrap(self._grid()[row, :].copy(), 1, self._cols)

    def extract_column(self, j: int) -> Matrix:
        """Copy of column ``j`` as a new m x 1 matrix. The receiver is unchanged."""
        col = check_index(j, self._cols, 'column')
        start = col * self._rows
        return Matrix._wrap(self._data[start:start + self._rows].copy(), self._rows, 1)

    def swap_rows(self, i1: int, i2: int) -> None:
        """Exchange two rows in place. No-op when ``i1 == i2``."""
        a = check_index(i1, self._rows, 'row')
        b = check_index(i2, self._rows, 'row')
        if a == b:
            return
        grid = self._grid()
        grid[[a, b], :] = grid[[b, a], :]

    def swap_columns(self, j1: int, j2: int) -> None:
        """Exchange two columns in place. No-op when ``j1 == j2``."""
        a = check_index(j1, self._cols, 'column')
        b = check_index(j2, self._cols, 'column')
        if a == b:
            return
        grid = self._grid()
        grid[:, [a, b]] = grid[:, [b, a]]

    # ------------------------------------------------------------------
    # Copies and conversions
    # ------------------------------------------------------------------

    def clone(self) -> Matrix:
        """Deep copy; the clone keeps this matrix's epsilon."""
        return Matrix._wrap(self._data.copy(), self._rows, self._cols, self.epsilon)

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.clone()

    def transpose(self) -> Matrix:
        """New ``cols x rows`` matrix with result[j, i] = self[i, j]."""
        return Matrix._wrap(buffer_from_grid(self._grid().T), self._cols, self._rows,
                            self.epsilon)

    def to_array(self) -> NDArray[np.float64]:
        """Row-major (C-ordered) 2D numpy copy of the entries."""
        return np.array(self._grid(), order='C')

    def to_list(self) -> list[list[float]]:
        """Entries as a list of rows."""
        return self._grid().tolist()

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum. Raises DimensionError unless shapes are identical."""
        check_same_shape(self, other, 'add')
        return Matrix._wrap(self._data + other._data, self._rows, self._cols)

    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference. Raises DimensionError unless shapes are identical."""
        check_same_shape(self, other, 'subtract')
        return Matrix._wrap(self._data - other._data, self._rows, self._cols)

    def scale(self, factor: float) -> Matrix:
        """Every entry multiplied by ``factor``."""
        return Matrix._wrap(float(factor) * self._data, self._rows, self._cols)

    def negate(self) -> Matrix:
        """Every entry sign-flipped."""
        return Matrix._wrap(-self._data, self._rows, self._cols)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            from densematrix.kernels.multiply import multiply
            return multiply(self, other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from densematrix.kernels.multiply import multiply
        return multiply(self, other)

    # ------------------------------------------------------------------
    # Fuzzy equality
    # ------------------------------------------------------------------

    def is_close(self, other: Matrix, epsilon: float | None = None) -> bool:
        """
        Fuzzy comparison.

        True when both matrices have the same dimensions and every pair of
        corresponding entries satisfies ``|a - b| < epsilon``. Never raises.

        Args:
            other: Matrix to compare against
            epsilon: Tolerance; defaults to this matrix's ``epsilon``
        """
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        tol = self.epsilon if epsilon is None else epsilon
        return bool(np.all(np.abs(self._data - other._data) < tol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.is_close(other)

    # ------------------------------------------------------------------
    # Shape predicates and reductions
    # ------------------------------------------------------------------

    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_symmetric(self) -> bool:
        return _shape.is_symmetric(self._grid(), self.epsilon)

    def is_upper_trapeze(self) -> bool:
        """Entries below the main diagonal are (fuzzy) zero."""
        return _shape.is_upper_trapeze(self._grid(), self.epsilon)

    def is_lower_trapeze(self) -> bool:
        """Entries above the main diagonal are (fuzzy) zero."""
        return _shape.is_lower_trapeze(self._grid(), self.epsilon)

    def is_trapeze(self) -> bool:
        return self.is_upper_trapeze() or self.is_lower_trapeze()

    def is_upper_triangular(self) -> bool:
        return self.is_square() and self.is_upper_trapeze()

    def is_lower_triangular(self) -> bool:
        return self.is_square() and self.is_lower_trapeze()

    def is_triangular(self) -> bool:
        return self.is_upper_triangular() or self.is_lower_triangular()

    def diagonal_product(self) -> float:
        """Product of the main diagonal entries, over min(rows, cols) of them."""
        product = 1.0
        for value in np.diagonal(self._grid()):
            product *= float(value)
        return product

    def max_abs_member(self) -> float:
        """Largest absolute entry; the residual metric for correctness checks."""
        return float(np.max(np.abs(self._data)))

    # ------------------------------------------------------------------
    # Solvers
    # ------------------------------------------------------------------

    def determinant(self) -> float:
        """
        Determinant by Gaussian elimination with threshold pivoting.

        Returns 0.0 when elimination finds no usable pivot.

        Raises:
            NotSquareError: If the matrix is not square
        """
        from densematrix.elimination.solvers import determinant
        return determinant(self)

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination with threshold pivoting.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If no usable pivot can be found
        """
        from densematrix.elimination.solvers import inverse
        return inverse(self)

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols})"
