"""
Column-major buffer layout.

A matrix of ``rows x cols`` is one contiguous float64 buffer of length
``rows * cols``. Element (row, col) lives at ``col * rows + row``, so the
entries of one column are adjacent. Kernels never compute offsets by hand;
they work on the Fortran-ordered 2D view returned by ``grid_view``, which
shares memory with the buffer and follows the same formula.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def offset(row: int, col: int, rows: int) -> int:
    """Flat buffer position of element (row, col) in a matrix with ``rows`` rows."""
    return col * rows + row


def allocate(rows: int, cols: int, fill: float = 0.0) -> NDArray[np.float64]:
    """New buffer for a ``rows x cols`` matrix, every slot set to ``fill``."""
    if fill == 0.0:
        return np.zeros(rows * cols, dtype=np.float64)
    return np.full(rows * cols, fill, dtype=np.float64)


def grid_view(data: NDArray[np.float64], rows: int, cols: int) -> NDArray[np.float64]:
    """
    2D view of a column-major buffer.

    The returned array is Fortran-contiguous and shares memory with
    ``data``: writes through the view land in the buffer.
    """
    # data is always a freshly allocated contiguous 1D buffer, so this is a view
    return data.reshape((rows, cols), order='F')


def buffer_from_grid(array: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """Independent column-major buffer holding the entries of a 2D array."""
    return np.array(array.ravel(order='F'), dtype=np.float64)
