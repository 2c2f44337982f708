"""
Shape predicates on a 2D grid.

All comparisons are fuzzy: an entry counts as zero, or two entries as
equal, when the absolute difference is below ``epsilon``. None of these
materialize a transposed copy; they gather only the entries they compare.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def is_symmetric(grid: NDArray[np.floating[Any]], epsilon: float) -> bool:
    """A[i, j] ~ A[j, i] for every i < j. Non-square grids are never symmetric."""
    rows, cols = grid.shape
    if rows != cols:
        return False
    upper = np.triu_indices(rows, k=1)
    return bool(np.all(np.abs(grid[upper] - grid.T[upper]) < epsilon))


def is_upper_trapeze(grid: NDArray[np.floating[Any]], epsilon: float) -> bool:
    """A[i, j] ~ 0 for every i > j (nothing below the main diagonal)."""
    rows, cols = grid.shape
    below = np.tril_indices(rows, k=-1, m=cols)
    return bool(np.all(np.abs(grid[below]) < epsilon))


def is_lower_trapeze(grid: NDArray[np.floating[Any]], epsilon: float) -> bool:
    """A[i, j] ~ 0 for every j > i (nothing above the main diagonal)."""
    rows, cols = grid.shape
    above = np.triu_indices(rows, k=1, m=cols)
    return bool(np.all(np.abs(grid[above]) < epsilon))
