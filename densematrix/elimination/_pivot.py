"""
Pivot threshold and pivot search shared by the elimination solvers.

Pivoting is threshold-based: a diagonal entry is kept as the pivot unless
its magnitude falls below the threshold, and only then is a replacement
row searched for. The threshold is relative to the smallest entry of the
operand so that uniformly scaled matrices behave identically.
"""

from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from densematrix.core.tolerances import PIVOT_FALLBACK_THRESHOLD, PIVOT_RELATIVE_SCALE


def pivot_threshold(
    grid: NDArray[np.floating[Any]],
    scale: float = PIVOT_RELATIVE_SCALE,
    fallback: float = PIVOT_FALLBACK_THRESHOLD,
) -> float:
    """
    Magnitude below which a pivot is treated as zero.

    ``scale * min |a_ij|``, or ``fallback`` when the smallest magnitude is
    exactly zero.
    """
    smallest = float(np.min(np.abs(grid)))
    if smallest == 0.0:
        return fallback
    return scale * smallest


def find_pivot_row(
    column: NDArray[np.floating[Any]],
    candidates: Iterable[int],
    threshold: float,
) -> int | None:
    """
    First candidate row whose entry in ``column`` exceeds ``threshold``.

    Args:
        column: The pivot column of the working matrix
        candidates: Row indices in search order
        threshold: Pivot magnitude threshold

    Returns:
        Row index, or None if no candidate qualifies
    """
    rows = np.fromiter(candidates, dtype=np.intp)
    if rows.size == 0:
        return None
    hits = np.flatnonzero(np.abs(column[rows]) > threshold)
    if hits.size == 0:
        return None
    return int(rows[hits[0]])
