"""
Elimination solvers: determinant and inverse.

Public API:
    determinant()          Gaussian elimination, returns a float
    determinant_detailed() same, wrapped in Result[DeterminantParams]
    inverse()              Gauss-Jordan elimination, returns a Matrix
    inverse_detailed()     same, wrapped in Result[InverseParams]

Both algorithms work on a private clone of the operand; the caller's
matrix is never mutated, including when an error is raised. Pivoting
follows the threshold policy in ``_pivot``: a pivot is only replaced when
its magnitude falls below the threshold, by the first qualifying row in
search order.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from densematrix.core.exceptions import SingularMatrixError
from densematrix.core.result import Result
from densematrix.core.timing import Timer
from densematrix.core.tolerances import ILL_CONDITIONED_PIVOT_RATIO
from densematrix.core.validation import check_square
from densematrix.elimination._pivot import find_pivot_row, pivot_threshold
from densematrix.elimination.solution import DeterminantParams, InverseParams
from densematrix.matrix.dense import Matrix


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


def determinant_detailed(matrix: Matrix) -> Result[DeterminantParams]:
    """
    Determinant by Gaussian elimination with threshold pivoting.

    Algorithm:
        1. For each column i < n-1, if |w[i,i]| is below the pivot
           threshold, swap in the first row below with |w[k,i]| above it
           and flip the sign. If there is none the matrix is singular and
           the determinant is 0.0.
        2. Eliminate the entries below the pivot.
        3. Multiply the diagonal, largest magnitude first, into the sign.

    Args:
        matrix: Square matrix; not modified

    Returns:
        Result containing DeterminantParams

    Raises:
        NotSquareError: If the matrix is not square
    """
    n = check_square(matrix, 'determinant')

    timer = Timer()
    timer.start()

    work = matrix.clone()
    w = work._grid()
    threshold = pivot_threshold(w)

    sign = 1.0
    singular = False
    swaps: list[tuple[int, int]] = []

    with timer.section('forward_elimination'):
        for i in range(n - 1):
            if abs(w[i, i]) < threshold:
                row = find_pivot_row(w[:, i], range(i + 1, n), threshold)
                if row is None:
                    singular = True
                    break
                work.swap_rows(row, i)
                swaps.append((i, row))
                sign = -sign

            factors = w[i + 1:, i] / w[i, i]
            w[i + 1:, i:] -= np.outer(factors, w[i, i:])

    with timer.section('diagonal_product'):
        diagonal = tuple(float(d) for d in np.diagonal(w))
        if singular:
            value = 0.0
        else:
            value = sign
            for d in sorted(diagonal, key=abs, reverse=True):
                value *= d
            if value == 0.0:
                # normalize -0.0
                value = 0.0

    timer.stop()

    params = DeterminantParams(
        value=value,
        sign=sign,
        diagonal=diagonal,
        singular=singular,
    )

    info: dict[str, Any] = {
        'method': 'gaussian_elimination',
        'pivot_threshold': threshold,
        'swaps': tuple(swaps),
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        solver_name='determinant',
        warnings=(),
    )


def determinant(matrix: Matrix) -> float:
    """
    Determinant of a square matrix.

    Returns 0.0 when elimination finds no usable pivot. See
    ``determinant_detailed`` for the algorithm.

    Raises:
        NotSquareError: If the matrix is not square
    """
    return determinant_detailed(matrix).params.value


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


def _rows_clear_left_of(
    w: NDArray[np.float64], j: int, threshold: float
) -> Iterator[int]:
    """
    Rows above j, nearest first, whose entries left of column j are all
    below the threshold.

    Only such rows can be swapped into row j during the backward pass
    without undoing the forward elimination.
    """
    for k in range(j - 1, -1, -1):
        if not np.any(np.abs(w[k, :j]) > threshold):
            yield k


def inverse_detailed(matrix: Matrix) -> Result[InverseParams]:
    """
    Inverse by Gauss-Jordan elimination with threshold pivoting.

    A working clone and an identity matrix are transformed in lockstep:
    every row operation and row interchange applied to one is applied to
    the other. When the working clone has been reduced to the identity,
    the second buffer holds the inverse.

    Algorithm:
        1. Forward pass over columns 0..n-2: ensure a usable pivot
           (searching rows below), then eliminate the rows below it.
        2. Backward pass over columns n-1..1: ensure a usable pivot
           (searching rows above), then eliminate the rows above it.
        3. Divide each row of both buffers by its diagonal entry.

    The pivot threshold is computed once from the operand.

    Args:
        matrix: Square matrix; not modified

    Returns:
        Result containing InverseParams

    Raises:
        NotSquareError: If the matrix is not square
        SingularMatrixError: If a pivot column has no entry above the threshold
    """
    n = check_square(matrix, 'inverse')

    timer = Timer()
    timer.start()

    work = matrix.clone()
    inv = Matrix.identity(n)
    w, e = work._grid(), inv._grid()
    threshold = pivot_threshold(w)
    swaps: list[tuple[int, int]] = []

    def ensure_pivot(j: int, candidates: Iterator[int] | range, stage: str) -> None:
        if abs(w[j, j]) >= threshold:
            return
        row = find_pivot_row(w[:, j], candidates, threshold)
        if row is None:
            raise SingularMatrixError(
                f"Matrix is singular: no pivot above {threshold:.3e} in column {j} "
                f"during {stage}",
                matrix_name='matrix',
                pivot_column=j,
                threshold=threshold,
            )
        work.swap_rows(row, j)
        inv.swap_rows(row, j)
        swaps.append((j, row))

    with timer.section('forward_pass'):
        for j in range(n - 1):
            ensure_pivot(j, range(j + 1, n), 'forward pass')
            factors = w[j + 1:, j] / w[j, j]
            w[j + 1:, :] -= np.outer(factors, w[j, :])
            e[j + 1:, :] -= np.outer(factors, e[j, :])

    with timer.section('backward_pass'):
        for j in range(n - 1, 0, -1):
            ensure_pivot(j, _rows_clear_left_of(w, j, threshold), 'backward pass')
            factors = w[:j, j] / w[j, j]
            w[:j, :] -= np.outer(factors, w[j, :])
            e[:j, :] -= np.outer(factors, e[j, :])

    with timer.section('normalization'):
        pivots = np.diagonal(w).copy()
        weakest = int(np.argmin(np.abs(pivots)))
        if abs(pivots[weakest]) < threshold:
            raise SingularMatrixError(
                f"Matrix is singular: pivot {pivots[weakest]:.3e} in column {weakest} "
                f"is below {threshold:.3e}",
                matrix_name='matrix',
                pivot_column=weakest,
                threshold=threshold,
            )
        w /= pivots[:, np.newaxis]
        e /= pivots[:, np.newaxis]

    timer.stop()

    magnitudes = np.abs(pivots)
    pivot_ratio = float(magnitudes.min() / magnitudes.max())

    result_warnings: list[str] = []
    if pivot_ratio < ILL_CONDITIONED_PIVOT_RATIO:
        result_warnings.append(
            f"Matrix is ill-conditioned: pivot ratio {pivot_ratio:.3e} is below "
            f"{ILL_CONDITIONED_PIVOT_RATIO:.0e}, inverse may be inaccurate"
        )

    params = InverseParams(
        inverse=inv,
        swaps=tuple(swaps),
        pivots=tuple(float(p) for p in pivots),
    )

    info: dict[str, Any] = {
        'method': 'gauss_jordan',
        'pivot_threshold': threshold,
        'pivot_ratio': pivot_ratio,
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        solver_name='inverse',
        warnings=tuple(result_warnings),
    )


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse of a square matrix.

    Emits a RuntimeWarning when the elimination pivots indicate the
    result may be inaccurate. See ``inverse_detailed`` for the algorithm.

    Raises:
        NotSquareError: If the matrix is not square
        SingularMatrixError: If no usable pivot can be found
    """
    result = inverse_detailed(matrix)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return result.params.inverse
