"""
Matrix multiplication kernels.

Two kernels with the same contract, C = A @ B:

    multiply      : reference kernel, column-at-a-time accumulation
    fast_multiply : cache-blocked kernel with optional transposed operand

They agree to floating-point rounding; only the summation grouping
differs. Both read operands through their column-major grids, so a column
of A is a stride-1 read and the output is filled one column block at a
time.
"""

from __future__ import annotations

from densematrix.core.exceptions import DimensionError
from densematrix.core.tolerances import DEFAULT_BLOCK_SIZE
from densematrix.core.validation import check_dimension
from densematrix.matrix._storage import allocate, grid_view
from densematrix.matrix.dense import Matrix


def _check_inner(a_cols: int, b_rows: int, a_shape: tuple[int, int],
                 b_shape: tuple[int, int], operation: str) -> None:
    if a_cols != b_rows:
        raise DimensionError(
            f"{operation}: no consistent dimensions, "
            f"{a_shape[0]}x{a_shape[1]} by {b_shape[0]}x{b_shape[1]}",
            expected=(a_cols, b_shape[1]),
            actual=b_shape,
        )


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product by straightforward accumulation.

    Loop order is (output column j, reduction index p, row i) with the row
    loop vectorized: C[:, j] += A[:, p] * B[p, j]. Every read of A and
    every write of C walks a contiguous column. Each C[i, j] is summed
    over p in increasing order.

    Args:
        a: Left operand (m x k)
        b: Right operand (k x n)

    Returns:
        New m x n matrix

    Raises:
        DimensionError: If a.column_count != b.row_count
    """
    m, k = a.shape
    _, n = b.shape
    _check_inner(k, b.row_count, a.shape, b.shape, 'multiply')

    ag, bg = a._grid(), b._grid()
    data = allocate(m, n)
    out = grid_view(data, m, n)

    for j in range(n):
        column = out[:, j]
        for p in range(k):
            column += ag[:, p] * bg[p, j]

    return Matrix._wrap(data, m, n)


def fast_multiply(
    a: Matrix,
    b: Matrix,
    transpose_b: bool = False,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> Matrix:
    """
    Cache-blocked matrix product.

    The iteration space is tiled into ``block_size`` blocks on all three
    axes. Tiles are visited column block first (jj), then reduction block
    (kk), then row block (ii), so one B tile is reused across a full
    column strip of A and the output tile being accumulated stays resident.

    With ``transpose_b=True`` the kernel computes ``a @ b.T``: B is read
    through swapped strides and no transposed copy is made. For a
    symmetric ``b`` both settings give the same product.

    Args:
        a: Left operand (m x k)
        b: Right operand, (k x n), or (n x k) when ``transpose_b`` is set
        transpose_b: Read ``b`` as its transpose
        block_size: Tile edge length; 32-128 suits most L1/L2 sizes

    Returns:
        New m x n matrix

    Raises:
        DimensionError: If the inner dimensions disagree
        ValidationError: If block_size is not a positive integer
    """
    block = check_dimension(block_size, 'block_size')

    ag = a._grid()
    bg = b._grid().T if transpose_b else b._grid()
    m, k = ag.shape
    k_b, n = bg.shape
    _check_inner(k, k_b, a.shape, b.shape,
                 'fast_multiply (transposed)' if transpose_b else 'fast_multiply')

    data = allocate(m, n)
    out = grid_view(data, m, n)

    for jj in range(0, n, block):
        jmax = min(jj + block, n)
        for kk in range(0, k, block):
            kmax = min(kk + block, k)
            b_tile = bg[kk:kmax, jj:jmax]
            for ii in range(0, m, block):
                imax = min(ii + block, m)
                out[ii:imax, jj:jmax] += ag[ii:imax, kk:kmax] @ b_tile

    return Matrix._wrap(data, m, n)
