"""
Fused quadratic form kernel, R^T K R.

Written for stiffness-style transformations where K is symmetric: the
naive expression ``r.transpose() * k * r`` allocates R^T, the product
R^T K and the final result, and runs two full multiplications. This kernel
allocates only the intermediate K R and writes the result into a matrix
the caller already owns.
"""

from __future__ import annotations

from densematrix.core.exceptions import DimensionError, ValidationError
from densematrix.matrix.dense import Matrix


def quadratic_form(
    r: Matrix,
    k: Matrix,
    result: Matrix,
    symmetric: bool | None = None,
) -> Matrix:
    """
    Compute ``r.T @ k @ r`` into ``result``.

    When K is symmetric the product is symmetric too, so only the upper
    triangle is computed, one column at a time, and then mirrored.

    Args:
        r: Transformation matrix (n x c)
        k: Square kernel matrix (n x n)
        result: Output matrix, pre-sized to c x c; overwritten
        symmetric: Whether ``k`` is symmetric. ``None`` checks with
            ``k.is_symmetric()``. Passing True for a non-symmetric ``k``
            yields the mirrored upper triangle of the true product.

    Returns:
        ``result``

    Raises:
        DimensionError: If k is not n x n or result is not c x c
        ValidationError: If result is the same object as r or k
    """
    n, c = r.shape
    if k.shape != (n, n):
        raise DimensionError(
            f"quadratic_form: k must be {n}x{n} to match r ({n}x{c}), "
            f"got {k.row_count}x{k.column_count}",
            expected=(n, n),
            actual=k.shape,
        )
    if result.shape != (c, c):
        raise DimensionError(
            f"quadratic_form: result must be {c}x{c}, "
            f"got {result.row_count}x{result.column_count}",
            expected=(c, c),
            actual=result.shape,
        )
    if result is r or result is k:
        raise ValidationError("quadratic_form: result must not be one of the operands")

    if symmetric is None:
        symmetric = k.is_symmetric()

    rg, kg = r._grid(), k._grid()
    out = result._grid()
    kr = kg @ rg

    if symmetric:
        for j in range(c):
            upper = rg[:, :j + 1].T @ kr[:, j]
            out[:j + 1, j] = upper
            out[j, :j] = upper[:j]
    else:
        out[:, :] = rg.T @ kr

    return result
