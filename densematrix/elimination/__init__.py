"""
Elimination-based solvers.

Public API:
    determinant(m) -> float
    inverse(m) -> Matrix
    determinant_detailed(m) -> Result[DeterminantParams]
    inverse_detailed(m) -> Result[InverseParams]

Example:
    >>> from densematrix import Matrix
    >>> from densematrix.elimination import inverse_detailed
    >>> result = inverse_detailed(Matrix.from_array([[0, 1], [1, 0]]))
    >>> result.params.swaps
    ((0, 1),)
"""

from densematrix.elimination.solution import DeterminantParams, InverseParams
from densematrix.elimination.solvers import (
    determinant,
    determinant_detailed,
    inverse,
    inverse_detailed,
)

__all__ = [
    "determinant",
    "determinant_detailed",
    "inverse",
    "inverse_detailed",
    "DeterminantParams",
    "InverseParams",
]
