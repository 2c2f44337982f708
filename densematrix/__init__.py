"""
densematrix: dense real matrices with elimination solvers.

A column-major float64 matrix type with elementwise operators, fuzzy
equality, a reference and a cache-blocked multiplication kernel, a fused
R^T K R kernel, and Gaussian-elimination determinant and inverse.

Submodules:
    matrix: the Matrix type
    kernels: multiplication kernels
    elimination: determinant and inverse
    core: exceptions, validation, tolerances, result envelope
"""

__version__ = "0.1.0"

from densematrix.matrix import Matrix
from densematrix.kernels import multiply, fast_multiply, quadratic_form
from densematrix.elimination import (
    determinant,
    determinant_detailed,
    inverse,
    inverse_detailed,
)
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    IndexOutOfRangeError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "Matrix",
    "multiply",
    "fast_multiply",
    "quadratic_form",
    "determinant",
    "determinant_detailed",
    "inverse",
    "inverse_detailed",
    "DenseMatrixError",
    "ValidationError",
    "IndexOutOfRangeError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]
