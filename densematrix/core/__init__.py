"""
Core infrastructure for densematrix.

Shared abstractions used by the matrix, kernels and elimination
subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Numeric constants and tolerance tiers
    result: Generic Result[P] envelope
    timing: Section timer
"""

from densematrix.core.result import Result
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
    # Result
    "Result",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "IndexOutOfRangeError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]
