"""
Dense matrix storage.

Public API:
    Matrix: column-major float64 matrix with fuzzy equality
"""

from densematrix.matrix.dense import Matrix

__all__ = [
    "Matrix",
]
