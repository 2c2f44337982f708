"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 12x12 matrix; elimination needs no interchanges."""
    n = 12
    values = rng.uniform(-1.0, 1.0, (n, n)) + n * np.eye(n)
    return Matrix.from_array(values)


@pytest.fixture
def symmetric_kernel(rng):
    """Symmetric 9x9 matrix built as K + K^T."""
    k = rng.uniform(-1.0, 1.0, (9, 9))
    return Matrix.from_array(k + k.T)


@pytest.fixture
def pivoting_matrix():
    """3x3 matrix with a zero leading pivot; determinant 56."""
    return Matrix.from_array([
        [0.0, 1.0, 2.0],
        [3.0, 0.0, 4.0],
        [5.0, 6.0, 0.0],
    ])
