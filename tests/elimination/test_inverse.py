"""
Tests for the Gauss-Jordan inverse.

Validates:
    - Residuals A @ inv(A) - I and inv(A) @ A - I
    - Agreement with scipy.linalg.inv
    - Row interchanges in both buffers
    - SingularMatrixError diagnostics
    - Receiver is never mutated, including on failure
"""

import warnings

import numpy as np
import pytest
from scipy import linalg

from densematrix import Matrix, inverse, inverse_detailed
from densematrix.core.exceptions import NotSquareError, SingularMatrixError
from densematrix.core.tolerances import ELIMINATION, residual_tolerance


def _residual(a, b):
    n = a.row_count
    return max(
        (a * b - Matrix.identity(n)).max_abs_member(),
        (b * a - Matrix.identity(n)).max_abs_member(),
    )


# ═══════════════════════════════════════════════════════════════════════
# Values
# ═══════════════════════════════════════════════════════════════════════


class TestInverseValues:

    def test_scaled_identity(self):
        inv = Matrix.from_array([[2, 0], [0, 2]]).inverse()
        assert inv.to_list() == [[0.5, 0.0], [0.0, 0.5]]

    def test_identity(self):
        assert np.array_equal(Matrix.identity(6).inverse().to_array(), np.eye(6))

    def test_one_by_one(self):
        assert Matrix.from_array([[4.0]]).inverse()[0, 0] == 0.25

    def test_two_by_two(self):
        inv = Matrix.from_array([[1, 2], [3, 4]]).inverse()
        np.testing.assert_allclose(inv.to_array(), [[-2.0, 1.0], [1.5, -0.5]],
                                   rtol=1e-14, atol=1e-14)

    def test_residual_well_conditioned(self, well_conditioned):
        inv = inverse(well_conditioned)
        assert _residual(well_conditioned, inv) < residual_tolerance(12)

    def test_residual_uniform(self, rng):
        values = rng.uniform(0.0, 100.0, (10, 10))
        a = Matrix.from_array(values)
        tol = residual_tolerance(10, scale=100.0, condition=np.linalg.cond(values))
        assert _residual(a, a.inverse()) < tol

    def test_matches_scipy(self, well_conditioned):
        np.testing.assert_allclose(
            well_conditioned.inverse().to_array(),
            linalg.inv(well_conditioned.to_array()),
            rtol=ELIMINATION.rtol, atol=ELIMINATION.atol,
        )

    def test_inverse_of_inverse(self, well_conditioned):
        twice = well_conditioned.inverse().inverse()
        np.testing.assert_allclose(twice.to_array(), well_conditioned.to_array(),
                                   rtol=ELIMINATION.rtol, atol=ELIMINATION.atol)


# ═══════════════════════════════════════════════════════════════════════
# Pivoting
# ═══════════════════════════════════════════════════════════════════════


class TestInversePivoting:

    def test_permutation_matrix(self):
        p = Matrix.from_array([[0, 1], [1, 0]])
        result = inverse_detailed(p)
        assert result.params.inverse.to_list() == [[0.0, 1.0], [1.0, 0.0]]
        assert result.params.swaps == ((0, 1),)

    def test_zero_leading_pivot(self, pivoting_matrix):
        result = inverse_detailed(pivoting_matrix)
        np.testing.assert_allclose(result.params.inverse.to_array(),
                                   linalg.inv(pivoting_matrix.to_array()),
                                   rtol=1e-12, atol=1e-14)
        assert result.params.swaps == ((0, 1),)

    def test_no_swaps_when_pivots_usable(self, well_conditioned):
        assert inverse_detailed(well_conditioned).params.swaps == ()

    def test_zero_diagonal_everywhere(self):
        m = Matrix.from_array([[0, 2, 1], [1, 0, 3], [4, 1, 0]])
        inv = m.inverse()
        assert _residual(m, inv) < 1e-13


# ═══════════════════════════════════════════════════════════════════════
# Singular input
# ═══════════════════════════════════════════════════════════════════════


class TestInverseSingular:

    def test_zero_first_column(self):
        m = Matrix.from_array([[0, 1], [0, 2]])
        with pytest.raises(SingularMatrixError) as exc_info:
            m.inverse()
        assert exc_info.value.pivot_column == 0
        assert exc_info.value.threshold == 1e-9

    def test_dependent_rows_fail_in_backward_pass(self):
        m = Matrix.from_array([[1, 2], [2, 4]])
        with pytest.raises(SingularMatrixError, match="backward pass") as exc_info:
            m.inverse()
        assert exc_info.value.pivot_column == 1

    def test_one_by_one_zero(self):
        with pytest.raises(SingularMatrixError):
            Matrix.zeros(1).inverse()

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            Matrix.zeros(3).inverse()

    def test_receiver_unchanged_on_failure(self):
        m = Matrix.from_array([[1, 2, 3], [2, 4, 6], [0, 1, 1]])
        before = m.to_array()
        with pytest.raises(SingularMatrixError):
            m.inverse()
        assert np.array_equal(m.to_array(), before)


# ═══════════════════════════════════════════════════════════════════════
# Contract
# ═══════════════════════════════════════════════════════════════════════


class TestInverseContract:

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix(3, 2).inverse()

    def test_receiver_unchanged(self, pivoting_matrix):
        before = pivoting_matrix.to_array()
        pivoting_matrix.inverse()
        assert np.array_equal(pivoting_matrix.to_array(), before)

    def test_detailed_result(self, well_conditioned):
        result = inverse_detailed(well_conditioned)
        assert result.solver_name == 'inverse'
        assert result.info['method'] == 'gauss_jordan'
        assert 0.0 < result.info['pivot_ratio'] <= 1.0
        assert len(result.params.pivots) == 12
        assert set(result.timing) >= {'total_seconds', 'forward_pass',
                                      'backward_pass', 'normalization'}
        assert result.warnings == ()

    def test_ill_conditioned_warning(self):
        m = Matrix.from_array([[1.0, 1e-14], [1e-14, 1e-14]])
        result = inverse_detailed(m)
        assert result.has_warning("ill-conditioned")
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            m.inverse()

    def test_no_warning_when_well_conditioned(self, well_conditioned):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            well_conditioned.inverse()
