"""
Tests for numeric constants and tolerance tiers.
"""

import pytest

from densematrix.core import tolerances
from densematrix.core.tolerances import EXACT, residual_tolerance


class TestConstants:

    def test_defaults(self):
        assert tolerances.DEFAULT_EPSILON == 1e-12
        assert tolerances.PIVOT_RELATIVE_SCALE == 1e-10
        assert tolerances.PIVOT_FALLBACK_THRESHOLD == 1e-9
        assert tolerances.DEFAULT_BLOCK_SIZE > 0

    def test_exact_tier_is_zero(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0


class TestResidualTolerance:

    def test_grows_with_dimension(self):
        assert residual_tolerance(100) > residual_tolerance(10)

    def test_grows_with_condition(self):
        assert residual_tolerance(10, condition=1e4) > residual_tolerance(10)

    def test_scale_below_one_ignored(self):
        assert residual_tolerance(10, scale=1e-3) == residual_tolerance(10)

    def test_rejects_non_positive(self):
        with pytest.raises(ValueError, match="must be positive"):
            residual_tolerance(0)
