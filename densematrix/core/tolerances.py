"""
Numeric constants and tolerance tiers.

Every tunable the engine uses lives here so that callers and the test
suite read the same values. Functions that depend on one of these accept
an override argument rather than reading global state at call time.
"""

from dataclasses import dataclass

import numpy as np


# Fuzzy equality threshold assigned to every new Matrix
DEFAULT_EPSILON: float = 1e-12

# Pivot threshold = PIVOT_RELATIVE_SCALE * min |a_ij| over the operand.
# When that minimum is exactly zero, PIVOT_FALLBACK_THRESHOLD is used instead.
PIVOT_RELATIVE_SCALE: float = 1e-10
PIVOT_FALLBACK_THRESHOLD: float = 1e-9

# Tile edge for the blocked multiplication kernel
DEFAULT_BLOCK_SIZE: int = 64

# min|pivot| / max|pivot| below this is reported as ill-conditioned
ILL_CONDITIONED_PIVOT_RATIO: float = 1e-12

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Results that involve no arithmetic (transpose, clone, swaps)
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Pure permutations of the buffer, bitwise identical',
)

# Two kernels computing the same product with different accumulation order
KERNEL_AGREEMENT = ToleranceTier(
    rtol=1e-12,
    atol=1e-10,
    name='kernel_agreement',
    description='Same product, different summation order',
)

# Elimination residuals on well-conditioned input
ELIMINATION = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='elimination',
    description='Gaussian elimination on well-conditioned input',
)


def residual_tolerance(n: int, scale: float = 1.0, condition: float = 1.0) -> float:
    """
    Absolute tolerance for a residual such as ``A @ inv(A) - I``.

    Grows linearly with the dimension, with the magnitude of the entries
    and with the condition number, which is how rounding error in
    elimination accumulates.

    Args:
        n: Matrix dimension
        scale: Typical magnitude of the matrix entries
        condition: Condition number estimate, 1.0 if unknown

    Returns:
        Absolute tolerance
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    return 1e3 * n * EPSILON_64 * max(scale, 1.0) * max(condition, 1.0)
