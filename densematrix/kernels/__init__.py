"""
Multiplication kernels.

Submodules:
    multiply: reference and cache-blocked matrix products
    quadratic: fused R^T K R
"""

from densematrix.kernels.multiply import multiply, fast_multiply
from densematrix.kernels.quadratic import quadratic_form

__all__ = [
    "multiply",
    "fast_multiply",
    "quadratic_form",
]
