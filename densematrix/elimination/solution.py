"""
Elimination solver payloads.

These are the immutable params carried inside ``Result`` by the detailed
solver entry points.
"""

from __future__ import annotations

from dataclasses import dataclass

from densematrix.matrix.dense import Matrix


@dataclass(frozen=True)
class DeterminantParams:
    """
    Parameter payload for the determinant.

    Attributes:
        value: The determinant; 0.0 when elimination found no usable pivot
        sign: +1.0 or -1.0 from the number of row interchanges
        diagonal: Diagonal of the eliminated working matrix, in row order
        singular: True when elimination stopped for lack of a pivot
    """
    value: float
    sign: float
    diagonal: tuple[float, ...]
    singular: bool


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for the inverse.

    Attributes:
        inverse: The inverse matrix (owned by the caller)
        swaps: Row interchanges in the order applied, as (pivot_row, other_row)
        pivots: Diagonal of the working matrix before normalization
    """
    inverse: Matrix
    swaps: tuple[tuple[int, int], ...]
    pivots: tuple[float, ...]
