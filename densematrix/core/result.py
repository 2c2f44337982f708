"""
Generic result container for detailed solver output.

The plain solver entry points (``Matrix.determinant()``, ``Matrix.inverse()``)
return bare values. Their ``*_detailed`` counterparts wrap the value in this
envelope together with the diagnostics the elimination produced, so callers
can inspect pivots, row interchanges and timings without a second pass.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivot threshold, swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result can't drift from what was computed
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for elimination solvers.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (determinant value, inverse matrix, ...)
        info: Structured metadata (method, pivot threshold, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        solver_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DeterminantParams(value=4.0, sign=1.0, diagonal=(2.0, 2.0), singular=False),
        ...     info={'method': 'gaussian_elimination', 'swaps': ()},
        ...     timing={'total_seconds': 0.0001},
        ...     solver_name='determinant',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    solver_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
