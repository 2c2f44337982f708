"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Each error kind the engine can report maps to one
class here:

    IndexOutOfRangeError  - index outside the declared dimensions
    DimensionError        - operand shapes incompatible for the operation
    NotSquareError        - determinant/inverse requested on a non-square matrix
    SingularMatrixError   - elimination cannot find a usable pivot

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when caller-provided arguments fail validation checks.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index lies outside the matrix dimensions.

    Also an IndexError so that generic Python code handling bad
    subscripts keeps working.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound the index was checked against
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when operand shapes don't match what an operator or kernel
    requires.

    Attributes:
        expected: Expected shape, if applicable
        actual: Actual shape, if applicable
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Raised by determinant and inverse on a rows != columns receiver.
    """
    pass


class NumericalError(DenseMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination cannot find a pivot whose magnitude exceeds
    the pivot threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Column in which no usable pivot was found
        threshold: Pivot magnitude threshold in effect
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column
        self.threshold = threshold
