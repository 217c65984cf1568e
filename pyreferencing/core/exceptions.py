"""
Exception hierarchy for PyReferencing.

All exceptions inherit from ReferencingError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class ReferencingError(Exception):
    """Base exception for all PyReferencing errors."""
    pass


class ValidationError(ReferencingError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or envelope dimensions are incorrect or inconsistent.

    Raised when shapes don't match expected dimensions, for example when
    multiplying matrices whose inner dimensions differ.
    """
    pass


class MismatchedDimensionError(DimensionError):
    """
    An argument does not have the dimension it was expected to have.

    Attributes:
        argument_name: Name of the offending argument
        dimension: Dimension of the argument as given
        expected: Dimension the argument should have had
    """

    def __init__(
        self,
        message: str,
        argument_name: str | None = None,
        dimension: int | None = None,
        expected: int | None = None,
    ):
        super().__init__(message)
        self.argument_name = argument_name
        self.dimension = dimension
        self.expected = expected


class AxisMappingError(ValidationError):
    """
    Source axes cannot be mapped onto destination axes.

    Base class for the axis-matching failures of the axis mapping builder.
    """
    pass


class ColinearAxisError(AxisMappingError):
    """
    Two source axes share the absolute direction of one destination axis.

    Attributes:
        source_axis: The second source direction found for the destination
        target_axis: The destination direction being mapped
    """

    def __init__(
        self,
        message: str,
        source_axis=None,
        target_axis=None,
    ):
        super().__init__(message)
        self.source_axis = source_axis
        self.target_axis = target_axis


class NoSourceAxisError(AxisMappingError):
    """
    A destination axis has no source axis with the same absolute direction.

    Attributes:
        target_axis: The destination direction that could not be mapped
    """

    def __init__(self, message: str, target_axis=None):
        super().__init__(message)
        self.target_axis = target_axis


class ContentFormatError(ValidationError):
    """
    Text input could not be parsed as a matrix.

    Attributes:
        line_number: 1-based line number of the offending line, if known
    """

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number


class IllegalStateError(ReferencingError):
    """
    The object is not in a state that allows the requested conversion.

    Raised, for example, when a matrix that is not 3x3 or not affine is
    converted to a two-dimensional affine transform.
    """
    pass


class NumericalError(ReferencingError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or cannot be inverted.

    Raised when an operation requires invertibility but the matrix is
    singular, non-square, or the inversion produced non-finite values.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        shape: (rows, cols) of the matrix, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.shape = shape
