"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Warnings inherit from the built-in warning
categories so they can be filtered with the standard warnings machinery.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Shape incompatibility between multiplication operands is not part of this
hierarchy: incompatible operand types leave the operator undefined and
Python raises TypeError.
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (element grids, dtypes, scalars)
    fail validation checks at construction time.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Raised when an element grid does not have the shape requested by
    a shape class, or when a shape class is requested with invalid
    dimension parameters.

    Attributes:
        expected: Expected shape as (rows, cols), if applicable
        actual: Actual shape as (rows, cols), if applicable
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


class MixedPrecisionWarning(UserWarning):
    """
    Operands of a binary operation have different dtypes.

    The result dtype follows NumPy promotion rules, which usually means
    the lower-precision operand is widened.
    """
    pass
