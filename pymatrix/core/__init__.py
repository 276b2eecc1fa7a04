"""
Core infrastructure for pymatrix.

This module provides the shared abstractions used by the vector and
matrix subpackages.

Key components:
    exceptions: Exception and warning hierarchy
    precision: Default dtype, supported dtypes, machine epsilon
    scalar: Scalar capability (zero, one, sqrt, dtype resolution)
    validation: Input validators
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    MixedPrecisionWarning,
)
from pymatrix.core.precision import DEFAULT_DTYPE, SUPPORTED_DTYPES
from pymatrix.core.scalar import Scalar

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MixedPrecisionWarning",
    # Configuration
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    # Scalar capability
    "Scalar",
]
