"""
Scalar capability for pymatrix.

Vectors and matrices are generic over their scalar. Anything that behaves
like a floating-point number qualifies: it must support addition,
subtraction, multiplication, negation and ordering, and the library must
be able to produce its zero, its one and its square root. NumPy supplies
the concrete representations (float16 through longdouble) and sqrt.

We use Protocol (structural typing) rather than an ABC so Python floats
and NumPy floating scalars satisfy it without registration.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np

from pymatrix.core.precision import DEFAULT_DTYPE
from pymatrix.core.validation import check_dtype


@runtime_checkable
class Scalar(Protocol):
    """Minimal numeric capability required of vector and matrix elements."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


def resolve_dtype(dtype: Any = None) -> np.dtype:
    """
    Normalize a dtype request to a supported NumPy floating dtype.

    Args:
        dtype: None for the default, or anything np.dtype() accepts

    Returns:
        A supported numpy.dtype

    Raises:
        ValidationError: If the dtype is not a supported floating type
    """
    if dtype is None:
        return np.dtype(DEFAULT_DTYPE)
    return check_dtype(dtype, "dtype")


def zero(dtype: Any = None) -> np.floating:
    """Additive identity of the given scalar representation."""
    return resolve_dtype(dtype).type(0)


def one(dtype: Any = None) -> np.floating:
    """Multiplicative identity of the given scalar representation."""
    return resolve_dtype(dtype).type(1)


def sqrt(value: Scalar) -> Scalar:
    """Square root with native floating semantics (NaN for negatives)."""
    return np.sqrt(value)


def result_dtype(*values: Any) -> np.dtype:
    """
    Dtype a collection of scalars is stored as once placed in a matrix.

    Python floats and ints map to the default dtype; NumPy floating
    scalars keep their own precision.
    """
    dt = np.result_type(*values)
    if not np.issubdtype(dt, np.floating):
        return np.dtype(DEFAULT_DTYPE)
    return dt
