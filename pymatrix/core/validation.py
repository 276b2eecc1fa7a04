"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except integer grids promoted to float64)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Index checks raise IndexError rather than a library error: an out-of-range
element access is a programming fault, not bad input.
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.precision import DEFAULT_DTYPE, SUPPORTED_DTYPES


def check_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Verify a dtype request names a supported floating type.

    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages

    Returns:
        The normalized numpy.dtype

    Raises:
        ValidationError: If the dtype is unknown or not a supported float
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a dtype: {dtype!r}") from e

    if result not in SUPPORTED_DTYPES:
        supported = ", ".join(sorted(str(d) for d in SUPPORTED_DTYPES))
        raise ValidationError(
            f"{name}: unsupported dtype {result}, expected one of {supported}"
        )
    return result


def check_array(
    array: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating numpy array.

    Accepts any array-like and converts to a numpy array that the caller
    owns (always a copy). Rejects inputs that result in object dtype
    (ragged rows, mixed types) or a non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Requested floating dtype, or None to keep floating input
               as is and promote integers to the default dtype

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    if dtype is not None:
        return result.astype(check_dtype(dtype, "dtype"))

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(DEFAULT_DTYPE)

    return result


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            actual=array.shape,
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a dimension parameter is a positive integer.

    Args:
        value: Candidate dimension (row or column count)
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        DimensionError: If value is not an int or is less than 1
    """
    if isinstance(value, bool):
        raise DimensionError(f"{name}: expected a positive integer, got {value!r}")
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise DimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        ) from e
    if dim < 1:
        raise DimensionError(f"{name}: expected a positive integer, got {dim}")
    return dim


def check_shape(
    array: NDArray[np.floating[Any]],
    expected: tuple[int, int],
    name: str,
) -> None:
    """
    Verify a 2D array has exactly the expected (rows, cols) shape.

    Args:
        array: Array to check
        expected: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if array.shape != expected:
        raise DimensionError(
            f"{name}: expected shape {expected[0]}x{expected[1]}, "
            f"got {'x'.join(str(n) for n in array.shape)}",
            expected=expected,
            actual=array.shape,
        )


def check_count(values: tuple[Any, ...], expected: int, name: str) -> None:
    """
    Verify exactly the expected number of values was supplied.

    Args:
        values: Supplied values
        expected: Required count
        name: Parameter name for error messages

    Raises:
        DimensionError: If the count differs
    """
    if len(values) != expected:
        raise DimensionError(
            f"{name}: expected {expected} values, got {len(values)}",
            expected=(expected,),
            actual=(len(values),),
        )


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify an element index lies in [0, size).

    Negative indices are out of range: matrix rows and columns are
    fixed-size and never wrap around.

    Args:
        index: Candidate index
        size: Number of valid positions
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexError: If index is outside [0, size)
    """
    if isinstance(index, bool):
        raise TypeError(f"{name}: index must be an integer, got bool")
    i = operator.index(index)
    if not 0 <= i < size:
        raise IndexError(f"{name}: index {i} out of range for size {size}")
    return i


def check_scalar(value: Any, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a single numeric value destined for matrix storage.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Returns:
        0-dimensional floating numpy array holding the value

    Raises:
        ValidationError: If value is non-numeric or not a single value
    """
    result = check_array(value, name)
    if result.ndim != 0:
        raise ValidationError(
            f"{name}: expected a single scalar, got shape {result.shape}"
        )
    return result
