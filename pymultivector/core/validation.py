"""
Input validation utilities for PyMultiVector.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating
or overrunning a buffer.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymultivector.core.exceptions import (
    ValidationError,
    DimensionError,
    SizeMismatchError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_length(array, expected: int, name: str) -> None:
    """
    Verify a 1D buffer holds exactly the expected number of entries.

    Works on anything with len(); NumPy arrays, lists and multivectors
    all qualify.

    Args:
        array: Sequence to check
        expected: Required length
        name: Parameter name for error messages

    Raises:
        SizeMismatchError: If the length differs from expected
    """
    actual = len(array)
    if actual != expected:
        raise SizeMismatchError(
            f"{name}: expected length {expected}, got {actual}",
            name=name,
            expected=expected,
            actual=actual,
        )


def check_output_buffer(out, expected: int, name: str = "out") -> None:
    """
    Verify a caller-allocated output buffer can be filled in place.

    The buffer must be a writeable, 1D, float64 NumPy array of exactly
    `expected` entries. Anything else would force a silent copy, and the
    caller would never see the result.

    Raises:
        ValidationError: If out is not a writeable float64 ndarray
        DimensionError: If out is not 1D
        SizeMismatchError: If out has the wrong length
    """
    if not isinstance(out, np.ndarray):
        raise ValidationError(
            f"{name}: expected a numpy.ndarray buffer, got {type(out).__name__}"
        )
    if out.dtype != np.float64:
        raise ValidationError(f"{name}: expected float64 buffer, got {out.dtype}")
    if not out.flags.writeable:
        raise ValidationError(f"{name}: buffer is read-only")
    check_1d(out, name)
    check_length(out, expected, name)


def check_index(index, size: int, name: str = "index") -> int:
    """
    Verify a slot index lies in [0, size).

    Negative indices are rejected rather than wrapped.

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfRangeError: If index is not an integer in range
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfRangeError(
            f"{name}: expected an integer, got {type(index).__name__}",
            index=None,
            size=size,
        )
    index = int(index)
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(
            f"{name}: {index} out of range for multivector with {size} vectors",
            index=index,
            size=size,
        )
    return index


def check_nonnegative_count(count, name: str) -> int:
    """
    Verify a vector count is a non-negative integer.

    Raises:
        ValidationError: If count is negative or not an integer
    """
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(count).__name__}")
    count = int(count)
    if count < 0:
        raise ValidationError(f"{name}: must be non-negative, got {count}")
    return count
