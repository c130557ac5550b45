"""
Input validation utilities for PyPivot.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent copies of matrices (interchanges happen in place)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pypivot.core.compute.strided import real_dtype
from pypivot.core.exceptions import (
    ValidationError,
    DimensionError,
    LayoutError,
    PivotIndexError,
)


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (Python or NumPy) and return it as int.

    Booleans are rejected even though they subclass int.

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_nonnegative(value: int, name: str) -> None:
    """
    Verify an integer is >= 0.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")


def check_nonzero(value: int, name: str) -> None:
    """
    Verify an integer is not zero.

    Raises:
        ValidationError: If value is zero
    """
    if value == 0:
        raise ValidationError(f"{name}: must be non-zero, got {value}")


def check_complex_dtype(array: NDArray[Any], name: str) -> None:
    """
    Verify array holds complex64 or complex128 elements.

    Raises:
        LayoutError: If dtype is anything else
    """
    try:
        real_dtype(array.dtype)
    except LayoutError as e:
        raise LayoutError(f"{name}: {e}", dtype=str(array.dtype)) from e


def check_writeable(array: NDArray[Any], name: str) -> None:
    """
    Verify array can be modified in place.

    Raises:
        ValidationError: If the array is read-only
    """
    if not array.flags.writeable:
        raise ValidationError(f"{name}: array is read-only, cannot interchange rows in place")


def check_buffer(A: Any, name: str) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Validate a flat complex buffer for strided addressing.

    No conversion is performed: the buffer must already be a NumPy array
    so that interchanges are visible to the caller.

    Args:
        A: Candidate buffer
        name: Parameter name for error messages

    Returns:
        A, unchanged

    Raises:
        ValidationError: If A is not an ndarray or is read-only
        DimensionError: If A is not 1D or not contiguous
        LayoutError: If A is not complex64/complex128
    """
    if not isinstance(A, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray, got {type(A).__name__}"
        )
    if A.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D buffer, got {A.ndim}D with shape {A.shape}"
        )
    if not A.flags.c_contiguous:
        raise DimensionError(
            f"{name}: buffer must be contiguous, got element stride "
            f"{A.strides[0] // A.itemsize}"
        )
    check_complex_dtype(A, name)
    check_writeable(A, name)
    return A


def check_matrix(A: Any, name: str) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Validate a 2D complex matrix whose memory is a single flat block.

    Args:
        A: Candidate matrix
        name: Parameter name for error messages

    Returns:
        A, unchanged

    Raises:
        ValidationError: If A is not an ndarray
        DimensionError: If A is not 2D
        LayoutError: If A is not complex or is neither C- nor F-contiguous
    """
    if not isinstance(A, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray, got {type(A).__name__}"
        )
    if A.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {A.ndim}D with shape {A.shape}"
        )
    check_complex_dtype(A, name)
    if not (A.flags.c_contiguous or A.flags.f_contiguous):
        raise LayoutError(
            f"{name}: matrix must be C- or Fortran-contiguous; for strided "
            f"sub-matrices use laswp_ndarray() on the parent buffer",
            dtype=str(A.dtype),
            strides=tuple(s // A.itemsize for s in A.strides),
        )
    return A


def check_pivot_vector(ipiv: ArrayLike, name: str) -> NDArray[np.integer[Any]]:
    """
    Validate and convert a pivot vector to a 1D integer array.

    Floating-point input whose values are all integral is converted with a
    warning; anything else non-integer is rejected.

    Args:
        ipiv: Pivot indices
        name: Parameter name for error messages

    Returns:
        1D numpy array with integer dtype

    Raises:
        ValidationError: If values are non-numeric or non-integral
        DimensionError: If ipiv is not 1D
    """
    try:
        result = np.asarray(ipiv)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {result.ndim}D with shape {result.shape}"
        )

    if result.size == 0 and not np.issubdtype(result.dtype, np.integer):
        return result.astype(np.intp)

    if np.issubdtype(result.dtype, np.integer):
        return result

    if np.issubdtype(result.dtype, np.floating):
        if not np.all(np.isfinite(result)) or not np.all(result == np.round(result)):
            raise ValidationError(f"{name}: pivot indices must be integral values")
        warnings.warn(
            f"{name}: converting {result.dtype} pivot indices to integers",
            stacklevel=3,
        )
        return result.astype(np.intp)

    raise ValidationError(
        f"{name}: non-integer dtype {result.dtype}, expected integer pivot indices"
    )


def check_positions_in_bounds(
    first: int,
    last: int,
    size: int,
    name: str,
) -> None:
    """
    Verify a strided walk from `first` to `last` stays inside [0, size).

    Raises:
        ValidationError: If either endpoint falls outside the array
    """
    for position in (first, last):
        if position < 0 or position >= size:
            raise ValidationError(
                f"{name}: position {position} outside array of length {size}"
            )


def check_row_addressable(
    row: int,
    N: int,
    stride1: int,
    stride2: int,
    offset: int,
    bound: int,
    name: str,
    position: int | None = None,
) -> None:
    """
    Verify that every element of a row lies inside the buffer.

    The row's first and last elements sit at offset + row*stride1 and
    offset + row*stride1 + (N-1)*stride2; elements in between are bracketed
    by those two. With N == 0 no storage is touched and only the sign of
    the row index is checked.

    Args:
        row: Row index
        N: Number of columns
        stride1: Row stride of the matrix
        stride2: Column stride of the matrix
        offset: Matrix base offset
        bound: Buffer length in elements
        name: Description of where the row came from, for error messages
        position: IPIV position the row was read from, if any

    Raises:
        PivotIndexError: If the row is negative or addresses outside the buffer
    """
    if row < 0:
        raise PivotIndexError(
            f"{name}: row index must be non-negative, got {row}",
            row=row, position=position, bound=bound,
        )
    if N == 0:
        return
    start = offset + row * stride1
    end = start + (N - 1) * stride2
    if min(start, end) < 0 or max(start, end) >= bound:
        raise PivotIndexError(
            f"{name}: row {row} spans elements {min(start, end)}..{max(start, end)}, "
            f"outside buffer of length {bound}",
            row=row, position=position, bound=bound,
        )
