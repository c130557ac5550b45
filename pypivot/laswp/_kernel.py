"""
Row interchange kernel (?laswp) for strided complex matrices.

Performs no validation. Callers that need bounds checking go through
laswp_ndarray() / laswp() in solvers.py, which build a LaswpDesign first.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pypivot.core.compute.blas import swap
from pypivot.core.compute.layout import is_row_major
from pypivot.core.compute.strided import StridedVector, reinterpret_complex
from pypivot.laswp._common import BLOCK_SIZE, iter_interchanges


def laswp_strided(
    N: int,
    A: NDArray[np.complexfloating[Any, Any]],
    strideA1: int,
    strideA2: int,
    offsetA: int,
    k1: int,
    k2: int,
    inck: int,
    IPIV: Sequence[Any],
    strideIPIV: int,
    offsetIPIV: int,
) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Perform a series of row interchanges on a matrix using pivot indices.

    For each logical step i (0 <= i < nrows) row k = k1 + i*inck is
    exchanged with row IPIV[offsetIPIV + i*strideIPIV], unless the two
    are the same row. Element (r, c) of the matrix lives at
    A[offsetA + r*strideA1 + c*strideA2].

    Row-major matrices are handled with one vector swap per row pair.
    Column-major matrices are processed in tiles of BLOCK_SIZE columns:
    every row pair is swapped within a tile before moving on to the next,
    so a tile's cache lines are reused across all interchanges.

    Args:
        N: Number of columns in A
        A: Flat complex64/complex128 buffer, modified in place
        strideA1: Stride of the first (row) dimension
        strideA2: Stride of the second (column) dimension
        offsetA: Buffer position of element (0, 0)
        k1: First row to interchange
        k2: Last row to interchange
        inck: Direction; > 0 walks k1 up to k2, < 0 walks k1 down to k2
        IPIV: Pivot indices (zero-based)
        strideIPIV: Stride of IPIV
        offsetIPIV: Position in IPIV of the first pivot read

    Returns:
        A, permuted in place

    Example:
        >>> A = np.array([1+2j, 3+4j, 5+6j, 7+8j, 9+10j, 11+12j], dtype=np.complex64)
        >>> laswp_strided(2, A, 2, 1, 0, 0, 2, 1, np.array([2, 0, 1]), 1, 0)
        array([ 5. +6.j,  7. +8.j,  1. +2.j,  3. +4.j,  9.+10.j, 11.+12.j],
              dtype=complex64)
    """
    if is_row_major((strideA1, strideA2)):
        for k, row in iter_interchanges(k1, k2, inck, IPIV, strideIPIV, offsetIPIV):
            if row != k:
                swap(
                    N,
                    A, strideA2, offsetA + k * strideA1,
                    A, strideA2, offsetA + row * strideA1,
                )
        return A

    # Column-major: address (real, imag) scalar pairs directly
    view = reinterpret_complex(A, 0)
    strideA1 *= 2
    strideA2 *= 2
    offsetA *= 2

    n32 = (N // BLOCK_SIZE) * BLOCK_SIZE
    for j in range(0, n32, BLOCK_SIZE):
        _swap_column_range(
            view, strideA1, strideA2, offsetA, j, j + BLOCK_SIZE,
            k1, k2, inck, IPIV, strideIPIV, offsetIPIV,
        )
    if n32 != N:
        _swap_column_range(
            view, strideA1, strideA2, offsetA, n32, N,
            k1, k2, inck, IPIV, strideIPIV, offsetIPIV,
        )
    return A


def _swap_column_range(
    view: NDArray[np.floating[Any]],
    strideA1: int,
    strideA2: int,
    offsetA: int,
    start: int,
    stop: int,
    k1: int,
    k2: int,
    inck: int,
    IPIV: Sequence[Any],
    strideIPIV: int,
    offsetIPIV: int,
) -> None:
    """
    Apply every interchange to columns start..stop-1 of a reinterpreted matrix.

    Strides and offset are in real-scalar units; the real part of an
    element sits at its position and the imaginary part right after.
    """
    count = stop - start
    o = start * strideA2
    for k, row in iter_interchanges(k1, k2, inck, IPIV, strideIPIV, offsetIPIV):
        if row == k:
            continue
        ia1 = offsetA + k * strideA1 + o
        ia2 = offsetA + row * strideA1 + o

        StridedVector(view, strideA2, ia1, count).swap(
            StridedVector(view, strideA2, ia2, count)
        )
        StridedVector(view, strideA2, ia1 + 1, count).swap(
            StridedVector(view, strideA2, ia2 + 1, count)
        )
