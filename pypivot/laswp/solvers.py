"""
Solver dispatch for row interchanges.

Provides apply_pivots() as the high-level entry point over 2D arrays,
plus the BLAS/LAPACK-style routines laswp() and laswp_ndarray() over flat
buffers, and pivots_to_permutation().
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypivot.core.exceptions import PivotIndexError, ValidationError
from pypivot.core.validation import (
    check_integer,
    check_matrix,
    check_nonnegative,
    check_nonzero,
    check_pivot_vector,
    check_positions_in_bounds,
)
from pypivot.laswp._common import iter_interchanges
from pypivot.laswp._kernel import laswp_strided
from pypivot.laswp.design import (
    LaswpDesign,
    default_last_row,
    lapack_strides,
    lapack_walk,
)
from pypivot.laswp.solution import LaswpSolution
from pypivot.laswp.backends.cpu import CPULaswpBackend


BackendChoice = Literal['cpu']


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPULaswpBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def laswp_ndarray(
    N: int,
    A: NDArray[np.complexfloating[Any, Any]],
    strideA1: int,
    strideA2: int,
    offsetA: int,
    k1: int,
    k2: int,
    inck: int,
    IPIV: ArrayLike,
    strideIPIV: int,
    offsetIPIV: int,
    *,
    check: bool = True,
) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Perform a series of row interchanges using alternative indexing semantics.

    Parameters
    ----------
    N : int
        Number of columns in A.
    A : ndarray
        Flat complex64/complex128 buffer, modified in place.
    strideA1, strideA2 : int
        Row and column strides (may be negative).
    offsetA : int
        Buffer position of element (0, 0).
    k1, k2 : int
        First and last row to interchange, in walk order.
    inck : int
        Walk direction: > 0 ascending from k1, < 0 descending from k1.
    IPIV : array-like of int
        Pivot indices.
    strideIPIV, offsetIPIV : int
        Stride and starting position within IPIV.
    check : bool
        Validate every argument and every row the walk touches before
        running the kernel. With False the kernel runs unchecked.

    Returns
    -------
    A, permuted in place.
    """
    if not check:
        return laswp_strided(
            N, A, strideA1, strideA2, offsetA, k1, k2, inck,
            IPIV, strideIPIV, offsetIPIV,
        )
    design = LaswpDesign.from_strided(
        N, A, strideA1, strideA2, offsetA, k1, k2, inck,
        IPIV, strideIPIV, offsetIPIV,
    )
    laswp_strided(*design.kernel_args())
    return A


def laswp(
    order: str,
    N: int,
    A: NDArray[np.complexfloating[Any, Any]],
    LDA: int,
    k1: int,
    k2: int,
    IPIV: ArrayLike,
    incx: int,
    *,
    check: bool = True,
) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Perform a series of row interchanges on a matrix (LAPACK ?laswp).

    Parameters
    ----------
    order : {'row-major', 'column-major'}
        Storage order of A.
    N : int
        Number of columns in A.
    A : ndarray
        Flat complex buffer, element (0, 0) at position 0.
    LDA : int
        Leading dimension of A.
    k1, k2 : int
        Row range to interchange, k1 <= k2.
    IPIV : array-like of int
        Row-indexed zero-based pivots: row k is exchanged with
        IPIV[k1 + (k - k1)*|incx|].
    incx : int
        Pivot stride. Negative applies the pivots from k2 back to k1,
        which undoes a forward application. Zero returns A unchanged.
    check : bool
        Validate arguments before running the kernel.

    Returns
    -------
    A, permuted in place.

    Examples
    --------
    >>> A = np.array([1+2j, 3+4j, 5+6j, 7+8j, 9+10j, 11+12j], dtype=np.complex64)
    >>> laswp('row-major', 2, A, 2, 0, 2, [2, 0, 1], 1)
    array([ 5. +6.j,  7. +8.j,  1. +2.j,  3. +4.j,  9.+10.j, 11.+12.j],
          dtype=complex64)
    """
    strideA1, strideA2 = lapack_strides(order, N, LDA)
    if incx == 0:
        return A
    if not check:
        start, end, inck, offsetIPIV = lapack_walk(k1, k2, incx)
        return laswp_strided(
            N, A, strideA1, strideA2, 0, start, end, inck, IPIV, incx, offsetIPIV
        )
    design = LaswpDesign.from_lapack(order, N, A, LDA, k1, k2, IPIV, incx)
    laswp_strided(*design.kernel_args())
    return A


def apply_pivots(
    A: NDArray[np.complexfloating[Any, Any]],
    ipiv: ArrayLike,
    *,
    k1: int = 0,
    k2: int | None = None,
    incx: int = 1,
    inplace: bool = True,
    backend: BackendChoice = 'cpu',
) -> LaswpSolution:
    """
    Apply row-indexed pivots to a 2D complex matrix.

    Parameters
    ----------
    A : ndarray, shape (m, n)
        C- or Fortran-contiguous complex64/complex128 matrix.
    ipiv : array-like of int
        Zero-based pivots, ipiv[k] being the row exchanged with row k
        (LAPACK getrf convention, as returned by scipy.linalg.lu_factor).
    k1 : int
        First row to interchange.
    k2 : int, optional
        Last row to interchange. Defaults to the last row with a pivot.
    incx : int
        Pivot stride; negative applies the pivots in reverse order.
    inplace : bool
        Permute A itself. With False a copy (same memory order) is permuted
        and A is left untouched.
    backend : str
        'cpu'.

    Returns
    -------
    LaswpSolution with the permuted matrix and execution details.
    """
    be = _get_backend(backend)
    if not inplace:
        A = check_matrix(A, "A").copy(order='K')
    design = LaswpDesign.from_array(A, ipiv, k1=k1, k2=k2, incx=incx)
    result = be.solve(design)
    return LaswpSolution(_result=result, _design=design)


def pivots_to_permutation(
    ipiv: ArrayLike,
    m: int,
    *,
    k1: int = 0,
    k2: int | None = None,
    incx: int = 1,
) -> NDArray[np.intp]:
    """
    Row permutation equivalent to a sequence of interchanges.

    Parameters
    ----------
    ipiv : array-like of int
        Row-indexed zero-based pivots, as for apply_pivots().
    m : int
        Number of rows of the matrix the pivots apply to.
    k1, k2, incx
        Row range and pivot stride, as for apply_pivots().

    Returns
    -------
    perm : ndarray of int, shape (m,)
        Applying the pivots to a matrix A gives A[perm].
    """
    ipiv = check_pivot_vector(ipiv, "ipiv")
    m = check_integer(m, "m")
    check_nonnegative(m, "m")
    k1 = check_integer(k1, "k1")
    check_nonnegative(k1, "k1")
    incx = check_integer(incx, "incx")
    check_nonzero(incx, "incx")
    if k2 is None:
        k2 = default_last_row(k1, len(ipiv), incx)
    k2 = check_integer(k2, "k2")
    if k1 > k2:
        raise ValidationError(f"k1: must be <= k2, got k1={k1}, k2={k2}")

    start, end, inck, offset = lapack_walk(k1, k2, incx)
    check_positions_in_bounds(
        offset, offset + (k2 - k1) * incx, len(ipiv), "ipiv"
    )

    perm = np.arange(m, dtype=np.intp)
    for i, (k, row) in enumerate(iter_interchanges(start, end, inck, ipiv, incx, offset)):
        for r, position in ((k, None), (row, offset + i * incx)):
            if r < 0 or r >= m:
                raise PivotIndexError(
                    f"ipiv: row {r} outside matrix with {m} rows",
                    row=r, position=position, bound=m,
                )
        if row != k:
            perm[k], perm[row] = perm[row], perm[k]
    return perm
