"""
LaswpDesign: validated inputs for a row interchange.

Bundles the matrix view (buffer, strides, offset, columns), the row range
and the pivot vector, checked so that the kernel cannot address storage
outside the buffer. Follows pypivot Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypivot.core.compute.layout import is_row_major
from pypivot.core.exceptions import ValidationError
from pypivot.core.validation import (
    check_buffer,
    check_integer,
    check_matrix,
    check_nonnegative,
    check_nonzero,
    check_pivot_vector,
    check_positions_in_bounds,
    check_row_addressable,
)
from pypivot.laswp._common import (
    ORDERS,
    PATH_TILED,
    PATH_VECTOR_SWAP,
    count_rows,
    iter_interchanges,
)


def lapack_strides(order: str, N: int, LDA: int) -> tuple[int, int]:
    """
    Matrix strides implied by a storage order and leading dimension.

    Raises:
        ValidationError: If order is unknown, or LDA < max(1, N) for a
            row-major matrix
    """
    if order not in ORDERS:
        raise ValidationError(
            f"order: must be one of {ORDERS}, got {order!r}"
        )
    if order == 'row-major' and LDA < max(1, N):
        raise ValidationError(
            f"LDA: must be >= max(1, N) = {max(1, N)} for a row-major matrix, got {LDA}"
        )
    if order == 'column-major':
        return 1, LDA
    return LDA, 1


def lapack_walk(k1: int, k2: int, incx: int) -> tuple[int, int, int, int]:
    """
    Translate LAPACK (k1, k2, incx) into a kernel walk.

    IPIV is indexed by row: the pivot for row k sits at k1 + (k - k1)*|incx|.
    A negative incx applies the same pivots in reverse, from k2 down to k1.

    Args:
        k1: First row of the range (k1 <= k2)
        k2: Last row of the range
        incx: Pivot stride; its sign picks the direction. Must be non-zero.

    Returns:
        (start_row, end_row, inck, offsetIPIV) for laswp_strided
    """
    if incx > 0:
        return k1, k2, 1, k1
    return k2, k1, -1, k1 + (k1 - k2) * incx


def default_last_row(k1: int, n_pivots: int, incx: int) -> int:
    """
    Last row whose pivot fits in a row-indexed pivot vector of n_pivots.

    Raises:
        ValidationError: If the pivot vector does not reach row k1
    """
    if n_pivots <= k1:
        raise ValidationError(
            f"ipiv: length {n_pivots} has no pivot for row k1={k1}"
        )
    return k1 + (n_pivots - 1 - k1) // abs(incx)


@dataclass(frozen=True)
class LaswpDesign:
    """
    Design for a sequence of row interchanges.

    Holds every argument of the interchange kernel, validated. Immutable
    after construction; the buffer it references is not.

    Construction:
        LaswpDesign.from_strided(N, A, strideA1, strideA2, offsetA,
                                 k1, k2, inck, IPIV, strideIPIV, offsetIPIV)
        LaswpDesign.from_lapack(order, N, A, LDA, k1, k2, IPIV, incx)
        LaswpDesign.from_array(A, ipiv, k1=0, k2=None, incx=1)
    """
    _buffer: NDArray[np.complexfloating[Any, Any]]
    _N: int
    _stride1: int
    _stride2: int
    _offset: int
    _k1: int
    _k2: int
    _inck: int
    _ipiv: NDArray[np.integer[Any]]
    _stride_ipiv: int
    _offset_ipiv: int
    _matrix: NDArray[np.complexfloating[Any, Any]] | None = None

    @classmethod
    def from_strided(
        cls,
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
    ) -> LaswpDesign:
        """
        Build LaswpDesign from raw kernel arguments.

        Parameters match laswp_strided(). Every row the walk touches,
        k and IPIV entries alike, must address storage inside A.

        Raises
        ------
        ValidationError
            Bad scalar argument, empty row range, or IPIV position
            outside the pivot vector.
        DimensionError, LayoutError
            A is not a contiguous 1D complex buffer.
        PivotIndexError
            A row index addresses storage outside A.
        """
        N = check_integer(N, "N")
        check_nonnegative(N, "N")
        A = check_buffer(A, "A")

        strideA1 = check_integer(strideA1, "strideA1")
        check_nonzero(strideA1, "strideA1")
        strideA2 = check_integer(strideA2, "strideA2")
        check_nonzero(strideA2, "strideA2")
        offsetA = check_integer(offsetA, "offsetA")
        check_nonnegative(offsetA, "offsetA")

        k1 = check_integer(k1, "k1")
        check_nonnegative(k1, "k1")
        k2 = check_integer(k2, "k2")
        check_nonnegative(k2, "k2")
        inck = check_integer(inck, "inck")
        check_nonzero(inck, "inck")

        nrows = count_rows(k1, k2, inck)
        if nrows < 1:
            direction = "ascending" if inck > 0 else "descending"
            raise ValidationError(
                f"k1={k1}, k2={k2}: empty row range for {direction} walk (inck={inck})"
            )

        ipiv = check_pivot_vector(IPIV, "IPIV")
        strideIPIV = check_integer(strideIPIV, "strideIPIV")
        offsetIPIV = check_integer(offsetIPIV, "offsetIPIV")
        check_nonnegative(offsetIPIV, "offsetIPIV")
        check_positions_in_bounds(
            offsetIPIV, offsetIPIV + (nrows - 1) * strideIPIV, len(ipiv), "IPIV"
        )

        bound = len(A)
        for i, (k, row) in enumerate(
            iter_interchanges(k1, k2, inck, ipiv, strideIPIV, offsetIPIV)
        ):
            check_row_addressable(k, N, strideA1, strideA2, offsetA, bound, "k")
            check_row_addressable(
                row, N, strideA1, strideA2, offsetA, bound, "IPIV",
                position=offsetIPIV + i * strideIPIV,
            )

        return cls(
            _buffer=A, _N=N,
            _stride1=strideA1, _stride2=strideA2, _offset=offsetA,
            _k1=k1, _k2=k2, _inck=inck,
            _ipiv=ipiv, _stride_ipiv=strideIPIV, _offset_ipiv=offsetIPIV,
        )

    @classmethod
    def from_lapack(
        cls,
        order: str,
        N: int,
        A: NDArray[np.complexfloating[Any, Any]],
        LDA: int,
        k1: int,
        k2: int,
        IPIV: ArrayLike,
        incx: int,
    ) -> LaswpDesign:
        """
        Build LaswpDesign from LAPACK-style arguments.

        Parameters
        ----------
        order : {'row-major', 'column-major'}
            Storage order of A.
        N : int
            Number of columns.
        A : ndarray
            Flat complex buffer, element (0, 0) at position 0.
        LDA : int
            Leading dimension (stride between rows for row-major,
            between columns for column-major).
        k1, k2 : int
            Row range, k1 <= k2.
        IPIV : array-like of int
            Row-indexed pivots.
        incx : int
            Pivot stride; negative applies the pivots in reverse.
            Must be non-zero (a zero incx is a no-op handled by laswp()).
        """
        N = check_integer(N, "N")
        LDA = check_integer(LDA, "LDA")
        strideA1, strideA2 = lapack_strides(order, N, LDA)

        k1 = check_integer(k1, "k1")
        k2 = check_integer(k2, "k2")
        if k1 > k2:
            raise ValidationError(f"k1: must be <= k2, got k1={k1}, k2={k2}")
        incx = check_integer(incx, "incx")
        check_nonzero(incx, "incx")

        start, end, inck, offsetIPIV = lapack_walk(k1, k2, incx)
        return cls.from_strided(
            N, A, strideA1, strideA2, 0, start, end, inck, IPIV, incx, offsetIPIV
        )

    @classmethod
    def from_array(
        cls,
        A: NDArray[np.complexfloating[Any, Any]],
        ipiv: ArrayLike,
        *,
        k1: int = 0,
        k2: int | None = None,
        incx: int = 1,
    ) -> LaswpDesign:
        """
        Build LaswpDesign over a 2D complex matrix.

        Parameters
        ----------
        A : ndarray, shape (m, n)
            C- or Fortran-contiguous complex matrix. The design addresses
            A's own memory, so interchanges are visible through A.
        ipiv : array-like of int
            Row-indexed pivots, e.g. the ``piv`` returned by
            ``scipy.linalg.lu_factor``.
        k1 : int
            First row to interchange.
        k2 : int, optional
            Last row to interchange. Defaults to the last row that has a
            pivot in ipiv.
        incx : int
            Pivot stride; negative applies the pivots in reverse order.
        """
        A = check_matrix(A, "A")
        m, n = A.shape
        ipiv = check_pivot_vector(ipiv, "ipiv")

        k1 = check_integer(k1, "k1")
        check_nonnegative(k1, "k1")
        incx = check_integer(incx, "incx")
        check_nonzero(incx, "incx")
        if k2 is None:
            k2 = default_last_row(k1, len(ipiv), incx)
        k2 = check_integer(k2, "k2")
        if k2 >= m:
            raise ValidationError(f"k2: must be < number of rows {m}, got {k2}")

        if A.flags.c_contiguous:
            order, lda = 'row-major', max(1, n)
        else:
            order, lda = 'column-major', max(1, m)
        buffer = np.ravel(A, order='K')

        design = cls.from_lapack(order, n, buffer, lda, k1, k2, ipiv, incx)
        return replace(design, _matrix=A)

    @property
    def buffer(self) -> NDArray[np.complexfloating[Any, Any]]:
        """Flat buffer the interchanges are applied to."""
        return self._buffer

    @property
    def N(self) -> int:
        """Number of columns."""
        return self._N

    @property
    def strides(self) -> tuple[int, int]:
        """(row stride, column stride) in complex elements."""
        return self._stride1, self._stride2

    @property
    def offset(self) -> int:
        """Buffer position of element (0, 0)."""
        return self._offset

    @property
    def k1(self) -> int:
        return self._k1

    @property
    def k2(self) -> int:
        return self._k2

    @property
    def inck(self) -> int:
        return self._inck

    @property
    def ipiv(self) -> NDArray[np.integer[Any]]:
        """Pivot vector."""
        return self._ipiv

    @property
    def stride_ipiv(self) -> int:
        return self._stride_ipiv

    @property
    def offset_ipiv(self) -> int:
        return self._offset_ipiv

    @property
    def matrix(self) -> NDArray[np.complexfloating[Any, Any]] | None:
        """2D matrix view, or None for designs built from a flat buffer."""
        return self._matrix

    @property
    def nrows(self) -> int:
        """Number of logical rows visited."""
        return count_rows(self._k1, self._k2, self._inck)

    @property
    def layout(self) -> str:
        """'row-major' or 'column-major', as classified from the strides."""
        if is_row_major(self.strides):
            return 'row-major'
        return 'column-major'

    @property
    def path(self) -> str:
        """Kernel execution path selected by the layout."""
        if self.layout == 'row-major':
            return PATH_VECTOR_SWAP
        return PATH_TILED

    def kernel_args(self) -> tuple:
        """Positional arguments for laswp_strided()."""
        return (
            self._N, self._buffer, self._stride1, self._stride2, self._offset,
            self._k1, self._k2, self._inck,
            self._ipiv, self._stride_ipiv, self._offset_ipiv,
        )

    def interchanges(self) -> list[tuple[int, int]]:
        """(k, row) pairs that actually swap, in application order."""
        return [
            (k, row)
            for k, row in iter_interchanges(
                self._k1, self._k2, self._inck,
                self._ipiv, self._stride_ipiv, self._offset_ipiv,
            )
            if row != k
        ]

    def __repr__(self) -> str:
        return (
            f"LaswpDesign(N={self._N}, strides={self.strides}, offset={self._offset}, "
            f"rows={self._k1}->{self._k2}, nrows={self.nrows})"
        )
