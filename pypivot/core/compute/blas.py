"""
Level 1 BLAS-style vector kernels on strided buffers.

Signatures follow the BLAS "ndarray" convention: an element count, then
for each vector its buffer, stride and starting offset. Both vectors may
live in the same buffer.
"""

from typing import Any
from numpy.typing import NDArray

from pypivot.core.compute.strided import StridedVector


def swap(
    N: int,
    x: NDArray[Any],
    stride_x: int,
    offset_x: int,
    y: NDArray[Any],
    stride_y: int,
    offset_y: int,
) -> NDArray[Any]:
    """
    Interchange two strided vectors.

    Equivalent to ?swap (cswap/zswap for complex buffers): for i in
    0..N-1, exchanges x[offset_x + i*stride_x] and y[offset_y + i*stride_y].

    Args:
        N: Number of elements to swap; N <= 0 is a no-op
        x: First buffer
        stride_x: Stride of x
        offset_x: Starting offset into x
        y: Second buffer (may be the same object as x)
        stride_y: Stride of y
        offset_y: Starting offset into y

    Returns:
        y
    """
    if N <= 0:
        return y
    StridedVector(x, stride_x, offset_x, N).swap(
        StridedVector(y, stride_y, offset_y, N)
    )
    return y
