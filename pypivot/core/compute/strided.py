"""
Strided views over flat NumPy buffers.

Matrices are addressed as (buffer, stride, offset) triples rather than
NumPy shapes so that sub-matrices, reversed traversals and transposed
layouts can all be described without copying. This module provides the
address arithmetic and the complex-as-real reinterpretation used by the
interchange kernels.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pypivot.core.exceptions import LayoutError


# Complex element type -> real scalar type of its components
_REAL_DTYPES = {
    np.dtype(np.complex64): np.dtype(np.float32),
    np.dtype(np.complex128): np.dtype(np.float64),
}

SUPPORTED_DTYPES = tuple(str(dt) for dt in _REAL_DTYPES)


def real_dtype(dtype: np.dtype) -> np.dtype:
    """
    Real component type of a supported complex dtype.

    Raises:
        LayoutError: If dtype is not complex64 or complex128
    """
    try:
        return _REAL_DTYPES[np.dtype(dtype)]
    except KeyError:
        raise LayoutError(
            f"unsupported dtype {np.dtype(dtype)}, expected one of {SUPPORTED_DTYPES}",
            dtype=str(dtype),
        ) from None


def reinterpret_complex(
    buffer: NDArray[np.complexfloating[Any, Any]],
    offset: int,
) -> NDArray[np.floating[Any]]:
    """
    View a complex buffer as interleaved (real, imaginary) scalars.

    The returned array aliases `buffer` starting at complex element
    `offset`: element i of the buffer maps to positions 2*(i - offset)
    (real part) and 2*(i - offset) + 1 (imaginary part) of the view.
    Writes through the view modify the original buffer.

    Args:
        buffer: Contiguous 1D complex64 or complex128 array
        offset: First complex element covered by the view

    Returns:
        float32 or float64 view of length 2*(len(buffer) - offset)
    """
    return buffer[offset:].view(real_dtype(buffer.dtype))


def strided_slice(start: int, stride: int, count: int) -> slice:
    """
    Slice selecting `count` elements from `start` in steps of `stride`.

    Handles negative strides whose natural stop would fall below zero
    (which Python would otherwise read as counting from the end).
    """
    if stride == 0:
        raise ValueError("strided_slice: stride must be non-zero")
    stop = start + count * stride
    if stop < 0:
        stop = None
    return slice(start, stop, stride)


@dataclass(frozen=True)
class StridedVector:
    """
    A logical vector inside a flat buffer.

    Element i lives at buffer[offset + i*stride]. The view holds no data of
    its own; reads and writes go straight to the buffer.

    Attributes:
        buffer: Backing 1D array
        stride: Step between consecutive elements (may be negative)
        offset: Buffer position of element 0
        length: Number of elements
    """
    buffer: NDArray[Any]
    stride: int
    offset: int
    length: int

    def index(self, i: int) -> int:
        """Buffer position of element i."""
        return self.offset + i * self.stride

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, i: int) -> Any:
        return self.buffer[self.index(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self.buffer[self.index(i)] = value

    def selector(self) -> slice | NDArray[np.intp]:
        """Index into the buffer covering all elements, in order."""
        if self.stride == 0:
            return np.full(self.length, self.offset, dtype=np.intp)
        return strided_slice(self.offset, self.stride, self.length)

    def values(self) -> NDArray[Any]:
        """Elements as an array (a view of the buffer when stride != 0)."""
        return self.buffer[self.selector()]

    def assign(self, values: NDArray[Any]) -> None:
        """Overwrite all elements with `values`."""
        self.buffer[self.selector()] = values

    def swap(self, other: 'StridedVector') -> None:
        """Exchange contents with another vector of the same length."""
        if self.length <= 0:
            return
        tmp = self.values().copy()
        self.assign(other.values())
        other.assign(tmp)
