"""
Shared compute infrastructure for PyPivot.

This module provides the strided-buffer primitives that the interchange
kernels are built from. It contains no pivoting logic of its own.

Submodules:
    layout: Row-major / column-major classification from strides
    strided: Strided vector views and complex-as-real reinterpretation
    blas: Level 1 vector kernels (swap)
    timing: Execution timing utilities
"""

from pypivot.core.compute.layout import (
    strides_to_order,
    is_row_major,
    is_column_major,
)
from pypivot.core.compute.strided import (
    StridedVector,
    reinterpret_complex,
    strided_slice,
)
from pypivot.core.compute.blas import swap
from pypivot.core.compute.timing import Timer

__all__ = [
    # Layout
    "strides_to_order",
    "is_row_major",
    "is_column_major",
    # Strided views
    "StridedVector",
    "reinterpret_complex",
    "strided_slice",
    # BLAS
    "swap",
    # Timing
    "Timer",
]
