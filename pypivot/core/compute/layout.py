"""
Memory layout classification from strides.

A stride pair describes how a 2D matrix is laid out in a flat buffer.
The classification only looks at stride magnitudes, so negative strides
(reversed traversal) classify the same as their positive counterparts.
"""

from typing import Sequence

# Order codes returned by strides_to_order()
ORDER_NONE = 0
ORDER_ROW_MAJOR = 1
ORDER_COLUMN_MAJOR = 2
ORDER_BOTH = 3


def strides_to_order(strides: Sequence[int]) -> int:
    """
    Classify a stride sequence by memory order.

    Row-major order means stride magnitudes are non-increasing from the
    first dimension to the last; column-major means non-decreasing. A
    sequence satisfying both (e.g. equal strides, or a single dimension)
    is reported as ORDER_BOTH.

    Args:
        strides: Stride per dimension, in elements

    Returns:
        One of ORDER_NONE, ORDER_ROW_MAJOR, ORDER_COLUMN_MAJOR, ORDER_BOTH
    """
    magnitudes = [abs(s) for s in strides]
    if not magnitudes:
        return ORDER_NONE

    row_major = all(a >= b for a, b in zip(magnitudes, magnitudes[1:]))
    column_major = all(a <= b for a, b in zip(magnitudes, magnitudes[1:]))

    if row_major and column_major:
        return ORDER_BOTH
    if row_major:
        return ORDER_ROW_MAJOR
    if column_major:
        return ORDER_COLUMN_MAJOR
    return ORDER_NONE


def is_row_major(strides: Sequence[int]) -> bool:
    """True if strides are consistent with row-major order."""
    order = strides_to_order(strides)
    return order == ORDER_ROW_MAJOR or order == ORDER_BOTH


def is_column_major(strides: Sequence[int]) -> bool:
    """True if strides are consistent with column-major order."""
    order = strides_to_order(strides)
    return order == ORDER_COLUMN_MAJOR or order == ORDER_BOTH
