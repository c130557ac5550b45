"""
Shared constants and the pivot walk for row interchanges.
"""

from __future__ import annotations

from typing import Any, Iterator, Literal, Sequence

# Columns per cache tile in the column-major path
BLOCK_SIZE = 32

Order = Literal['row-major', 'column-major']
ORDERS: tuple[str, ...] = ('row-major', 'column-major')

PATH_VECTOR_SWAP = 'vector_swap'
PATH_TILED = 'tiled'


def count_rows(k1: int, k2: int, inck: int) -> int:
    """
    Number of logical rows visited between k1 and k2.

    The direction of the walk decides which end is the start: ascending
    walks go k1..k2, descending walks go k1 down to k2.
    """
    if inck > 0:
        nrows = k2 - k1
    else:
        nrows = k1 - k2
    return nrows + 1


def iter_interchanges(
    k1: int,
    k2: int,
    inck: int,
    IPIV: Sequence[Any],
    strideIPIV: int,
    offsetIPIV: int,
) -> Iterator[tuple[int, int]]:
    """
    Walk the pivot vector, yielding (k, row) for each logical step.

    Step i visits row k = k1 + i*inck and reads its partner from
    IPIV[offsetIPIV + i*strideIPIV]. Every step is yielded, including
    those where row == k; callers skip the no-op pairs.
    """
    ip = offsetIPIV
    k = k1
    for _ in range(count_rows(k1, k2, inck)):
        yield k, int(IPIV[ip])
        ip += strideIPIV
        k += inck
