"""
Fixtures for row interchange tests.

gather/scatter read and write a logical (m x n) matrix through arbitrary
(stride1, stride2, offset) addressing, independent of the kernel under
test. reference_laswp applies pivots to a logical 2D matrix one row pair
at a time.
"""

import numpy as np
import pytest


def _indices(m, n, stride1, stride2, offset):
    return offset + np.arange(m)[:, None] * stride1 + np.arange(n)[None, :] * stride2


@pytest.fixture
def gather():
    """Read a logical matrix out of a strided buffer."""
    def read(buffer, m, n, stride1, stride2, offset):
        return buffer[_indices(m, n, stride1, stride2, offset)]
    return read


@pytest.fixture
def scatter():
    """Write a logical matrix into a strided buffer."""
    def write(matrix, buffer, stride1, stride2, offset):
        m, n = matrix.shape
        buffer[_indices(m, n, stride1, stride2, offset)] = matrix
        return buffer
    return write


@pytest.fixture
def reference_laswp():
    """Apply pivots to a logical matrix with whole-row fancy indexing."""
    def apply(matrix, k1, k2, inck, ipiv, stride_ipiv, offset_ipiv):
        out = matrix.copy()
        nrows = (k2 - k1 if inck > 0 else k1 - k2) + 1
        k, ip = k1, offset_ipiv
        for _ in range(nrows):
            row = int(ipiv[ip])
            if row != k:
                out[[k, row]] = out[[row, k]]
            k += inck
            ip += stride_ipiv
        return out
    return apply
