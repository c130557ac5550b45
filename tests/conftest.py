"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def complex_matrix(rng):
    """Factory for random complex matrices with distinct entries."""
    def make(m, n, dtype=np.complex128, order='C'):
        values = rng.standard_normal((m, n)) + 1j * rng.standard_normal((m, n))
        return np.asarray(values, dtype=dtype, order=order)
    return make


@pytest.fixture
def getrf_pivots(rng):
    """Factory for LAPACK-style pivots: ipiv[k] is a row in k..m-1."""
    def make(m, n_pivots=None):
        n_pivots = m if n_pivots is None else n_pivots
        return np.array([rng.integers(k, m) for k in range(n_pivots)], dtype=np.int32)
    return make
