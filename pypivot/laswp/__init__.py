"""
Row interchange module.

Applies pre-computed pivot vectors (as produced by an LU factorization)
to complex matrices stored in flat buffers with arbitrary strides and
offsets.

Public API:
    apply_pivots(A, ipiv)          - Permute a 2D matrix, with diagnostics
    laswp(order, N, A, LDA, ...)   - LAPACK-style interface
    laswp_ndarray(N, A, ...)       - Strided interface (strides + offsets)
    laswp_strided(N, A, ...)       - Unchecked kernel
    pivots_to_permutation(ipiv, m) - Equivalent row permutation
"""

from pypivot.laswp._common import BLOCK_SIZE
from pypivot.laswp._kernel import laswp_strided
from pypivot.laswp.design import LaswpDesign
from pypivot.laswp.solution import LaswpParams, LaswpSolution
from pypivot.laswp.solvers import (
    apply_pivots,
    laswp,
    laswp_ndarray,
    pivots_to_permutation,
)

__all__ = [
    "apply_pivots",
    "laswp",
    "laswp_ndarray",
    "laswp_strided",
    "pivots_to_permutation",
    "BLOCK_SIZE",
    "LaswpDesign",
    "LaswpParams",
    "LaswpSolution",
]
