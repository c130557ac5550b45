"""
PyPivot: row interchange primitives for strided complex matrices.

Applies the pivot vectors recorded by LU-style factorizations to matrices
held in flat NumPy buffers, with arbitrary strides and offsets so that
sub-matrices can be permuted without copying.

Submodules:
    laswp: Row interchanges (LAPACK ?laswp)
    core: Exceptions, validation, strided-buffer primitives
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pypivot import laswp
from pypivot.laswp import apply_pivots, pivots_to_permutation

__all__ = [
    "__version__",
    "laswp",
    "apply_pivots",
    "pivots_to_permutation",
]
