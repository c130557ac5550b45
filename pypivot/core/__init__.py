"""
Core infrastructure for PyPivot.

This module provides shared abstractions and utilities used by the
interchange routines.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Strided views, layout detection, BLAS kernels, timing
"""

from pypivot.core.protocols import Backend
from pypivot.core.result import Result
from pypivot.core.exceptions import (
    PyPivotError,
    ValidationError,
    DimensionError,
    LayoutError,
    PivotIndexError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyPivotError",
    "ValidationError",
    "DimensionError",
    "LayoutError",
    "PivotIndexError",
]
