"""
Exception hierarchy for PyPivot.

All exceptions inherit from PyPivotError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyPivotError(Exception):
    """Base exception for all PyPivot errors."""
    pass


class ValidationError(PyPivotError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or the buffer is not contiguous.

    Raised when an array has the wrong number of dimensions or when a
    buffer cannot be addressed with flat element offsets.
    """
    pass


class LayoutError(ValidationError):
    """
    Unsupported element type or memory layout.

    Raised when a matrix cannot be interpreted as strided complex storage,
    e.g. a real-valued dtype or a 2D array that is neither C- nor
    Fortran-contiguous.

    Attributes:
        dtype: The offending dtype, if relevant
        strides: The offending strides (in elements), if relevant
    """

    def __init__(
        self,
        message: str,
        dtype: str | None = None,
        strides: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.dtype = dtype
        self.strides = strides


class PivotIndexError(ValidationError):
    """
    A row index addresses storage outside the buffer.

    Raised when a row counter or a pivot entry is negative or would make
    the interchange read or write past either end of the buffer.

    Attributes:
        row: The offending row index
        position: Position in IPIV the row was read from (None for k1/k2)
        bound: Number of addressable elements in the buffer
    """

    def __init__(
        self,
        message: str,
        row: int,
        position: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.position = position
        self.bound = bound
