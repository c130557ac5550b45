"""
Generic result container for all PyPivot computations.

The Result class provides a standardized envelope around a domain-specific
parameter payload. This enables shared tooling for timing and diagnostics
while allowing each operation to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (execution path, block counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True); the payload may still reference a
      caller-owned buffer that was permuted in place
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload
        info: Structured metadata (layout, path, counters)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LaswpParams(matrix=A, n_interchanges=2, layout='row-major'),
        ...     info={'path': 'vector_swap', 'nrows': 3},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_laswp'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
