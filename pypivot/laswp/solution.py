"""
Row interchange solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pypivot.core.result import Result

if TYPE_CHECKING:
    from pypivot.laswp.design import LaswpDesign


@dataclass(frozen=True)
class LaswpParams:
    """
    Parameter payload for a row interchange.

    Attributes:
        matrix: The permuted matrix (2D view when the design has one,
            otherwise the flat buffer)
        n_interchanges: Number of row pairs actually swapped
        layout: 'row-major' or 'column-major'
    """
    matrix: NDArray[np.complexfloating[Any, Any]]
    n_interchanges: int
    layout: str


@dataclass
class LaswpSolution:
    """
    User-facing row interchange results.

    Wraps Result[LaswpParams] and provides convenient accessors.
    """
    _result: Result[LaswpParams]
    _design: 'LaswpDesign'

    @property
    def matrix(self) -> NDArray[np.complexfloating[Any, Any]]:
        """The permuted matrix."""
        return self._result.params.matrix

    @property
    def n_interchanges(self) -> int:
        """Number of row pairs swapped (pivots equal to their row are skipped)."""
        return self._result.params.n_interchanges

    @property
    def layout(self) -> str:
        return self._result.params.layout

    @property
    def path(self) -> str:
        """Kernel path taken: 'vector_swap' (row-major) or 'tiled' (column-major)."""
        return self._result.info['path']

    @property
    def nrows(self) -> int:
        return self._design.nrows

    @property
    def design(self) -> 'LaswpDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable description of the interchange."""
        info = self.info
        d = self._design
        lines = [
            "Row interchanges (laswp)",
            f"  Layout:        {self.layout} (strides={d.strides}, offset={d.offset})",
            f"  Rows:          {d.k1} -> {d.k2} ({self.nrows} visited)",
            f"  Columns:       {d.N}",
            f"  Interchanges:  {self.n_interchanges}",
        ]
        if info['path'] == 'tiled':
            lines.append(
                f"  Tiling:        {info['n_blocks']} block(s) of {info['block_size']} "
                f"+ {info['remainder_columns']} remainder column(s)"
            )
        else:
            lines.append("  Tiling:        none (one vector swap per row pair)")
        if self.timing is not None:
            lines.append(f"  Time:          {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LaswpSolution(layout={self.layout!r}, path={self.path!r}, "
            f"nrows={self.nrows}, n_interchanges={self.n_interchanges})"
        )
