"""
CPU backend for row interchanges.

Runs the strided kernel on the design's buffer and reports which path
was taken.
"""

from __future__ import annotations

from pypivot.core.result import Result
from pypivot.core.compute.timing import Timer
from pypivot.laswp._common import BLOCK_SIZE, PATH_TILED
from pypivot.laswp._kernel import laswp_strided
from pypivot.laswp.design import LaswpDesign
from pypivot.laswp.solution import LaswpParams


class CPULaswpBackend:
    """CPU backend applying pivots in place with laswp_strided()."""

    @property
    def name(self) -> str:
        return 'cpu_laswp'

    def solve(self, design: LaswpDesign) -> Result[LaswpParams]:
        """
        Apply the design's interchanges to its buffer.

        The buffer is modified in place; the returned payload references it.
        """
        timer = Timer()
        timer.start()

        n_interchanges = len(design.interchanges())
        warnings_list: list[str] = []
        if n_interchanges == 0:
            warnings_list.append(
                "no interchanges: every pivot maps its row to itself"
            )

        with timer.section('interchange'):
            laswp_strided(*design.kernel_args())

        timer.stop()

        info = {
            'layout': design.layout,
            'path': design.path,
            'nrows': design.nrows,
            'n_interchanges': n_interchanges,
        }
        if design.path == PATH_TILED:
            n_blocks = design.N // BLOCK_SIZE
            info['block_size'] = BLOCK_SIZE
            info['n_blocks'] = n_blocks
            info['remainder_columns'] = design.N - n_blocks * BLOCK_SIZE

        matrix = design.matrix if design.matrix is not None else design.buffer

        return Result(
            params=LaswpParams(
                matrix=matrix,
                n_interchanges=n_interchanges,
                layout=design.layout,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
