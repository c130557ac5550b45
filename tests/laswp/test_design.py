"""
Tests for LaswpDesign construction and validation.
"""

import numpy as np
import pytest

from pypivot.core.exceptions import (
    DimensionError,
    LayoutError,
    PivotIndexError,
    ValidationError,
)
from pypivot.laswp import LaswpDesign
from pypivot.laswp.design import default_last_row, lapack_strides, lapack_walk


def _example_buffer():
    return np.array([1 + 2j, 3 + 4j, 5 + 6j, 7 + 8j, 9 + 10j, 11 + 12j], dtype=np.complex64)


class TestFromStrided:
    """from_strided validates every kernel argument."""

    def test_valid_design(self):
        buf = _example_buffer()
        design = LaswpDesign.from_strided(2, buf, 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0)
        assert design.buffer is buf
        assert design.N == 2
        assert design.strides == (2, 1)
        assert design.offset == 0
        assert design.nrows == 3
        assert design.layout == 'row-major'
        assert design.path == 'vector_swap'
        assert design.matrix is None

    def test_column_major_path(self):
        design = LaswpDesign.from_strided(2, _example_buffer(), 1, 3, 0, 0, 2, 1, [2, 0, 1], 1, 0)
        assert design.layout == 'column-major'
        assert design.path == 'tiled'

    def test_interchanges_skip_identity(self):
        design = LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 0, 2, 1, [2, 1, 2], 1, 0)
        assert design.interchanges() == [(0, 2)]

    def test_descending_nrows(self):
        design = LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 2, 0, -1, [0, 1, 2], -1, 2)
        assert design.nrows == 3
        assert design.inck == -1

    def test_kernel_args_order(self):
        buf = _example_buffer()
        design = LaswpDesign.from_strided(2, buf, 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0)
        args = design.kernel_args()
        assert args[0] == 2
        assert args[1] is buf
        assert args[2:8] == (2, 1, 0, 0, 2, 1)
        assert args[9:] == (1, 0)

    def test_negative_n_rejected(self):
        with pytest.raises(ValidationError, match="N: must be non-negative"):
            LaswpDesign.from_strided(-1, _example_buffer(), 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0)

    def test_list_buffer_rejected(self):
        with pytest.raises(ValidationError, match="numpy.ndarray"):
            LaswpDesign.from_strided(2, [1j] * 6, 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0)

    def test_real_buffer_rejected(self):
        with pytest.raises(LayoutError):
            LaswpDesign.from_strided(2, np.zeros(6), 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0)

    def test_2d_buffer_rejected(self):
        with pytest.raises(DimensionError):
            LaswpDesign.from_strided(
                2, np.zeros((3, 2), dtype=np.complex64), 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0
            )

    def test_zero_stride_rejected(self):
        with pytest.raises(ValidationError, match="strideA1"):
            LaswpDesign.from_strided(2, _example_buffer(), 0, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0)

    def test_zero_inck_rejected(self):
        with pytest.raises(ValidationError, match="inck"):
            LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 0, 2, 0, [2, 0, 1], 1, 0)

    def test_empty_range_rejected(self):
        with pytest.raises(ValidationError, match="empty row range"):
            LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 2, 0, 1, [2, 0, 1], 1, 0)

    def test_ipiv_positions_out_of_range(self):
        with pytest.raises(ValidationError, match="IPIV: position 3"):
            LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 1)

    def test_pivot_outside_buffer(self):
        with pytest.raises(PivotIndexError) as exc_info:
            LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 0, 2, 1, [2, 3, 1], 1, 0)
        assert exc_info.value.row == 3
        assert exc_info.value.position == 1
        assert exc_info.value.bound == 6

    def test_negative_pivot(self):
        with pytest.raises(PivotIndexError, match="non-negative"):
            LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 0, 2, 1, [-1, 0, 1], 1, 0)

    def test_row_counter_outside_buffer(self):
        with pytest.raises(PivotIndexError) as exc_info:
            LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 1, 3, 1, [1, 1, 1, 1], 1, 0)
        assert exc_info.value.row == 3
        assert exc_info.value.position is None

    def test_offset_pushes_rows_out(self):
        # Offset 2 moves row 2 to elements 6..7
        with pytest.raises(PivotIndexError):
            LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 2, 0, 1, 1, [2, 1], 1, 0)

    def test_float_pivots_warn(self):
        with pytest.warns(UserWarning, match="converting"):
            design = LaswpDesign.from_strided(
                2, _example_buffer(), 2, 1, 0, 0, 2, 1, np.array([2.0, 0.0, 1.0]), 1, 0
            )
        assert np.issubdtype(design.ipiv.dtype, np.integer)

    def test_repr(self):
        design = LaswpDesign.from_strided(2, _example_buffer(), 2, 1, 0, 0, 2, 1, [2, 0, 1], 1, 0)
        r = repr(design)
        assert "N=2" in r
        assert "nrows=3" in r


class TestLapackHelpers:
    """Order/LDA strides and the incx walk translation."""

    def test_column_major_strides(self):
        assert lapack_strides('column-major', 4, 7) == (1, 7)

    def test_row_major_strides(self):
        assert lapack_strides('row-major', 4, 7) == (7, 1)

    def test_unknown_order(self):
        with pytest.raises(ValidationError, match="order"):
            lapack_strides('diagonal', 4, 7)

    def test_row_major_lda_too_small(self):
        with pytest.raises(ValidationError, match="LDA"):
            lapack_strides('row-major', 4, 3)

    def test_forward_walk(self):
        assert lapack_walk(1, 4, 2) == (1, 4, 1, 1)

    def test_reverse_walk(self):
        # Starts at row 4, reading IPIV[1 + 3*1] = IPIV[4]
        assert lapack_walk(1, 4, -1) == (4, 1, -1, 4)

    def test_reverse_walk_strided(self):
        assert lapack_walk(0, 2, -2) == (2, 0, -1, 4)

    def test_default_last_row(self):
        assert default_last_row(0, 5, 1) == 4
        # Rows 1, 2, 3 read positions 1, 3, 5; row 4 would need position 7
        assert default_last_row(1, 7, 2) == 3

    def test_default_last_row_short_ipiv(self):
        with pytest.raises(ValidationError, match="no pivot for row k1=3"):
            default_last_row(3, 2, 1)


class TestFromLapack:
    """from_lapack maps LAPACK arguments onto the strided design."""

    def test_reverse_design(self):
        design = LaswpDesign.from_lapack('row-major', 2, _example_buffer(), 2, 0, 2, [2, 0, 1], -1)
        assert (design.k1, design.k2, design.inck) == (2, 0, -1)
        assert design.stride_ipiv == -1
        assert design.offset_ipiv == 2

    def test_k1_after_k2_rejected(self):
        with pytest.raises(ValidationError, match="k1: must be <= k2"):
            LaswpDesign.from_lapack('row-major', 2, _example_buffer(), 2, 2, 0, [2, 0, 1], 1)

    def test_zero_incx_rejected(self):
        with pytest.raises(ValidationError, match="incx"):
            LaswpDesign.from_lapack('row-major', 2, _example_buffer(), 2, 0, 2, [2, 0, 1], 0)


class TestFromArray:
    """from_array addresses a 2D matrix's own memory."""

    def test_c_order(self, complex_matrix):
        A = complex_matrix(4, 3)
        design = LaswpDesign.from_array(A, [1, 1, 3, 3])
        assert design.layout == 'row-major'
        assert design.strides == (3, 1)
        assert design.matrix is A
        assert np.shares_memory(design.buffer, A)
        assert design.k2 == 3

    def test_f_order(self, complex_matrix):
        A = complex_matrix(4, 3, order='F')
        design = LaswpDesign.from_array(A, [1, 1, 3])
        assert design.layout == 'column-major'
        assert design.strides == (1, 4)
        assert np.shares_memory(design.buffer, A)
        assert design.k2 == 2

    def test_explicit_range(self, complex_matrix):
        design = LaswpDesign.from_array(complex_matrix(5, 2), [0, 3, 4, 3, 4], k1=1, k2=2)
        assert design.nrows == 2
        assert design.interchanges() == [(1, 3), (2, 4)]

    def test_k2_past_last_row(self, complex_matrix):
        with pytest.raises(ValidationError, match="k2"):
            LaswpDesign.from_array(complex_matrix(3, 2), [0, 1, 2, 3])

    def test_pivot_past_last_row(self, complex_matrix):
        with pytest.raises(PivotIndexError):
            LaswpDesign.from_array(complex_matrix(3, 2), [0, 5, 2])

    def test_non_contiguous_rejected(self, complex_matrix):
        with pytest.raises(LayoutError):
            LaswpDesign.from_array(complex_matrix(4, 6)[:, ::2], [0, 1, 2, 3])

    def test_real_matrix_rejected(self):
        with pytest.raises(LayoutError):
            LaswpDesign.from_array(np.eye(3), [0, 1, 2])

    def test_1d_rejected(self):
        with pytest.raises(DimensionError):
            LaswpDesign.from_array(np.zeros(3, dtype=np.complex128), [0, 1, 2])

    def test_read_only_rejected(self, complex_matrix):
        A = complex_matrix(3, 3)
        A.setflags(write=False)
        with pytest.raises(ValidationError, match="read-only"):
            LaswpDesign.from_array(A, [2, 1, 2])
