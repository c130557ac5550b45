"""
Tests for PyPivot exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyPivotError)
    - Diagnostic attributes on LayoutError and PivotIndexError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pypivot.core.exceptions import (
    DimensionError,
    LayoutError,
    PivotIndexError,
    PyPivotError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyPivotError."""

    def test_validation_error_is_pypivot_error(self):
        with pytest.raises(PyPivotError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_layout_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise LayoutError("float64 buffer")

    def test_pivot_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise PivotIndexError("row 9 out of range", row=9)

    def test_pivot_index_error_is_pypivot_error(self):
        with pytest.raises(PyPivotError):
            raise PivotIndexError("row 9 out of range", row=9)


# ═══════════════════════════════════════════════════════════════════════
# LayoutError
# ═══════════════════════════════════════════════════════════════════════


class TestLayoutError:
    """LayoutError carries dtype and strides."""

    def test_all_attributes(self):
        err = LayoutError("not contiguous", dtype="complex64", strides=(8, 2))
        assert str(err) == "not contiguous"
        assert err.dtype == "complex64"
        assert err.strides == (8, 2)

    def test_defaults_are_none(self):
        err = LayoutError("bad layout")
        assert err.dtype is None
        assert err.strides is None


# ═══════════════════════════════════════════════════════════════════════
# PivotIndexError
# ═══════════════════════════════════════════════════════════════════════


class TestPivotIndexError:
    """PivotIndexError carries the offending row and where it came from."""

    def test_all_attributes(self):
        err = PivotIndexError("IPIV: row 7 outside buffer", row=7, position=2, bound=12)
        assert str(err) == "IPIV: row 7 outside buffer"
        assert err.row == 7
        assert err.position == 2
        assert err.bound == 12

    def test_defaults_are_none(self):
        err = PivotIndexError("k: negative", row=-1)
        assert err.position is None
        assert err.bound is None

    def test_catchable_with_attributes(self):
        with pytest.raises(PivotIndexError) as exc_info:
            raise PivotIndexError("out of range", row=4, position=1, bound=6)
        assert exc_info.value.row == 4
        assert exc_info.value.position == 1
