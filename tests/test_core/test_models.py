"""Tests for diamond.core.models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from diamond.core.models import (
    DiamondGeometry,
    DiamondPicture,
    InvalidSizeError,
    OutputMode,
    RowKind,
)


class TestEnums:
    """Verify enum values and StrEnum string behavior."""

    def test_output_mode_values(self) -> None:
        assert OutputMode.plain == "plain"
        assert OutputMode.rich == "rich"
        assert OutputMode.json == "json"
        assert len(OutputMode) == 3

    def test_row_kind_values(self) -> None:
        assert RowKind.frame == "frame"
        assert RowKind.center == "center"
        assert RowKind.upper == "upper"
        assert RowKind.lower == "lower"
        assert len(RowKind) == 4

    def test_str_enum_is_string_comparable(self) -> None:
        assert str(RowKind.center) == "center"
        assert f"mode: {OutputMode.rich}" == "mode: rich"


class TestGeometryFromSize:
    """Verify derived picture dimensions."""

    @pytest.mark.parametrize("size", [0, 1, 2, 7, 50])
    def test_dimensions(self, size: int) -> None:
        g = DiamondGeometry.from_size(size)
        assert g.size == size
        assert g.total_rows == 2 * size + 1
        assert g.total_columns == 2 * size + 2
        assert g.center_row == size

    @pytest.mark.parametrize("size", [0, 1, 2, 7, 50])
    def test_total_columns_is_even(self, size: int) -> None:
        assert DiamondGeometry.from_size(size).total_columns % 2 == 0

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(InvalidSizeError, match="non-negative"):
            DiamondGeometry.from_size(-1)

    def test_float_size_rejected(self) -> None:
        with pytest.raises(InvalidSizeError, match="integer"):
            DiamondGeometry.from_size(2.0)  # type: ignore[arg-type]

    def test_bool_size_rejected(self) -> None:
        with pytest.raises(InvalidSizeError):
            DiamondGeometry.from_size(True)

    def test_invalid_size_error_is_value_error(self) -> None:
        assert issubclass(InvalidSizeError, ValueError)

    def test_frozen(self) -> None:
        g = DiamondGeometry.from_size(3)
        with pytest.raises(FrozenInstanceError):
            g.size = 4  # type: ignore[misc]


class TestRowKind:
    """Verify row classification order."""

    def test_size_zero_single_row_is_frame(self) -> None:
        g = DiamondGeometry.from_size(0)
        # Row 0 is first, last and center at once; frame wins.
        assert g.row_kind(0) == RowKind.frame

    def test_size_one(self) -> None:
        g = DiamondGeometry.from_size(1)
        assert [g.row_kind(i) for i in range(g.total_rows)] == [
            RowKind.frame,
            RowKind.center,
            RowKind.frame,
        ]

    def test_size_three(self) -> None:
        g = DiamondGeometry.from_size(3)
        assert [g.row_kind(i) for i in range(g.total_rows)] == [
            RowKind.frame,
            RowKind.upper,
            RowKind.upper,
            RowKind.center,
            RowKind.lower,
            RowKind.lower,
            RowKind.frame,
        ]


class TestWidthAndIndent:
    """Verify body row widths shrink by two per row away from center."""

    @pytest.mark.parametrize("size", [2, 3, 6, 11])
    def test_width_by_distance_from_center(self, size: int) -> None:
        g = DiamondGeometry.from_size(size)
        for row in range(1, g.total_rows - 1):
            if row == g.center_row:
                continue
            distance = abs(row - size)
            assert g.width(row) == 2 * (size - distance)

    @pytest.mark.parametrize("size", [2, 3, 6, 11])
    def test_widths_are_even(self, size: int) -> None:
        g = DiamondGeometry.from_size(size)
        assert all(g.width(row) % 2 == 0 for row in range(g.total_rows))

    def test_indent(self) -> None:
        g = DiamondGeometry.from_size(3)
        assert g.indent(1) == 3
        assert g.indent(2) == 2
        assert g.indent(4) == 2
        assert g.indent(5) == 3

    def test_frame_width_is_zero(self) -> None:
        g = DiamondGeometry.from_size(3)
        assert g.width(0) == 0
        assert g.width(6) == 0

    def test_center_width_spans_picture(self) -> None:
        g = DiamondGeometry.from_size(3)
        assert g.width(3) == g.total_columns


class TestDoubleDashed:
    """Verify fill style alternates with row parity."""

    def test_odd_rows_are_double_dashed(self) -> None:
        assert DiamondGeometry.is_double_dashed(1)
        assert DiamondGeometry.is_double_dashed(5)

    def test_even_rows_are_single_dashed(self) -> None:
        assert not DiamondGeometry.is_double_dashed(2)
        assert not DiamondGeometry.is_double_dashed(4)


class TestDiamondPicture:
    """Verify DiamondPicture construction and text form."""

    def test_str_joins_rows_with_trailing_newlines(self) -> None:
        p = DiamondPicture(size=1, total_rows=3, total_columns=4, rows=("+--+", "|<>|", "+--+"))
        assert str(p) == "+--+\n|<>|\n+--+\n"

    def test_frozen(self) -> None:
        p = DiamondPicture(size=0, total_rows=1, total_columns=2, rows=("++",))
        with pytest.raises(FrozenInstanceError):
            p.rows = ()  # type: ignore[misc]
