"""Data models for diamond rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class InvalidSizeError(ValueError):
    """Raised when a diamond size is not a non-negative integer."""


class OutputMode(StrEnum):
    """Output format for the rendered picture."""

    plain = "plain"
    rich = "rich"
    json = "json"


class RowKind(StrEnum):
    """Classification of a picture row."""

    frame = "frame"
    center = "center"
    upper = "upper"
    lower = "lower"


@dataclass(frozen=True)
class DiamondGeometry:
    """Picture dimensions derived from a diamond size.

    Rows are indexed from 0 at the top frame to ``total_rows - 1`` at the
    bottom frame. Column widths are always even, so every body row is
    centred with an exact indent.
    """

    size: int
    total_rows: int
    total_columns: int
    center_row: int

    @classmethod
    def from_size(cls, size: int) -> DiamondGeometry:
        """Compute the geometry for *size*.

        Raises:
            InvalidSizeError: If *size* is not an int or is negative.
        """
        if isinstance(size, bool) or not isinstance(size, int):
            msg = f"Size must be an integer, got {type(size).__name__}"
            raise InvalidSizeError(msg)
        if size < 0:
            msg = f"Size must be non-negative, got {size}"
            raise InvalidSizeError(msg)
        return cls(
            size=size,
            total_rows=2 * size + 1,
            total_columns=2 * size + 2,
            center_row=size,
        )

    def row_kind(self, row: int) -> RowKind:
        """Classify a row. Frame rows win over the center row."""
        if row == 0 or row == self.total_rows - 1:
            return RowKind.frame
        if row == self.center_row:
            return RowKind.center
        if row < self.center_row:
            return RowKind.upper
        return RowKind.lower

    def width(self, row: int) -> int:
        """Return the diamond width at *row* (0 on frame rows)."""
        kind = self.row_kind(row)
        if kind == RowKind.frame:
            return 0
        if kind == RowKind.center:
            return self.total_columns
        if kind == RowKind.upper:
            return 2 * row
        return 2 * (self.total_rows - 1 - row)

    def indent(self, row: int) -> int:
        """Return the column of the left diagonal on a body row."""
        return (self.total_columns - self.width(row)) // 2

    @staticmethod
    def is_double_dashed(row: int) -> bool:
        """Odd rows fill the diamond with '=' instead of '-'."""
        return row % 2 == 1


@dataclass(frozen=True)
class DiamondPicture:
    """A fully rendered picture, one string per row without newlines."""

    size: int
    total_rows: int
    total_columns: int
    rows: tuple[str, ...]

    def __str__(self) -> str:
        return "".join(f"{row}\n" for row in self.rows)
