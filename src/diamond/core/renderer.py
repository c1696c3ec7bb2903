"""Diamond renderer: draws the framed diamond glyph by glyph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from diamond.core.models import DiamondGeometry, DiamondPicture, RowKind

if TYPE_CHECKING:
    from diamond.output.base import OutputSink

logger = logging.getLogger(__name__)

FRAME_CORNER = "+"
FRAME_EDGE = "|"
FRAME_DASH = "-"
SINGLE_DASH = "-"
DOUBLE_DASH = "="
LEFT_TIP = "<"
RIGHT_TIP = ">"
SLASH = "/"
BACKSLASH = "\\"
SPACE = " "
NEWLINE = "\n"


class _RowCollector:
    """Sink that splits written glyphs into completed rows."""

    def __init__(self) -> None:
        self.rows: list[str] = []
        self._current: list[str] = []

    def write(self, text: str) -> None:
        for char in text:
            if char == NEWLINE:
                self.rows.append("".join(self._current))
                self._current.clear()
            else:
                self._current.append(char)


class DiamondRenderer:
    """Draws a framed ASCII diamond to an output sink.

    Each glyph is written with its own ``write`` call and every row is
    terminated by a single newline. For ``size = 2``::

        +----+
        | /\\ |
        |<-->|
        | \\/ |
        +----+

    The renderer keeps no state between calls; the same instance may be
    reused for any number of sizes.
    """

    def __init__(self, sink: OutputSink) -> None:
        """Initialize with the sink that receives the picture.

        Args:
            sink: Any object with a ``write(text)`` method.
        """
        self._sink = sink

    def process(self, size: int) -> None:
        """Draw the diamond of the given size.

        Raises:
            InvalidSizeError: If *size* is negative or not an integer.
        """
        geometry = DiamondGeometry.from_size(size)
        logger.debug(
            "Drawing a diamond of size %d: total_rows=%d, total_columns=%d, center_row=%d",
            geometry.size,
            geometry.total_rows,
            geometry.total_columns,
            geometry.center_row,
        )

        for row in range(geometry.total_rows):
            kind = geometry.row_kind(row)
            if kind == RowKind.frame:
                self._draw_frame_row(geometry.total_columns)
            elif kind == RowKind.center:
                self._draw_center_row(
                    geometry.total_columns, is_double_dashed=geometry.is_double_dashed(row)
                )
            else:
                self._draw_diamond_row(
                    geometry.total_columns,
                    geometry.width(row),
                    is_double_dashed=geometry.is_double_dashed(row),
                    is_upper=kind == RowKind.upper,
                )
            self._sink.write(NEWLINE)

    def _draw_frame_row(self, total_columns: int) -> None:
        """Draw a frame row, e.g. ``+----+`` for 6 columns."""
        for col in range(total_columns):
            if col in (0, total_columns - 1):
                self._sink.write(FRAME_CORNER)
            else:
                self._sink.write(FRAME_DASH)

    def _draw_center_row(self, total_columns: int, *, is_double_dashed: bool) -> None:
        """Draw the widest row, with tips touching the frame."""
        for col in range(total_columns):
            if col in (0, total_columns - 1):
                self._sink.write(FRAME_EDGE)
            elif col == 1:
                self._sink.write(LEFT_TIP)
            elif col == total_columns - 2:
                self._sink.write(RIGHT_TIP)
            else:
                self._sink.write(DOUBLE_DASH if is_double_dashed else SINGLE_DASH)

    def _draw_diamond_row(
        self,
        total_columns: int,
        width: int,
        *,
        is_double_dashed: bool,
        is_upper: bool,
    ) -> None:
        """Draw a slanted body row, e.g. ``|  /--\\  |``.

        Args:
            total_columns: Width of the whole picture; always even.
            width: Width of the diamond on this row; always even.
            is_double_dashed: Fill with '=' instead of '-'.
            is_upper: Row lies above the center row.
        """
        indent = (total_columns - width) // 2
        right = total_columns - 1 - indent

        for col in range(total_columns):
            if col in (0, total_columns - 1):
                self._sink.write(FRAME_EDGE)
            elif col < indent or col > right:
                self._sink.write(SPACE)
            elif col == indent:
                self._sink.write(SLASH if is_upper else BACKSLASH)
            elif col == right:
                self._sink.write(BACKSLASH if is_upper else SLASH)
            else:
                self._sink.write(DOUBLE_DASH if is_double_dashed else SINGLE_DASH)

    @staticmethod
    def picture(size: int) -> DiamondPicture:
        """Render *size* in memory and return the rows."""
        geometry = DiamondGeometry.from_size(size)
        collector = _RowCollector()
        DiamondRenderer(collector).process(size)
        return DiamondPicture(
            size=geometry.size,
            total_rows=geometry.total_rows,
            total_columns=geometry.total_columns,
            rows=tuple(collector.rows),
        )


def render(size: int, sink: OutputSink) -> None:
    """Draw a diamond of *size* to *sink*."""
    DiamondRenderer(sink).process(size)
