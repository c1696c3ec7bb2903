"""Rich console sink."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

_GLYPH_STYLES: dict[str, str] = {
    "+": "dim",
    "|": "dim",
    "/": "cyan",
    "\\": "cyan",
    "<": "bold magenta",
    ">": "bold magenta",
    "=": "yellow",
}


def _glyph_style(glyph: str) -> str:
    """Return the Rich style for a glyph, empty for unstyled glyphs."""
    return _GLYPH_STYLES.get(glyph, "")


class RichSink:
    """Prints the picture through a Rich console, one styled row at a time.

    Glyphs are buffered until a newline arrives, then the completed row is
    printed with per-glyph styles:
    - Frame corners and edges: dim
    - Diagonals: cyan
    - Tips: bold magenta
    - '=' fill: yellow

    Rows are never wrapped, so the picture keeps its shape on narrow
    terminals.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with an optional Rich console.

        Args:
            console: Rich Console instance. Defaults to Console() if None.
        """
        self._console = console or Console()
        self._pending: list[str] = []

    def write(self, text: str) -> None:
        """Buffer glyphs and print each row once its newline is written."""
        for char in text:
            if char == "\n":
                self._print_row()
            else:
                self._pending.append(char)

    def flush(self) -> None:
        """Print a pending partial row, if any."""
        if self._pending:
            self._print_row()

    def _print_row(self) -> None:
        row = Text()
        for glyph in self._pending:
            row.append(glyph, style=_glyph_style(glyph))
        self._pending.clear()
        self._console.print(row, soft_wrap=True, highlight=False)
