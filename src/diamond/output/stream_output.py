"""Plain text stream sink."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO


class StreamSink:
    """Writes the picture unchanged to a text stream.

    Output goes to stdout by default. Pass a custom TextIO for
    file output or testing.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize with an optional output stream.

        Args:
            output: Text stream to write to. Defaults to sys.stdout.
        """
        self._output = output or sys.stdout

    def write(self, text: str) -> None:
        """Write text straight through to the stream."""
        self._output.write(text)
