"""JSON export renderer."""

from __future__ import annotations

import dataclasses
import json
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from diamond.core.models import DiamondPicture


class JsonRenderer:
    """Renders a finished picture as a JSON object to a text stream.

    The object carries the size, the picture dimensions and the list of
    rows without newlines. Output goes to stdout by default.
    """

    def __init__(self, output: TextIO | None = None, *, indent: int = 2) -> None:
        """Initialize with an optional output stream.

        Args:
            output: Text stream for JSON output. Defaults to sys.stdout.
            indent: JSON indentation level. Defaults to 2.
        """
        self._output = output or sys.stdout
        self._indent = indent

    def render(self, picture: DiamondPicture) -> None:
        """Serialize the picture as JSON."""
        data = dataclasses.asdict(picture)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")
