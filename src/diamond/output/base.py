"""Output sink protocol for rendered pictures."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Protocol for the destination of a rendered picture.

    Implementations must append each written string in call order. The
    renderer writes one glyph per call and a lone ``"\\n"`` after each row;
    it makes no assumption about buffering.
    """

    def write(self, text: str) -> None:
        """Append text to the output."""
        ...
