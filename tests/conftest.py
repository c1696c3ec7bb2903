"""Shared test fixtures for diamond."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

import pytest

from diamond.core.renderer import DiamondRenderer
from diamond.output.stream_output import StreamSink

if TYPE_CHECKING:
    from collections.abc import Callable


class RecordingSink:
    """Sink that keeps every write call separately."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def write(self, text: str) -> None:
        self.calls.append(text)

    def getvalue(self) -> str:
        return "".join(self.calls)


@pytest.fixture
def recording_sink() -> RecordingSink:
    """A fresh sink that records each write call."""
    return RecordingSink()


@pytest.fixture
def draw() -> Callable[[int], list[str]]:
    """Render a size through a StringIO-backed sink and return its rows."""

    def _draw(size: int) -> list[str]:
        buf = StringIO()
        DiamondRenderer(StreamSink(buf)).process(size)
        text = buf.getvalue()
        assert text.endswith("\n")
        return text.split("\n")[:-1]

    return _draw
