"""Public API for diamond.output."""

from __future__ import annotations

from diamond.output.base import OutputSink
from diamond.output.json_output import JsonRenderer
from diamond.output.rich_output import RichSink
from diamond.output.stream_output import StreamSink

__all__ = [
    "JsonRenderer",
    "OutputSink",
    "RichSink",
    "StreamSink",
]
