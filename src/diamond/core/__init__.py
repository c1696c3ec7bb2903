"""Public API for diamond.core."""

from __future__ import annotations

from diamond.core.models import (
    DiamondGeometry,
    DiamondPicture,
    InvalidSizeError,
    OutputMode,
    RowKind,
)
from diamond.core.renderer import DiamondRenderer, render

__all__ = [
    "DiamondGeometry",
    "DiamondPicture",
    "DiamondRenderer",
    "InvalidSizeError",
    "OutputMode",
    "RowKind",
    "render",
]
