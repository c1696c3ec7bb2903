"""Allow ``python -m diamond``."""

from __future__ import annotations

from diamond.cli.app import app

app(prog_name="diamond")
