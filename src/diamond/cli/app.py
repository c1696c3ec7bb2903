"""CLI entry point for diamond."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from diamond.core.models import OutputMode
from diamond.core.renderer import DiamondRenderer
from diamond.output.rich_output import RichSink
from diamond.output.stream_output import StreamSink

app = typer.Typer(
    name="diamond",
    help="Draw a framed ASCII-art diamond.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from diamond import __version__

        typer.echo(f"diamond {__version__}")
        raise typer.Exit()


def _parse_output_mode(value: str) -> OutputMode:
    """Parse output string to OutputMode enum."""
    try:
        return OutputMode(value)
    except ValueError:
        valid = ", ".join(o.value for o in OutputMode)
        msg = f"Invalid output mode '{value}'. Choose from: {valid}"
        raise typer.BadParameter(msg) from None


def _configure_logging(*, verbose: bool) -> None:
    """Route the package logger to stderr through Rich."""
    logger = logging.getLogger("diamond")
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger.addHandler(handler)


@app.command()
def main(
    size: Annotated[
        int,
        typer.Argument(help="Diamond size. Pass negative values after '--'."),
    ],
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output mode: plain, rich, or json."),
    ] = "plain",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log picture geometry to stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Draw a framed diamond of the given SIZE.

    The picture is 2*SIZE+1 rows tall and 2*SIZE+2 columns wide.
    """
    output_mode = _parse_output_mode(output)
    _configure_logging(verbose=verbose)

    try:
        if output_mode == OutputMode.json:
            from diamond.output.json_output import JsonRenderer

            JsonRenderer().render(DiamondRenderer.picture(size))
        elif output_mode == OutputMode.rich:
            sink = RichSink()
            DiamondRenderer(sink).process(size)
            sink.flush()
        else:
            DiamondRenderer(StreamSink()).process(size)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from None
