"""Hellobox CLI - print a greeting suited to where stdout goes."""

import sys
import typer
from typing import Optional

from . import __version__
from .config import ENCODING
from .greeting import format_greeting
from .logging import get_logger
from .terminal import stdout_is_terminal

logger = get_logger("cli")

app = typer.Typer(
    name="hellobox",
    help="Print a greeting: boxed and colored on a terminal, plain otherwise.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hellobox {__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Print the greeting.

    Example:
        hellobox            # boxed greeting in a terminal
        hellobox | cat      # plain "Hello World"
    """
    is_terminal = stdout_is_terminal()
    output = format_greeting(is_terminal)
    logger.debug("stdout is_terminal=%s, writing %d bytes", is_terminal, len(output))
    _write(output)


def _write(output: bytes) -> None:
    """Write encoded output to stdout, binary when possible."""
    if getattr(sys.stdout, "buffer", None) is not None:
        # Bytes go straight to the binary stream; click never strips them
        typer.echo(output, nl=False)
    else:
        # Text-only replacement stream (e.g. redirect_stdout to StringIO)
        typer.echo(output.decode(ENCODING), nl=False, color=True)
