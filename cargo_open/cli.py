"""Typer-based CLI: ``cargo open <crate>``."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__, config
from .editor import launch_editor, resolve_editor
from .errors import CargoOpenError
from .metadata import locate

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False)

app = typer.Typer(
    help="Open an installed crate in your editor.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Options that consume the following argv entry.
_VALUE_OPTIONS = {"--manifest-path"}


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"cargo-open v{__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    level = getattr(logging, config.LOG_LEVEL, None)
    if verbose:
        level = logging.DEBUG
    elif not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.LOG_FORMAT, stream=sys.stderr, force=True)


def _exit_code(returncode: int) -> int:
    # Killed by a signal: report it the way a shell would.
    if returncode < 0:
        return 128 - returncode
    return returncode


@app.command()
def open_crate(
    package: str = typer.Argument(..., metavar="CRATE", help="Name of the crate to open, optionally name@version."),
    manifest_path: Optional[Path] = typer.Option(
        None,
        "--manifest-path",
        metavar="PATH",
        help="Use a specific manifest file (default: nearest Cargo.toml).",
    ),
    print_path: bool = typer.Option(False, "--print-path", help="Print the crate directory instead of opening it."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Open an installed crate's source directory in [bold]$CARGO_EDITOR[/bold], $VISUAL or $EDITOR."""
    _setup_logging(verbose)

    try:
        command = None if print_path else resolve_editor()
        directory = locate(package, manifest_path)
        if command is None:
            typer.echo(str(directory))
            return
        returncode = launch_editor(command, directory)
    except CargoOpenError as exc:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)

    if returncode != 0:
        logger.debug("Editor exited with status %d", returncode)
        raise typer.Exit(code=_exit_code(returncode))


def strip_cargo_subcommand(argv: List[str]) -> List[str]:
    """Drop the ``open`` token cargo passes when run as ``cargo open``.

    ``cargo open clap`` executes ``cargo-open open clap``. The token is only
    dropped when another positional follows, so ``cargo-open open`` still
    opens the crate named ``open``.
    """
    if not argv or argv[0] != "open":
        return argv
    rest = argv[1:]
    skip = False
    for arg in rest:
        if skip:
            skip = False
            continue
        if arg in _VALUE_OPTIONS:
            skip = True
            continue
        if not arg.startswith("-"):
            return rest
    return argv


def main() -> None:
    app(args=strip_cargo_subcommand(sys.argv[1:]), prog_name="cargo-open")


if __name__ == "__main__":
    main()
