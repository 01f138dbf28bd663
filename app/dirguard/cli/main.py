"""Main CLI application entry point.

Defines the Typer application: capture the baseline of every directory
given on the command line, then enforce it until the process is stopped.
"""

import logging
from typing import Annotated

import typer
from pydantic import ValidationError

from dirguard import __version__
from dirguard.cli.display import create_snapshot_table
from dirguard.core.config import WatchConfig
from dirguard.core.logs import setup_logging
from dirguard.core.monitor import MonitorLoop
from dirguard.utils.formatting import console, print_error, print_info

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dirguard",
    help="Watch directories and remove entries created after startup.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirguard version {__version__}")
        raise typer.Exit()


@app.command()
def watch(
    directories: Annotated[
        list[str],
        typer.Argument(
            help="Directories to watch.",
            show_default=False,
        ),
    ],
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log warnings and errors.",
        ),
    ] = False,
) -> None:
    """Capture a baseline of each directory and remove anything new.

    Every half second the top level of each directory is listed again;
    files and empty directories that were not there at startup are
    deleted. Runs until interrupted.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        config = WatchConfig(roots=directories)
    except ValidationError as e:
        print_error(f"Invalid arguments: {e.errors()[0]['msg']}")
        raise typer.Exit(code=1) from e

    try:
        monitor = MonitorLoop.from_roots(config.roots, interval=config.interval)
    except OSError as e:
        logger.debug("Baseline capture failed", exc_info=True)
        print_error(f"Failed to scan {e.filename or 'directory'}: {e.strerror or e}")
        raise typer.Exit(code=1) from e

    if not quiet:
        console.print(create_snapshot_table(monitor.snapshots))
        print_info("Watching for new entries. Press Ctrl+C to stop.")

    monitor.run()


if __name__ == "__main__":
    app()
