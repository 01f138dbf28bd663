"""Terminal logging setup.

All modules log through ``logging.getLogger(__name__)``; this module
attaches Rich handlers to the package logger. Records below WARNING go
to stdout, warnings and errors go to stderr.
"""

import logging

from rich.console import Console
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler

from dirguard.utils.formatting import console, err_console

PACKAGE_LOGGER = "dirguard"


class WatchEventHighlighter(RegexHighlighter):
    """Highlights detection and removal events in log messages."""

    base_style = "event."
    highlights = [
        r"(?P<detected>Unauthorized entry detected)",
        r"(?P<removed>Unauthorized entry removed)",
    ]


class BelowLevelFilter(logging.Filter):
    """Passes only records strictly below a given level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def get_log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level.

    ``verbose`` wins when both flags are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def _make_handler(target: Console, *, verbose: bool) -> RichHandler:
    """Build a Rich handler writing to ``target``."""
    handler = RichHandler(
        console=target,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
        highlighter=WatchEventHighlighter(),
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the package logger for terminal output.

    Calling this again replaces the handlers installed by a previous
    call instead of stacking more.

    Args:
        verbose: Log debug messages.
        quiet: Only log warnings and errors.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    out_handler = _make_handler(console, verbose=verbose)
    out_handler.addFilter(BelowLevelFilter(logging.WARNING))
    err_handler = _make_handler(err_console, verbose=verbose)
    err_handler.setLevel(logging.WARNING)

    logger.addHandler(out_handler)
    logger.addHandler(err_handler)
    logger.setLevel(get_log_level(verbose=verbose, quiet=quiet))
    return logger
