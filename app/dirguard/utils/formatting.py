"""Rich console formatting utilities.

Provides the shared consoles and the fixed color theme used for tables,
messages and log records.
"""

import sys

from rich.console import Console
from rich.theme import Theme

# Styles referenced by tables, print helpers and the log handlers
THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "info": "#0ec1c8",
        "error": "bold #f53263",
        "border": "#29526d",
        "bold_header": "bold #69B9A1",
        "event.detected": "#f5b332",
        "event.removed": "bold #f53263",
        "log.time": "#b2bec3",
        "log.path": "#b2bec3",
        "logging.level.debug": "#b2bec3",
        "logging.level.info": "#0ec1c8",
        "logging.level.warning": "#f5b332",
        "logging.level.error": "bold #f53263",
        "logging.level.critical": "bold reverse #f53263",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances: regular output on stdout, problems on stderr
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")
