"""CLI package for dirguard.

This package contains the Typer application.
"""

from dirguard.cli.main import app

__all__ = ["app"]
