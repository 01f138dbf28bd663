"""Utility modules for dirguard.

This module exports commonly used utility functions.
"""

from dirguard.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
]
