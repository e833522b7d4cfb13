"""Utility modules for lsinfo.

This module exports commonly used utility functions.
"""

from lsinfo.utils.formatting import (
    console,
    err_console,
    format_size,
    format_timestamp,
    print_error,
    print_warning,
    printable,
)

__all__ = [
    "console",
    "err_console",
    "format_size",
    "format_timestamp",
    "print_error",
    "print_warning",
    "printable",
]
