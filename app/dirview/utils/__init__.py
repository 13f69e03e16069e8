"""Utility modules for dirview.

This module exports commonly used utility functions.
"""

from dirview.utils.formatting import (
    console,
    create_entry_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "console",
    "create_entry_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
]
