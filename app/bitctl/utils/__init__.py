"""Utility modules for bitctl.

This module exports commonly used utility functions.
"""

from bitctl.utils.formatting import (
    console,
    create_component_table,
    err_console,
    format_component_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_component_table",
    "err_console",
    "format_component_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
