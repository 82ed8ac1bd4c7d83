"""
Utility helpers for pacreview.

This package provides reusable utilities used across pacreview:

- Console input and output helpers (Rich and Click based)
- Logging configuration and retrieval

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from pacreview.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from pacreview.utils.console import (
    confirm,
    echo,
    get_raw_console,
    print_error,
    print_success,
    print_warning,
    read_line,
    read_single_char,
    reconfigure_console,
)

__all__ = [
    # Console
    "echo",
    "confirm",
    "read_line",
    "read_single_char",
    "print_error",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
]
