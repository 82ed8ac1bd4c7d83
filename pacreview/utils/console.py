"""
Console input and output utilities for pacreview using Rich and Click.

This module provides user-facing output helpers and the terminal input
source used by the interactive review. For diagnostic or debug output,
use :mod:`pacreview.utils.logger`.

Guidelines:
- print_* functions: user-facing status messages
- echo: verbatim text such as package names and prompts (no markup)
- read_single_char / read_line / confirm: interactive input
- Logging should never go through this module
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional

import click
from rich.theme import Theme
from rich.console import Console

from pacreview.exceptions import TerminalError

TTY_DEVICE = "/dev/tty"

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

PACREVIEW_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "section": "bold magenta",
        "dim": "dim",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return a singleton Rich Console instance."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=PACREVIEW_THEME,
                    no_color=not use_color,
                    highlight=False,
                    soft_wrap=True,
                )
    return _console


def reconfigure_console() -> None:
    """Reset the global console instance.

    Useful if environment variables (e.g. NO_COLOR) change at runtime.
    """
    global _console
    with _console_lock:
        _console = None


def get_raw_console() -> Console:
    """Return the underlying Rich Console instance."""
    return _get_console()


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def echo(text: str = "", *, end: str = "\n", style: Optional[str] = None) -> None:
    """Print ``text`` verbatim.

    Package and group names may contain square brackets, so markup is
    never interpreted here.
    """
    _get_console().print(text, end=end, style=style, markup=False)


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    """Print a success message."""
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


# ---------------------------------------------------------------------------
# User interaction
# ---------------------------------------------------------------------------


def read_single_char() -> str:
    """Read one keystroke from the terminal and return it lowercased.

    The key is echoed and followed by a newline so the next output starts
    on a fresh line.

    Raises:
        TerminalError: The terminal reached EOF or could not be read.
    """
    try:
        char = click.getchar(echo=True)
    except (EOFError, OSError) as exc:
        raise TerminalError(
            "Cannot read from terminal", operation="char", original_error=exc
        ) from exc

    echo()
    return char[:1].lower()


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def _read_terminal_line() -> str:
    """Read one line from the terminal that :func:`click.getchar` reads.

    When standard input is redirected, click reads keystrokes from the
    controlling terminal, so lines are read from there as well.

    Raises:
        EOFError: The terminal reached end of file.
        OSError: No terminal is available.
    """
    if _stdin_is_tty():
        return input()

    with open(TTY_DEVICE, encoding="utf-8") as tty:
        line = tty.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def read_line() -> str:
    """Read one line from the terminal, without the trailing newline.

    Raises:
        TerminalError: The terminal reached EOF or could not be read.
    """
    try:
        return _read_terminal_line()
    except (EOFError, OSError) as exc:
        raise TerminalError(
            "Cannot read from terminal", operation="line", original_error=exc
        ) from exc


def confirm(message: str, *, default: bool = False, strict: bool = False) -> bool:
    """Prompt the user for a yes/no confirmation.

    - "y", "yes"   → return True
    - "n", "no"    → return False
    - empty input  → return `default`
    - any other input (invalid) → return `default`, or False if `strict`
    - Ctrl+C / EOF → return False

    Args:
        message: Prompt message shown to the user.
        default: Default choice used when the user presses Enter or
            provides an unrecognized response.
        strict: Treat unrecognized responses as "no". Use this before
            irreversible operations.

    Returns:
        True if confirmed, False otherwise.
    """
    console = _get_console()
    suffix = " [Y/n] " if default else " [y/N] "
    console.print(f"{message}{suffix}", end="", style="info", markup=False)

    try:
        response = _read_terminal_line().strip().lower()
    except (KeyboardInterrupt, EOFError, OSError):
        console.print()
        return False

    if not response:
        return default

    if response in ("y", "yes"):
        return True
    if response in ("n", "no"):
        return False

    return False if strict else default
