"""
Logging utilities for pacreview.

All pacreview loggers live below the ``pacreview`` namespace. Nothing is
emitted until :func:`setup_logging` attaches a handler, which the CLI does
once per invocation according to the ``-v`` flags. Interactive review
output never goes through logging; see :mod:`pacreview.utils.console`.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from pacreview.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "pacreview"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of records written to a TTY."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
        stream: Optional[IO[str]] = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color
        self.stream = stream

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not (color and self.use_color and self._should_use_color()):
            return super().format(record)

        # Records are shared between handlers; restore the plain level name.
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original

    def _should_use_color(self) -> bool:
        """Return True if ANSI colors make sense for the target stream."""
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        stream = self.stream if self.stream is not None else sys.stderr
        try:
            return stream.isatty()
        except (AttributeError, OSError, ValueError):
            return False


def setup_logging(
    *,
    level: int = logging.WARNING,
    verbose: bool = False,
    color: bool = True,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach a single stream handler to the ``pacreview`` logger.

    Calling this again replaces the previous handler, so repeated CLI
    invocations inside one process (as in tests) do not duplicate output.

    Args:
        level: Logging level for the package logger and its handler.
        verbose: Include timestamps and logger names in each line.
        color: Allow ANSI colors (still subject to ``NO_COLOR`` and TTY checks).
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=color,
                stream=stream,
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the ``pacreview`` namespace.

    ``get_logger("review")`` and ``get_logger("pacreview.review")`` return
    the same logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        full_name = ROOT_LOGGER_NAME
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        full_name = name
    else:
        full_name = f"{ROOT_LOGGER_NAME}.{name}"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    return logging.getLogger(full_name)


def is_logging_configured() -> bool:
    """Return True if :func:`setup_logging` has been called."""
    return _logging_configured


def disable_logging() -> None:
    """Silence all pacreview logging output."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        _logging_configured = False
