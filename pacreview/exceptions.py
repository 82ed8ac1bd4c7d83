"""
Custom exception hierarchy for pacreview.

This module defines structured exception types used across pacreview.
All exceptions inherit from :class:`PacReviewError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Programming-contract violations (for example recording an as-dependency
decision for a backend that cannot mark dependencies) are not part of this
hierarchy; they raise :class:`AssertionError`.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Sequence


class PacReviewError(Exception):
    """Base exception for all pacreview errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ConfigError(PacReviewError):
    """Raised when the configuration cannot be loaded or is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: Configuration option that failed validation.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class BackendError(PacReviewError):
    """Raised when a backend cannot query or modify its packages.

    Args:
        message: Error description.
        backend: Section name of the failing backend.
        command: Command line that was executed, if any.
        returncode: Exit status of the command, if it ran.
    """

    __slots__ = ("backend", "command", "returncode")

    def __init__(
        self,
        message: str,
        *,
        backend: Optional[str] = None,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "backend", backend)
        _add_if(details, "command", " ".join(command) if command else None)
        _add_if(details, "returncode", returncode)

        super().__init__(message, details)

        self.backend = backend
        self.command = list(command) if command else None
        self.returncode = returncode


class TerminalError(PacReviewError):
    """Raised when the interactive terminal cannot be read.

    Args:
        message: Error description.
        operation: Read operation that failed (``char`` or ``line``).
        original_error: Original exception that triggered this error.
    """

    __slots__ = ("operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "operation", operation)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.operation = operation
        self.original_error = original_error
