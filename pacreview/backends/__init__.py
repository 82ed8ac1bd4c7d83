"""
Package-manager backends.

The review engine depends only on :class:`Backend`. :class:`CommandBackend`
is the configuration-driven implementation used by the CLI.
"""

from __future__ import annotations

from pacreview.backends.base import Backend
from pacreview.backends.todo import ToDoPerBackend
from pacreview.backends.command import CommandBackend, collect_unmanaged

__all__ = [
    "Backend",
    "CommandBackend",
    "ToDoPerBackend",
    "collect_unmanaged",
]
