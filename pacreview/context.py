"""
Shared context object for pacreview CLI commands.

This module defines the global Click context used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from pacreview.config import PacReviewConfig


class PacReviewContext:
    """Global context object for pacreview CLI commands.

    Attributes:
        config_path: Path to the loaded configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration; ``None`` until the group callback ran.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[PacReviewConfig] = None

    def require_config(self) -> PacReviewConfig:
        """Return the loaded configuration, or defaults if none was loaded."""
        if self.config is None:
            self.config = PacReviewConfig()
        return self.config


#: Click decorator for injecting :class:`PacReviewContext` into commands.
pass_context = click.make_pass_decorator(PacReviewContext, ensure=True)
