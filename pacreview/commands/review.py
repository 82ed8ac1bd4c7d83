"""Review command implementation for pacreview.

Asks, package by package, what should happen to every package that the
configured backends report as unmanaged, then applies the decisions.

Typical usage::

    # Review all configured backends
    $ pacreview review

    # Review only some backends
    $ pacreview review -b pacman -b flatpak

    # Show what would be done without doing it
    $ pacreview review --dry-run
"""

from __future__ import annotations

from typing import List, Tuple

import click

from pacreview.backends import CommandBackend, collect_unmanaged
from pacreview.config import BackendConfig, PacReviewConfig
from pacreview.context import pass_context, PacReviewContext
from pacreview.review import review as run_review
from pacreview.utils import get_logger, print_warning

logger = get_logger("commands.review")


@click.command()
@click.option(
    "--backend",
    "-b",
    "backend_names",
    multiple=True,
    help="Review only this backend (can be repeated).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the resulting operations without applying them.",
)
@pass_context
def review(
    ctx: PacReviewContext,
    backend_names: Tuple[str, ...],
    dry_run: bool,
) -> None:
    """Review unmanaged packages and apply the decisions.

    For every package, choose to assign it to a group, delete it, mark it
    as a dependency (if the backend supports it), show information about
    it, skip it, or quit without changing anything. All decisions are
    shown once more and applied after a single confirmation.
    """
    config = ctx.require_config()
    selected = select_backends(config, backend_names)

    if not selected:
        print_warning("No backends configured")
        return

    backends = [CommandBackend(backend_config) for backend_config in selected]
    logger.info("Reviewing backends: %s", ", ".join(b.section_name for b in backends))

    todo = collect_unmanaged(backends)
    run_review(todo, config.groups, dry_run=dry_run)


def select_backends(
    config: PacReviewConfig,
    names: Tuple[str, ...],
) -> List[BackendConfig]:
    """Return the backends named in ``names``, or all when none are named.

    The configuration order is kept regardless of the order of ``names``.

    Raises:
        click.BadParameter: A name does not match any configured backend.
    """
    if not names:
        return list(config.backends)

    unknown = [name for name in names if config.get_backend(name) is None]
    if unknown:
        raise click.BadParameter(
            f"unknown backend(s): {', '.join(unknown)}",
            param_hint="'--backend'",
        )

    return [backend for backend in config.backends if backend.name in names]
