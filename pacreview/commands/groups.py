"""Groups command: list the configured groups with their selection index."""

from __future__ import annotations

import click

from pacreview.context import pass_context, PacReviewContext
from pacreview.review.ui import format_enumerated_groups
from pacreview.utils import echo


@click.command()
@pass_context
def groups(ctx: PacReviewContext) -> None:
    """List the configured groups.

    The indices are the ones used when assigning a package to a group
    during a review.
    """
    configured = sorted(ctx.require_config().groups)

    if not configured:
        echo("no groups configured")
        return

    for line in format_enumerated_groups(configured):
        echo(line)
