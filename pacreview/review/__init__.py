"""
Interactive review of packages that are installed but not declared.

:func:`review` asks the user what to do with every package of every
backend, previews the resulting strategies, asks for a single confirmation
and then executes the strategies backend by backend.

Quitting is reported through :class:`ContinueWithReview` rather than an
exception, and nothing is executed unless the whole review was completed
and confirmed. Execution is not transactional: if a backend fails, the
backends before it stay modified and the ones after it are not touched.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pacreview.backends.base import Backend
from pacreview.backends.todo import ToDoPerBackend
from pacreview.constants import CONFIRMATION_QUESTION, NOTHING_TO_DO
from pacreview.models import Group, Package
from pacreview.review.datastructures import (
    AsDependency,
    AssignGroup,
    ContinueWithReview,
    Delete,
    ReviewAction,
    ReviewIntention,
    ReviewsPerBackend,
)
from pacreview.review.strategy import Strategy
from pacreview.review.ui import ask_group, ask_user_action_for_package
from pacreview.utils.console import confirm, echo
from pacreview.utils.logger import get_logger

logger = get_logger("review")

__all__ = [
    "ContinueWithReview",
    "ReviewsPerBackend",
    "Strategy",
    "get_action_for_package",
    "review",
]


def review(
    todo_per_backend: ToDoPerBackend,
    groups: Iterable[Group],
    *,
    dry_run: bool = False,
) -> None:
    """Review every package of ``todo_per_backend`` and apply the decisions.

    Args:
        todo_per_backend: Packages needing a decision, per backend.
        groups: Groups packages can be assigned to.
        dry_run: Stop after showing the strategies.

    Raises:
        TerminalError: The terminal cannot be read.
        BackendError: A backend failed to show information or to execute.
    """
    sorted_groups: List[Group] = sorted(groups)

    if todo_per_backend.nothing_to_do_for_all_backends():
        echo(NOTHING_TO_DO)
        return

    reviews = ReviewsPerBackend()

    for backend, packages in todo_per_backend:
        actions: List[ReviewAction] = []
        for package in packages:
            echo(f"{backend.section_name}: {package}")
            decision = get_action_for_package(package, sorted_groups, actions, backend)
            if decision is ContinueWithReview.NO:
                logger.info("Review aborted by user")
                return
        reviews.push((backend, actions))

    if reviews.nothing_to_do():
        echo(NOTHING_TO_DO)
        return

    strategies = reviews.into_strategies()
    show_strategies(strategies)

    if dry_run:
        logger.info("Dry run, %d strategies not executed", len(strategies))
        return

    echo()
    if not confirm(CONFIRMATION_QUESTION, default=True, strict=True):
        logger.info("Review cancelled at confirmation")
        return

    for strategy in strategies:
        logger.debug("Executing strategy for %s", strategy.backend.section_name)
        strategy.execute()


def show_strategies(strategies: Sequence[Strategy]) -> None:
    """Print all strategies, separated by blank lines."""
    echo()
    for i, strategy in enumerate(strategies):
        if i:
            echo()
        strategy.show()


def get_action_for_package(
    package: Package,
    groups: Sequence[Group],
    reviews: List[ReviewAction],
    backend: Backend,
) -> ContinueWithReview:
    """Ask about ``package`` until a decision is made.

    At most one action is appended to ``reviews``; skipping appends none.

    Returns:
        ``ContinueWithReview.NO`` if the user quit, ``YES`` otherwise.

    Raises:
        AssertionError: An as-dependency or group decision was made for a
            backend that does not support it.
    """
    supports_as_dependency = backend.supports_as_dependency()
    can_assign_group = bool(groups) and backend.supports_assign_group()

    while True:
        intention = ask_user_action_for_package(supports_as_dependency, can_assign_group)

        if intention is ReviewIntention.AS_DEPENDENCY:
            if not backend.supports_as_dependency():
                raise AssertionError("backend does not support dependencies")
            reviews.append(AsDependency(package))
            break
        elif intention is ReviewIntention.ASSIGN_GROUP:
            if not backend.supports_assign_group():
                raise AssertionError("backend does not support group assignment")
            group = ask_group(groups)
            if group is not None:
                reviews.append(AssignGroup(package, group))
                break
        elif intention is ReviewIntention.DELETE:
            reviews.append(Delete(package))
            break
        elif intention is ReviewIntention.INFO:
            backend.show_package_info(package)
        elif intention is ReviewIntention.SKIP:
            break
        elif intention is ReviewIntention.QUIT:
            return ContinueWithReview.NO

    return ContinueWithReview.YES
