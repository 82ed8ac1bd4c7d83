"""
Data structures of the interactive review.

A review produces at most one :data:`ReviewAction` per package. The
actions of each backend are collected in :class:`ReviewsPerBackend`,
which turns them into one :class:`~pacreview.review.strategy.Strategy`
per backend that has something to do.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from pacreview.backends.base import Backend
from pacreview.models import Group, Package
from pacreview.review.strategy import Strategy


@dataclass(frozen=True)
class AsDependency:
    """Mark the package as installed as a dependency."""

    package: Package


@dataclass(frozen=True)
class Delete:
    """Remove the package from the system."""

    package: Package


@dataclass(frozen=True)
class AssignGroup:
    """Declare the package in ``group``.

    ``group`` is the same object the review session holds, not a copy.
    """

    package: Package
    group: Group


ReviewAction = Union[AsDependency, Delete, AssignGroup]


class ReviewIntention(Enum):
    """What the user asked for with a single keystroke."""

    AS_DEPENDENCY = "as-dependency"
    ASSIGN_GROUP = "assign-group"
    DELETE = "delete"
    INFO = "info"
    INVALID = "invalid"
    SKIP = "skip"
    QUIT = "quit"


class ContinueWithReview(Enum):
    """Whether the review goes on after a package has been handled."""

    YES = "yes"
    NO = "no"


class ReviewsPerBackend:
    """Actions collected per backend, in review order.

    Every :meth:`push` adds an independent entry; entries are never merged,
    even if the same backend is pushed twice.
    """

    def __init__(self) -> None:
        self._items: List[Tuple[Backend, List[ReviewAction]]] = []

    def push(self, value: Tuple[Backend, Sequence[ReviewAction]]) -> None:
        backend, actions = value
        self._items.append((backend, list(actions)))

    def nothing_to_do(self) -> bool:
        """Return True if no backend received any action."""
        return all(not actions for _, actions in self._items)

    def into_strategies(self) -> List[Strategy]:
        """Convert the reviews to one :class:`Strategy` per backend entry.

        Strategies without any operation are left out of the result.
        """
        result = []

        for backend, actions in self._items:
            to_delete, assign_group, as_dependency = extract_actions(actions)
            result.append(
                Strategy(
                    backend,
                    to_delete=to_delete,
                    as_dependency=as_dependency,
                    assign_group=assign_group,
                )
            )

        return [strategy for strategy in result if not strategy.nothing_to_do()]

    def __iter__(self) -> Iterator[Tuple[Backend, List[ReviewAction]]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def extract_actions(
    actions: Sequence[ReviewAction],
) -> Tuple[List[Package], List[Tuple[Package, Group]], List[Package]]:
    """Partition ``actions`` by kind, keeping their relative order.

    Returns:
        ``(to_delete, assign_group, as_dependency)``.
    """
    to_delete: List[Package] = []
    assign_group: List[Tuple[Package, Group]] = []
    as_dependency: List[Package] = []

    for action in actions:
        if isinstance(action, Delete):
            to_delete.append(action.package)
        elif isinstance(action, AssignGroup):
            assign_group.append((action.package, action.group))
        elif isinstance(action, AsDependency):
            as_dependency.append(action.package)
        else:
            raise TypeError(f"Unknown review action: {action!r}")

    return to_delete, assign_group, as_dependency
