"""Packages awaiting review, grouped by backend."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from pacreview.backends.base import Backend
from pacreview.models import Package


class ToDoPerBackend:
    """Ordered list of ``(backend, packages)`` pairs to review.

    Backends are reviewed in insertion order and their packages in the
    order given here.
    """

    def __init__(self) -> None:
        self._items: List[Tuple[Backend, List[Package]]] = []

    def push(self, backend: Backend, packages: Sequence[Package]) -> None:
        self._items.append((backend, list(packages)))

    def nothing_to_do_for_all_backends(self) -> bool:
        """Return True if no backend has a package to review."""
        return all(not packages for _, packages in self._items)

    def __iter__(self) -> Iterator[Tuple[Backend, List[Package]]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
