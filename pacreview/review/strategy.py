"""Execution plan of one backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from pacreview.backends.base import Backend
from pacreview.models import Group, Package
from pacreview.utils.console import echo


@dataclass
class Strategy:
    """Everything that will be done to the packages of one backend.

    Attributes:
        backend: Backend that executes the strategy.
        to_delete: Packages to remove.
        as_dependency: Packages to mark as installed as dependency.
        assign_group: ``(package, group)`` pairs to declare.
    """

    backend: Backend
    to_delete: List[Package] = field(default_factory=list)
    as_dependency: List[Package] = field(default_factory=list)
    assign_group: List[Tuple[Package, Group]] = field(default_factory=list)

    def nothing_to_do(self) -> bool:
        return not (self.to_delete or self.as_dependency or self.assign_group)

    def show(self) -> None:
        """Print the backend and its operations, grouped by kind."""
        echo(f"[{self.backend.section_name}]", style="section")

        if self.to_delete:
            echo("delete:")
            for package in self.to_delete:
                echo(f"  {package}")

        if self.as_dependency:
            echo("as dependency:")
            for package in self.as_dependency:
                echo(f"  {package}")

        if self.assign_group:
            echo("assign groups:")
            for package, group in self.assign_group:
                echo(f"  {package} -> {group.name}")

    def execute(self) -> None:
        """Apply the strategy through its backend.

        Raises:
            BackendError: The backend failed; earlier operations stay applied.
        """
        self.backend.execute(self)
