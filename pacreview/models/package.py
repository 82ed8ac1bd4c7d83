"""
Package and group data models for pacreview.

A :class:`Package` identifies one installed package of a backend. A
:class:`Group` is a named, user-declared set of packages and is the target
of "assign to group" decisions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class Package:
    """Immutable identifier of an installed package.

    Attributes:
        name: Package name as reported by the backend.
        repo: Optional repository or source hint (``extra`` in ``extra/vim``).
    """

    name: str
    repo: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must not be empty")

    @classmethod
    def parse(cls, text: str) -> "Package":
        """Build a package from ``name`` or ``repo/name``.

        Surrounding whitespace is ignored. Only the first slash separates the
        repository from the name.

        Raises:
            ValueError: The name part is empty.
        """
        text = text.strip()
        repo, sep, name = text.partition("/")
        if not sep:
            return cls(text)
        return cls(name, repo or None)

    def __str__(self) -> str:
        if self.repo:
            return f"{self.repo}/{self.name}"
        return self.name


@dataclass(frozen=True, order=True)
class Group:
    """A named set of declared packages.

    Groups compare, sort and hash by name only, so a sorted group list is
    always in name order regardless of the packages they contain.

    Attributes:
        name: Group name, unique within one configuration.
        packages: Packages declared by the group.
    """

    name: str
    packages: FrozenSet[Package] = field(
        default_factory=frozenset,
        compare=False,
    )

    @classmethod
    def from_names(cls, name: str, package_names: Iterable[str]) -> "Group":
        """Build a group from package strings in ``repo/name`` notation."""
        return cls(name, frozenset(Package.parse(p) for p in package_names))

    def __contains__(self, package: object) -> bool:
        return package in self.packages

    def __str__(self) -> str:
        return self.name
