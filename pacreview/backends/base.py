"""
Backend capability surface.

A backend represents one package-manager integration. The review engine
only talks to backends through this interface and never branches on the
concrete backend type; the capabilities it inspects are
:meth:`Backend.supports_as_dependency` and
:meth:`Backend.supports_assign_group`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pacreview.models import Package

if TYPE_CHECKING:
    from pacreview.review.strategy import Strategy


class Backend(ABC):
    """Abstract package-manager backend."""

    @property
    @abstractmethod
    def section_name(self) -> str:
        """Label identifying the backend in prompts and previews."""

    @abstractmethod
    def supports_as_dependency(self) -> bool:
        """Return True if packages can be marked as installed as dependency.

        The value must stay constant for the lifetime of the instance.
        """

    @abstractmethod
    def supports_assign_group(self) -> bool:
        """Return True if packages can be declared in a group.

        The value must stay constant for the lifetime of the instance.
        """

    @abstractmethod
    def show_package_info(self, package: Package) -> None:
        """Print backend information about ``package``.

        Raises:
            BackendError: The information could not be retrieved.
        """

    @abstractmethod
    def execute(self, strategy: "Strategy") -> None:
        """Apply every operation of ``strategy``.

        Raises:
            BackendError: An operation failed. Operations that already ran
                are not reverted.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.section_name!r})"
