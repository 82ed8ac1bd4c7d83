"""
Backend driven by user-configured external commands.

Every package-manager specific detail lives in the command templates of a
``[pacreview.backends.<name>]`` table, for example::

    [pacreview.backends.pacman]
    unmanaged = ["pacreview-unmanaged-pacman"]
    info = ["pacman", "-Qi", "{package}"]
    remove = ["sudo", "pacman", "-Rns", "{packages}"]
    as_dependency = ["sudo", "pacman", "-D", "--asdeps", "{packages}"]
    assign_group = ["sh", "-c", "echo {package} >> ~/groups/{group}"]

``{package}`` and ``{group}`` are substituted inside arguments. An argument
that is exactly ``{packages}`` expands to one argument per package. Commands
are run without a shell.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Iterable, List, Sequence

from pacreview.backends.base import Backend
from pacreview.backends.todo import ToDoPerBackend
from pacreview.config import BackendConfig
from pacreview.constants import (
    GROUP_PLACEHOLDER,
    PACKAGE_PLACEHOLDER,
    PACKAGES_PLACEHOLDER,
)
from pacreview.exceptions import BackendError
from pacreview.models import Group, Package
from pacreview.utils.logger import get_logger

if TYPE_CHECKING:
    from pacreview.review.strategy import Strategy

logger = get_logger("backends.command")


def render_single(template: Sequence[str], package: Package) -> List[str]:
    """Substitute ``{package}`` in every argument of ``template``."""
    return [arg.replace(PACKAGE_PLACEHOLDER, package.name) for arg in template]


def render_batch(template: Sequence[str], packages: Sequence[Package]) -> List[str]:
    """Expand each ``{packages}`` argument into all package names."""
    argv: List[str] = []
    for arg in template:
        if arg == PACKAGES_PLACEHOLDER:
            argv.extend(p.name for p in packages)
        else:
            argv.append(arg)
    return argv


def render_assignment(
    template: Sequence[str],
    package: Package,
    group: Group,
) -> List[str]:
    """Substitute ``{package}`` and ``{group}`` in every argument."""
    return [
        arg.replace(PACKAGE_PLACEHOLDER, package.name).replace(
            GROUP_PLACEHOLDER, group.name
        )
        for arg in template
    ]


class CommandBackend(Backend):
    """Backend whose operations are external commands from the configuration.

    Args:
        config: Validated backend configuration.
    """

    def __init__(self, config: BackendConfig) -> None:
        self.config = config

    @property
    def section_name(self) -> str:
        return self.config.name

    def supports_as_dependency(self) -> bool:
        return self.config.as_dependency is not None

    def supports_assign_group(self) -> bool:
        return self.config.assign_group is not None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_unmanaged_packages(self) -> List[Package]:
        """Run the ``unmanaged`` command and parse one package per line.

        Raises:
            BackendError: The command is missing or exits non-zero.
        """
        output = self._run(self.config.unmanaged, capture=True)
        try:
            packages = [
                Package.parse(line) for line in output.splitlines() if line.strip()
            ]
        except ValueError as exc:
            raise BackendError(
                f"Unexpected output of unmanaged command: {exc}",
                backend=self.section_name,
                command=self.config.unmanaged,
            ) from exc
        logger.info("%s: %d package(s) to review", self.section_name, len(packages))
        return packages

    def show_package_info(self, package: Package) -> None:
        self._run(render_single(self.config.info, package))

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, strategy: "Strategy") -> None:
        assign_template = self.config.assign_group
        if strategy.assign_group and assign_template is None:
            raise AssertionError("backend does not support group assignment")

        if strategy.to_delete:
            self._run(render_batch(self.config.remove, strategy.to_delete))

        if strategy.as_dependency:
            if self.config.as_dependency is None:
                raise AssertionError("backend does not support dependencies")
            self._run(render_batch(self.config.as_dependency, strategy.as_dependency))

        for package, group in strategy.assign_group:
            self._run(render_assignment(assign_template, package, group))

    def _run(self, argv: Sequence[str], *, capture: bool = False) -> str:
        """Run ``argv`` and return its standard output when captured.

        Without ``capture`` the command shares the terminal, so package
        managers can print progress and ask for passwords.
        """
        logger.debug("%s: running %s", self.section_name, " ".join(argv))
        try:
            completed = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE if capture else None,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise BackendError(
                f"Cannot run command: {exc}",
                backend=self.section_name,
                command=argv,
            ) from exc

        if completed.returncode != 0:
            raise BackendError(
                "Command failed",
                backend=self.section_name,
                command=argv,
                returncode=completed.returncode,
            )

        return completed.stdout or ""


def collect_unmanaged(backends: Iterable[CommandBackend]) -> ToDoPerBackend:
    """Query every backend in order for the packages needing review."""
    todo = ToDoPerBackend()
    for backend in backends:
        todo.push(backend, backend.get_unmanaged_packages())
    return todo
