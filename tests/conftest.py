from __future__ import annotations

from typing import Callable, Generator, List, Optional

import pytest

from pacreview.backends.base import Backend
from pacreview.exceptions import TerminalError
from pacreview.models import Group, Package
from pacreview.utils.console import reconfigure_console


class FakeBackend(Backend):
    """In-memory backend recording every call made by the review."""

    def __init__(
        self,
        name: str = "fake",
        *,
        as_dependency: bool = True,
        assign_group: bool = True,
        info_error: Optional[Exception] = None,
        execute_error: Optional[Exception] = None,
    ) -> None:
        self._name = name
        self._as_dependency = as_dependency
        self._assign_group = assign_group
        self.info_error = info_error
        self.execute_error = execute_error
        self.info_calls: List[Package] = []
        self.executed: List[object] = []

    @property
    def section_name(self) -> str:
        return self._name

    def supports_as_dependency(self) -> bool:
        return self._as_dependency

    def supports_assign_group(self) -> bool:
        return self._assign_group

    def show_package_info(self, package: Package) -> None:
        self.info_calls.append(package)
        if self.info_error is not None:
            raise self.info_error

    def execute(self, strategy) -> None:
        self.executed.append(strategy)
        if self.execute_error is not None:
            raise self.execute_error


class ScriptedTerminal:
    """Replays keystrokes and lines; running out behaves like EOF."""

    def __init__(self) -> None:
        self.chars: List[str] = []
        self.lines: List[str] = []

    def type(self, *chars: str) -> "ScriptedTerminal":
        self.chars.extend(chars)
        return self

    def enter(self, *lines: str) -> "ScriptedTerminal":
        self.lines.extend(lines)
        return self

    def read_char(self) -> str:
        if not self.chars:
            raise TerminalError("Cannot read from terminal", operation="char")
        return self.chars.pop(0)

    def read_line(self) -> str:
        if not self.lines:
            raise TerminalError("Cannot read from terminal", operation="line")
        return self.lines.pop(0)


@pytest.fixture(autouse=True)
def reset_console() -> Generator[None, None, None]:
    """Give every test a fresh Rich console bound to the captured stdout."""
    reconfigure_console()
    yield
    reconfigure_console()


@pytest.fixture
def make_backend() -> Callable[..., FakeBackend]:
    """Factory for :class:`FakeBackend` instances."""
    return FakeBackend


@pytest.fixture
def terminal(monkeypatch: pytest.MonkeyPatch) -> ScriptedTerminal:
    """Route the review prompts to a scripted terminal."""
    script = ScriptedTerminal()
    monkeypatch.setattr("pacreview.review.ui.read_single_char", script.read_char)
    monkeypatch.setattr("pacreview.review.ui.read_line", script.read_line)
    return script


@pytest.fixture
def groups() -> List[Group]:
    """Three groups, deliberately not in name order."""
    return [
        Group.from_names("desktop", ["firefox"]),
        Group.from_names("base", ["git", "extra/vim"]),
        Group.from_names("devel", ["gcc"]),
    ]
