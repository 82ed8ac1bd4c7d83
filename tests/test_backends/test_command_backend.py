"""Tests for the configuration-driven CommandBackend."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, call, patch

import pytest

from pacreview.backends import CommandBackend, ToDoPerBackend, collect_unmanaged
from pacreview.backends.command import render_assignment, render_batch, render_single
from pacreview.config import BackendConfig
from pacreview.exceptions import BackendError
from pacreview.models import Group, Package
from pacreview.review.strategy import Strategy


def _config(**overrides) -> BackendConfig:
    values = dict(
        name="pacman",
        unmanaged=("list-unmanaged",),
        info=("pacman", "-Qi", "{package}"),
        remove=("pacman", "-Rns", "{packages}"),
        as_dependency=("pacman", "-D", "--asdeps", "{packages}"),
        assign_group=("add-to-group", "{group}", "{package}"),
    )
    values.update(overrides)
    return BackendConfig(**values)


def _completed(returncode: int = 0, stdout: str = "") -> MagicMock:
    return MagicMock(returncode=returncode, stdout=stdout)


@pytest.fixture
def mock_run():
    """Patch subprocess.run inside the backend module."""
    with patch("pacreview.backends.command.subprocess.run") as mock:
        mock.return_value = _completed()
        yield mock


def _argv_calls(mock_run: MagicMock) -> list:
    return [c.args[0] for c in mock_run.call_args_list]


@pytest.mark.unit
class TestRendering:
    """Tests for command template rendering."""

    def test_render_single(self) -> None:
        """Test {package} is replaced inside arguments."""
        argv = render_single(("show", "--name={package}"), Package("vim", "extra"))

        assert argv == ["show", "--name=vim"]

    def test_render_batch_expands_packages(self) -> None:
        """Test a {packages} argument becomes one argument per package."""
        argv = render_batch(
            ("rm", "{packages}", "--yes"), [Package("a"), Package("b", "x")]
        )

        assert argv == ["rm", "a", "b", "--yes"]

    def test_render_batch_only_expands_whole_argument(self) -> None:
        """Test {packages} embedded in a longer argument is left alone."""
        argv = render_batch(("echo", "x{packages}"), [Package("a")])

        assert argv == ["echo", "x{packages}"]

    def test_render_assignment(self) -> None:
        """Test both placeholders are substituted."""
        argv = render_assignment(
            ("sh", "-c", "echo {package} >> {group}"), Package("vim"), Group("base")
        )

        assert argv == ["sh", "-c", "echo vim >> base"]


@pytest.mark.unit
class TestCapabilities:
    """Tests for the backend capability surface."""

    def test_section_name(self) -> None:
        """Test the section name is the configured table name."""
        assert CommandBackend(_config()).section_name == "pacman"

    def test_supports_as_dependency_when_configured(self) -> None:
        """Test the capability follows the as_dependency command."""
        assert CommandBackend(_config()).supports_as_dependency() is True
        assert CommandBackend(_config(as_dependency=None)).supports_as_dependency() is False

    def test_supports_assign_group_when_configured(self) -> None:
        """Test group assignment is a capability of the assign_group command."""
        assert CommandBackend(_config()).supports_assign_group() is True
        assert CommandBackend(_config(assign_group=None)).supports_assign_group() is False

    def test_repr(self) -> None:
        """Test repr shows class and section."""
        assert repr(CommandBackend(_config())) == "CommandBackend('pacman')"


@pytest.mark.unit
class TestQueries:
    """Tests for listing unmanaged packages and showing info."""

    def test_get_unmanaged_packages(self, mock_run: MagicMock) -> None:
        """Test one package is parsed per non-blank output line."""
        mock_run.return_value = _completed(stdout="extra/htop\n\nnano\n  \n")

        packages = CommandBackend(_config()).get_unmanaged_packages()

        assert packages == [Package("htop", "extra"), Package("nano")]
        assert mock_run.call_args.kwargs["stdout"] == subprocess.PIPE

    def test_get_unmanaged_bad_line(self, mock_run: MagicMock) -> None:
        """Test unparsable output is reported as a backend error."""
        mock_run.return_value = _completed(stdout="extra/\n")

        with pytest.raises(BackendError, match="Unexpected output"):
            CommandBackend(_config()).get_unmanaged_packages()

    def test_show_package_info(self, mock_run: MagicMock) -> None:
        """Test info runs the info template with output on the terminal."""
        CommandBackend(_config()).show_package_info(Package("htop", "extra"))

        mock_run.assert_called_once()
        assert mock_run.call_args.args[0] == ["pacman", "-Qi", "htop"]
        assert mock_run.call_args.kwargs["stdout"] is None

    def test_non_zero_exit_raises(self, mock_run: MagicMock) -> None:
        """Test a failing command raises BackendError with details."""
        mock_run.return_value = _completed(returncode=1)

        with pytest.raises(BackendError) as exc_info:
            CommandBackend(_config()).show_package_info(Package("nope"))

        assert exc_info.value.returncode == 1
        assert exc_info.value.backend == "pacman"
        assert exc_info.value.command == ["pacman", "-Qi", "nope"]

    def test_missing_executable_raises(self, mock_run: MagicMock) -> None:
        """Test an executable that cannot be started raises BackendError."""
        mock_run.side_effect = FileNotFoundError("no such file")

        with pytest.raises(BackendError, match="Cannot run command"):
            CommandBackend(_config()).get_unmanaged_packages()


@pytest.mark.unit
class TestExecute:
    """Tests for executing a strategy."""

    def test_runs_operations_in_order(self, mock_run: MagicMock) -> None:
        """Test remove, then as-dependency, then one call per assignment."""
        backend = CommandBackend(_config())
        base, devel = Group("base"), Group("devel")
        strategy = Strategy(
            backend,
            to_delete=[Package("a"), Package("b")],
            as_dependency=[Package("c")],
            assign_group=[(Package("d"), base), (Package("e"), devel)],
        )

        backend.execute(strategy)

        assert _argv_calls(mock_run) == [
            ["pacman", "-Rns", "a", "b"],
            ["pacman", "-D", "--asdeps", "c"],
            ["add-to-group", "base", "d"],
            ["add-to-group", "devel", "e"],
        ]

    def test_skips_empty_operations(self, mock_run: MagicMock) -> None:
        """Test nothing is run for empty lists."""
        backend = CommandBackend(_config())

        backend.execute(Strategy(backend, as_dependency=[Package("c")]))

        assert _argv_calls(mock_run) == [["pacman", "-D", "--asdeps", "c"]]

    def test_failure_stops_remaining_operations(self, mock_run: MagicMock) -> None:
        """Test a failing remove prevents the later operations."""
        mock_run.return_value = _completed(returncode=3)
        backend = CommandBackend(_config())

        with pytest.raises(BackendError):
            backend.execute(
                Strategy(
                    backend,
                    to_delete=[Package("a")],
                    as_dependency=[Package("b")],
                )
            )

        assert mock_run.call_count == 1

    def test_assignment_without_command_is_contract_violation(
        self, mock_run: MagicMock
    ) -> None:
        """Test group work on an incapable backend fails before anything runs."""
        backend = CommandBackend(_config(assign_group=None))
        strategy = Strategy(
            backend,
            to_delete=[Package("a")],
            assign_group=[(Package("b"), Group("base"))],
        )

        with pytest.raises(AssertionError, match="group assignment"):
            backend.execute(strategy)

        mock_run.assert_not_called()

    def test_as_dependency_without_command_is_contract_violation(
        self, mock_run: MagicMock
    ) -> None:
        """Test as-dependency work on an incapable backend is fatal."""
        backend = CommandBackend(_config(as_dependency=None))

        with pytest.raises(AssertionError):
            backend.execute(Strategy(backend, as_dependency=[Package("a")]))

        mock_run.assert_not_called()


@pytest.mark.unit
class TestCollectUnmanaged:
    """Tests for collect_unmanaged."""

    def test_collects_in_backend_order(self, mock_run: MagicMock) -> None:
        """Test every backend is queried once, in order."""
        mock_run.side_effect = [_completed(stdout="a\n"), _completed(stdout="")]
        first = CommandBackend(_config(name="first", unmanaged=("one",)))
        second = CommandBackend(_config(name="second", unmanaged=("two",)))

        todo = collect_unmanaged([first, second])

        assert isinstance(todo, ToDoPerBackend)
        assert [(b.section_name, p) for b, p in todo] == [
            ("first", [Package("a")]),
            ("second", []),
        ]
        assert mock_run.call_args_list[0] == call(
            ["one"], stdout=subprocess.PIPE, text=True, check=False
        )
