from __future__ import annotations

import pytest

from pacreview.backends.todo import ToDoPerBackend
from pacreview.models import Package


@pytest.mark.unit
class TestToDoPerBackend:
    """Tests for the review input container."""

    def test_empty(self) -> None:
        """Test an empty container has nothing to do."""
        todo = ToDoPerBackend()

        assert todo.nothing_to_do_for_all_backends() is True
        assert len(todo) == 0

    def test_backends_without_packages(self, make_backend) -> None:
        """Test backends with empty lists have nothing to do."""
        todo = ToDoPerBackend()
        todo.push(make_backend("x"), [])
        todo.push(make_backend("y"), [])

        assert todo.nothing_to_do_for_all_backends() is True
        assert len(todo) == 2

    def test_one_package_is_enough(self, make_backend) -> None:
        """Test a single package anywhere means there is work."""
        todo = ToDoPerBackend()
        todo.push(make_backend("x"), [])
        todo.push(make_backend("y"), [Package("a")])

        assert todo.nothing_to_do_for_all_backends() is False

    def test_order_preserved(self, make_backend) -> None:
        """Test backends and packages iterate in insertion order."""
        x, y = make_backend("x"), make_backend("y")
        todo = ToDoPerBackend()
        todo.push(y, [Package("b"), Package("a")])
        todo.push(x, [Package("c")])

        assert [(b, [p.name for p in ps]) for b, ps in todo] == [
            (y, ["b", "a"]),
            (x, ["c"]),
        ]

    def test_push_copies_packages(self, make_backend) -> None:
        """Test later changes to the pushed list do not leak in."""
        packages = [Package("a")]
        todo = ToDoPerBackend()
        todo.push(make_backend(), packages)

        packages.append(Package("b"))

        assert [p for _, ps in todo for p in ps] == [Package("a")]
