"""
Terminal dialogue of the review: the action prompt and group selection.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pacreview.models import Group
from pacreview.review.datastructures import ReviewIntention
from pacreview.utils.console import echo, read_line, read_single_char

_INTENTIONS = {
    "d": ReviewIntention.DELETE,
    "i": ReviewIntention.INFO,
    "q": ReviewIntention.QUIT,
    "s": ReviewIntention.SKIP,
}


def parse_intention(
    char: str,
    supports_as_dependency: bool,
    can_assign_group: bool = True,
) -> ReviewIntention:
    """Map one lowercased keystroke to a :class:`ReviewIntention`.

    ``a`` and ``g`` are only recognised when the matching option was
    offered; otherwise they are invalid like any other key.
    """
    if char == "a" and supports_as_dependency:
        return ReviewIntention.AS_DEPENDENCY
    if char == "g" and can_assign_group:
        return ReviewIntention.ASSIGN_GROUP
    return _INTENTIONS.get(char, ReviewIntention.INVALID)


def ask_user_action_for_package(
    supports_as_dependency: bool,
    can_assign_group: bool = True,
) -> ReviewIntention:
    """Ask the user for the desired action and return the intention.

    Raises:
        TerminalError: The terminal cannot be read.
    """
    print_query(supports_as_dependency, can_assign_group)
    return parse_intention(read_single_char(), supports_as_dependency, can_assign_group)


def build_query(supports_as_dependency: bool, can_assign_group: bool = True) -> str:
    """Return the space-terminated question listing the available actions."""
    query = ""

    if can_assign_group:
        query += "assign to (g)roup, "

    query += "(d)elete, (s)kip, (i)nfo, "

    if supports_as_dependency:
        query += "(a)s dependency, "

    return query + "(q)uit? "


def print_query(supports_as_dependency: bool, can_assign_group: bool = True) -> None:
    echo(build_query(supports_as_dependency, can_assign_group), end="")


def get_amount_of_digits_for_number(number: int) -> int:
    """Return the number of decimal digits of a positive ``number``.

    Raises:
        ValueError: ``number`` is zero or negative.
    """
    if number <= 0:
        raise ValueError(f"Expected a positive number, got {number}")
    return len(str(number))


def format_enumerated_groups(groups: Sequence[Group]) -> List[str]:
    """Return one ``index: name`` line per group, indices right-aligned.

    An empty sequence yields no lines.
    """
    if not groups:
        return []

    width = get_amount_of_digits_for_number(len(groups))
    return [f"{i:>{width}}: {group.name}" for i, group in enumerate(groups)]


def print_enumerated_groups(groups: Sequence[Group]) -> None:
    for line in format_enumerated_groups(groups):
        echo(line)


def ask_group(groups: Sequence[Group]) -> Optional[Group]:
    """Let the user pick one of ``groups`` by its index.

    Returns:
        The selected group object, or ``None`` if the reply is not a
        non-negative number or is out of range.

    Raises:
        TerminalError: The terminal cannot be read.
    """
    print_enumerated_groups(groups)
    reply = read_line().strip()

    if not reply.isdecimal():
        return None

    idx = int(reply)
    if idx < len(groups):
        return groups[idx]
    return None
