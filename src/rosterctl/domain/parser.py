"""Free-text command parser.

Grammar (tokens are whitespace-separated, the first is case-insensitive)::

    add <name...> to <department...>
    remove <name...> from <department...>
    list [<department...>]
    exit

Names and departments may span several tokens.  The keyword splitting
them is located by scanning for the *first* token that equals it exactly,
so ``add Toto to Ops`` works but a person literally named ``to`` cannot be
added.

Examples:
    >>> parse("add Jane Doe to Engineering")
    Add(person=Person(name='Jane Doe', department='Engineering'))
    >>> parse("LIST")
    List(selector='all')
    >>> parse("foo bar")
    ParseError(reason='Invalid command')
"""

from __future__ import annotations

from collections.abc import Sequence

from rosterctl.domain.commands import (
    ALL_SELECTOR,
    Add,
    Command,
    Exit,
    List,
    ParseError,
    Person,
    Remove,
)

ADD_KEYWORD = "to"
REMOVE_KEYWORD = "from"

NO_NAME = "No name provided"
NO_DEPARTMENT = "No department provided"
INVALID_COMMAND = "Invalid command"
ADD_USAGE = "Usage: ADD <name> TO <department>"
REMOVE_USAGE = "Usage: REMOVE <name> FROM <department>"


def find_keyword(tokens: Sequence[str], keyword: str) -> int | None:
    """Return the index of the first token equal to *keyword*, or None."""
    for i, token in enumerate(tokens):
        if token == keyword:
            return i
    return None


def _parse_membership(
    args: Sequence[str],
    keyword: str,
    usage: str,
) -> Person | ParseError:
    """Split ``<name...> <keyword> <department...>`` into a Person."""
    if not args:
        return ParseError(NO_NAME)
    end = find_keyword(args, keyword)
    # Missing keyword and an empty name share the usage message.
    if not end:
        return ParseError(usage)
    department = args[end + 1 :]
    if not department:
        return ParseError(NO_DEPARTMENT)
    return Person(name=" ".join(args[:end]), department=" ".join(department))


def parse(line: str) -> Command:
    """Parse one input line into a :data:`Command`.

    Never raises; malformed input yields a :class:`ParseError`.
    """
    tokens = line.split()
    if not tokens:
        return ParseError(INVALID_COMMAND)

    key, args = tokens[0].lower(), tokens[1:]
    match key:
        case "add":
            person = _parse_membership(args, ADD_KEYWORD, ADD_USAGE)
            return person if isinstance(person, ParseError) else Add(person)
        case "remove":
            person = _parse_membership(args, REMOVE_KEYWORD, REMOVE_USAGE)
            return person if isinstance(person, ParseError) else Remove(person)
        case "list":
            return List(" ".join(args) if args else ALL_SELECTOR)
        case "exit":
            return Exit()
        case _:
            return ParseError(INVALID_COMMAND)
