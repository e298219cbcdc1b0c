"""Command values produced by the parser.

The command set is closed: every parsed line becomes exactly one of
:class:`Add`, :class:`Remove`, :class:`List`, :class:`Exit` or
:class:`ParseError`.  Callers dispatch on the class with ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass

# Selector value for ``list`` with no department.
ALL_SELECTOR = "all"


@dataclass(frozen=True)
class Person:
    """One membership: an employee name paired with a department name."""

    name: str
    department: str


@dataclass(frozen=True)
class Add:
    person: Person


@dataclass(frozen=True)
class Remove:
    person: Person


@dataclass(frozen=True)
class List:
    """List every employee (``selector == "all"``) or one department."""

    selector: str = ALL_SELECTOR


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class ParseError:
    """A line that could not be parsed; ``reason`` is shown to the user."""

    reason: str


Command = Add | Remove | List | Exit | ParseError
