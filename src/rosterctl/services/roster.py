"""RosterService: applies parsed commands to the registry.

Every parsed line goes through :meth:`RosterService.execute`, which
dispatches on the command class.  Parse failures become ``ok=False``
results; the registry itself never fails.
"""

from __future__ import annotations

import logging

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
from rosterctl.domain.parser import parse
from rosterctl.services.base import BaseService
from rosterctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

PARSE_ERROR = "PARSE_ERROR"


class RosterService(BaseService):
    """Add, remove and list memberships in the owned registry."""

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, person: Person) -> ServiceResult:
        """Add one membership. Always succeeds."""
        self._registry.add(person)
        logger.debug("Added %s to %s", person.name, person.department)
        return ServiceResult(
            ok=True,
            op="add",
            data={"name": person.name, "department": person.department},
        )

    def remove(self, person: Person) -> ServiceResult:
        """Remove one membership. Unknown memberships are a silent no-op."""
        self._registry.remove(person)
        logger.debug("Removed %s from %s", person.name, person.department)
        return ServiceResult(
            ok=True,
            op="remove",
            data={"name": person.name, "department": person.department},
        )

    def list(self, selector: str = ALL_SELECTOR) -> ServiceResult:
        """List every employee or the members of one department.

        An unknown department is not an error: the result is ``ok`` with
        ``found`` set to False.
        """
        names = self._registry.list(selector)
        found = names is not None
        logger.debug("Listed %s (found=%s)", selector, found)
        return ServiceResult(
            ok=True,
            op="list",
            data={
                "selector": selector,
                "all": selector == ALL_SELECTOR,
                "found": found,
                "names": list(names or ()),
                "count": len(names or ()),
            },
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def execute(self, command: Command) -> ServiceResult:
        """Apply a parsed command and return its result."""
        match command:
            case Add(person=person):
                return self.add(person)
            case Remove(person=person):
                return self.remove(person)
            case List(selector=selector):
                return self.list(selector)
            case Exit():
                return ServiceResult(ok=True, op="exit")
            case ParseError(reason=reason):
                logger.debug("Rejected input: %s", reason)
                return ServiceResult(
                    ok=False,
                    op="parse",
                    error=ServiceError(code=PARSE_ERROR, message=reason),
                )
        raise TypeError(f"Unsupported command: {command!r}")

    def run_line(self, line: str) -> ServiceResult:
        """Parse *line* and execute it."""
        return self.execute(parse(line))
