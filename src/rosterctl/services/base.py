"""BaseService, the foundation for services operating on a Registry.

Every service receives the :class:`Registry` it works on at construction
time.  There is no module-level registry; the shell owns one instance and
passes it in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rosterctl.domain.registry import Registry


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RosterService(BaseService):
            def add(self, person: Person) -> ServiceResult:
                self._registry.add(person)
                ...
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry
