"""Tests for BaseService."""

from rosterctl.domain.commands import Person
from rosterctl.domain.registry import Registry
from rosterctl.services.base import BaseService
from rosterctl.services.roster import RosterService


class TestBaseService:
    def test_registry_stored(self) -> None:
        registry = Registry()
        service = BaseService(registry)
        assert service.registry is registry

    def test_independent_instances(self) -> None:
        first = RosterService(Registry())
        second = RosterService(Registry())
        first.add(Person("Alice", "Eng"))
        assert first.registry.employees == ("Alice",)
        assert second.registry.employees == ()

    def test_roster_service_is_a_base_service(self) -> None:
        assert issubclass(RosterService, BaseService)
