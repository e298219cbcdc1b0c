"""Shared pytest fixtures and test helpers for rosterctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from rosterctl.domain.registry import Registry
from rosterctl.services.roster import RosterService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> Registry:
    """An empty registry."""
    return Registry()


@pytest.fixture
def service(registry: Registry) -> RosterService:
    """RosterService bound to the ``registry`` fixture."""
    return RosterService(registry)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no ROSTERCTL_* env vars.

    Keeps a developer's own rosterctl.toml out of config discovery.
    """
    for key in ("ROSTERCTL_CONFIG", "ROSTERCTL_QUIET", "ROSTERCTL_JSON_OUTPUT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state changed by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    roster = logging.getLogger("rosterctl")
    roster_level = roster.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    roster.setLevel(roster_level)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def assert_consistent(registry: Registry) -> None:
    """Assert the four registry invariants on a snapshot."""
    employees = registry.employees
    members = registry.department_members
    departments = registry.employee_departments

    # I1: roster == employees with at least one department
    assert set(employees) == {name for name, depts in departments.items() if depts}
    # I2: no empty department keys
    assert all(members.values())
    # I3: the two indices describe the same relation
    by_dept = {(name, dept) for dept, names in members.items() for name in names}
    by_name = {(name, dept) for name, depts in departments.items() for dept in depts}
    assert by_dept == by_name
    # I4: sorted and duplicate-free everywhere
    for seq in (employees, *members.values(), *departments.values()):
        assert list(seq) == sorted(set(seq))
