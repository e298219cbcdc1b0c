"""The bidirectional membership index.

Two maps mirror one relation (employee belongs to department):

- ``department -> sorted member names``
- ``employee -> sorted department names``

plus ``employees``, the sorted roster of everyone with at least one
department.  All three are private and only change through :meth:`add`
and :meth:`remove`.

INVARIANTS (hold after every public call):

- I1: a name is in ``employees`` iff it has a non-empty department list.
- I2: a department key exists iff its member list is non-empty.
- I3: ``name in members[dept]`` iff ``dept in departments[name]``.
- I4: no sequence holds duplicates.

:meth:`remove` does not trust I3.  Each side is cleaned independently so
a membership present in only one map is still removed.
"""

from __future__ import annotations

from bisect import bisect_left

from rosterctl.domain.commands import ALL_SELECTOR, Person


def _insert_sorted(items: list[str], value: str) -> bool:
    """Insert *value* keeping *items* sorted; False if already present."""
    i = bisect_left(items, value)
    if i < len(items) and items[i] == value:
        return False
    items.insert(i, value)
    return True


def _discard_sorted(items: list[str], value: str) -> bool:
    """Remove *value* from sorted *items*; False if it was absent."""
    i = bisect_left(items, value)
    if i < len(items) and items[i] == value:
        del items[i]
        return True
    return False


class Registry:
    """In-memory employee/department registry.

    Usage::

        registry = Registry()
        registry.add(Person("Alice", "Eng"))
        registry.list("all")   # ('Alice',)
        registry.list("Eng")   # ('Alice',)
        registry.list("Ops")   # None
    """

    def __init__(self) -> None:
        self._employees: list[str] = []
        self._department_members: dict[str, list[str]] = {}
        self._employee_departments: dict[str, list[str]] = {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, person: Person) -> None:
        """Record that ``person.name`` belongs to ``person.department``.

        Idempotent: adding the same membership twice changes nothing.
        """
        name, department = person.name, person.department
        _insert_sorted(self._employees, name)
        _insert_sorted(self._department_members.setdefault(department, []), name)
        _insert_sorted(self._employee_departments.setdefault(name, []), department)

    def remove(self, person: Person) -> None:
        """Drop one membership, cascading empty departments and employees.

        Both indices are cleaned unconditionally.  Removing a membership
        that does not exist is a no-op.
        """
        name, department = person.name, person.department

        members = self._department_members.get(department)
        if members is not None:
            _discard_sorted(members, name)
            if not members:
                del self._department_members[department]

        departments = self._employee_departments.get(name)
        if departments is not None:
            _discard_sorted(departments, department)
            if not departments:
                del self._employee_departments[name]
                _discard_sorted(self._employees, name)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, selector: str = ALL_SELECTOR) -> tuple[str, ...] | None:
        """Return sorted names for *selector*.

        ``"all"`` yields every employee (possibly empty).  Any other value
        is a department name; an unknown department yields None.
        """
        if selector == ALL_SELECTOR:
            return tuple(self._employees)
        members = self._department_members.get(selector)
        if members is None:
            return None
        return tuple(members)

    @property
    def employees(self) -> tuple[str, ...]:
        return tuple(self._employees)

    @property
    def departments(self) -> tuple[str, ...]:
        return tuple(sorted(self._department_members))

    def departments_of(self, name: str) -> tuple[str, ...]:
        """Sorted departments *name* belongs to (empty if unknown)."""
        return tuple(self._employee_departments.get(name, ()))

    @property
    def department_members(self) -> dict[str, tuple[str, ...]]:
        """Snapshot of the department -> members index."""
        return {dept: tuple(names) for dept, names in self._department_members.items()}

    @property
    def employee_departments(self) -> dict[str, tuple[str, ...]]:
        """Snapshot of the employee -> departments index."""
        return {name: tuple(depts) for name, depts in self._employee_departments.items()}

    def __len__(self) -> int:
        return len(self._employees)

    def __repr__(self) -> str:
        return (
            f"Registry(employees={len(self._employees)}, "
            f"departments={len(self._department_members)})"
        )
