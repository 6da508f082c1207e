"""In-memory implementation of EmployeeRepository"""

from __future__ import annotations

from typing import Optional, Sequence

from ....fuzzy import FieldAccessor, rank_objects
from ...entities import EmployeeEntity
from ...store import Store
from ..base import EMPLOYEE_SEARCH_FIELDS, EmployeeRepository


def _initials(parts: Sequence[str]) -> str:
    return "".join(part[0] for part in parts if part)


class MemoryEmployeeRepository(EmployeeRepository):
    """Employee directory backed by the process-wide store"""

    def __init__(self, store: Store):
        self._store = store

    async def list(self) -> list[EmployeeEntity]:
        return list(self._store.employees)

    async def get(self, employee_id: str) -> Optional[EmployeeEntity]:
        for employee in self._store.employees:
            if employee.id == employee_id:
                return employee
        return None

    async def get_by_name(self, name: str) -> Optional[EmployeeEntity]:
        """
        Match a full name exactly, else a short form.

        Short forms are "Lastname I.I." as used in calendar participant
        lists; initials are compared with dots stripped.
        """
        for employee in self._store.employees:
            if employee.name == name:
                return employee

        parts = name.split()
        if len(parts) < 2:
            return None

        last_name = parts[0]
        initials = "".join(parts[1:]).replace(".", "")
        if not initials:
            return None

        for employee in self._store.employees:
            emp_parts = employee.name.split()
            if emp_parts and emp_parts[0] == last_name and initials in _initials(emp_parts[1:]):
                return employee
        return None

    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
    ) -> list[EmployeeEntity]:
        return rank_objects(self._store.employees, query, fields or EMPLOYEE_SEARCH_FIELDS)

    async def list_projects(self) -> list[str]:
        seen: dict[str, None] = {}
        for employee in self._store.employees:
            for project in employee.projects:
                seen.setdefault(project, None)
        return list(seen)

    async def list_hobbies(self) -> list[str]:
        seen: dict[str, None] = {}
        for employee in self._store.employees:
            for hobby in employee.hobbies:
                seen.setdefault(hobby, None)
        return list(seen)
