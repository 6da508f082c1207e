"""Abstract repository interfaces - backend agnostic"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence

from ...fuzzy import FieldAccessor
from ..entities import (
    EmployeeEntity,
    EventEntity,
    WorkEventEntity,
    TaskEntity,
    TaskStatus,
)


EMPLOYEE_SEARCH_FIELDS: tuple[str, ...] = ("name", "position", "department")
EVENT_SEARCH_FIELDS: tuple[str, ...] = ("title", "description", "location")
TASK_SEARCH_FIELDS: tuple[str, ...] = ("title", "description")


class EmployeeRepository(ABC):
    """Repository for the employee directory"""

    @abstractmethod
    async def list(self) -> list[EmployeeEntity]:
        """List all employees in directory order"""
        ...

    @abstractmethod
    async def get(self, employee_id: str) -> Optional[EmployeeEntity]:
        """Get employee by ID"""
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[EmployeeEntity]:
        """Get employee by full name or short form ('Иванов И.И.')"""
        ...

    @abstractmethod
    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
    ) -> list[EmployeeEntity]:
        """Fuzzy search, ranked best first"""
        ...

    @abstractmethod
    async def list_projects(self) -> list[str]:
        """Distinct project names in first-seen order"""
        ...

    @abstractmethod
    async def list_hobbies(self) -> list[str]:
        """Distinct hobbies in first-seen order"""
        ...


class EventRepository(ABC):
    """Repository for engagement events"""

    @abstractmethod
    async def list(self) -> list[EventEntity]:
        """List all events"""
        ...

    @abstractmethod
    async def get(self, event_id: str) -> Optional[EventEntity]:
        """Get event by ID"""
        ...

    @abstractmethod
    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
    ) -> list[EventEntity]:
        """Fuzzy search, ranked best first"""
        ...


class WorkEventRepository(ABC):
    """Repository for calendar entries"""

    @abstractmethod
    async def list(self) -> list[WorkEventEntity]:
        """List all calendar entries"""
        ...

    @abstractmethod
    async def get(self, event_id: str) -> Optional[WorkEventEntity]:
        """Get calendar entry by ID"""
        ...

    @abstractmethod
    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
    ) -> list[WorkEventEntity]:
        """Fuzzy search, ranked best first"""
        ...

    @abstractmethod
    async def list_by_date(self, day: date) -> list[WorkEventEntity]:
        """Entries starting on the given calendar day"""
        ...

    @abstractmethod
    async def list_in_range(self, start: date, end: date) -> list[WorkEventEntity]:
        """Entries starting between two calendar days, inclusive"""
        ...

    @abstractmethod
    async def list_dates(self) -> list[date]:
        """Start day of every entry"""
        ...


class TaskRepository(ABC):
    """Repository for tasks"""

    @abstractmethod
    async def list(self, status: Optional[TaskStatus] = None) -> list[TaskEntity]:
        """List tasks, optionally filtered by status"""
        ...

    @abstractmethod
    async def get(self, task_id: str) -> Optional[TaskEntity]:
        """Get task by ID"""
        ...

    @abstractmethod
    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
        status: Optional[TaskStatus] = None,
    ) -> list[TaskEntity]:
        """Fuzzy search within a status, ranked best first"""
        ...

    @abstractmethod
    async def append(self, entity: TaskEntity) -> TaskEntity:
        """Add a task, assigning an ID if missing"""
        ...

    @abstractmethod
    async def update_status(self, task_id: str, status: TaskStatus) -> Optional[TaskEntity]:
        """Update task status, return None for unknown ID"""
        ...


class UnitOfWork(ABC):
    """Scoped access to all record stores"""

    employees: EmployeeRepository
    events: EventRepository
    work_events: WorkEventRepository
    tasks: TaskRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        ...

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        ...
