"""Repository pattern for record store abstraction"""

from .base import (
    EmployeeRepository,
    EventRepository,
    WorkEventRepository,
    TaskRepository,
    UnitOfWork,
)

__all__ = [
    "EmployeeRepository",
    "EventRepository",
    "WorkEventRepository",
    "TaskRepository",
    "UnitOfWork",
]
