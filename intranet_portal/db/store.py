"""Process-wide in-memory record store and its lifecycle"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .entities import EmployeeEntity, EventEntity, TaskEntity, WorkEventEntity
from .fixtures import seed_employees, seed_events, seed_tasks, seed_work_events


@dataclass
class Store:
    """Record collections; only repositories touch these lists"""
    employees: list[EmployeeEntity] = field(default_factory=list)
    events: list[EventEntity] = field(default_factory=list)
    work_events: list[WorkEventEntity] = field(default_factory=list)
    tasks: list[TaskEntity] = field(default_factory=list)

    @classmethod
    def seeded(cls) -> "Store":
        return cls(
            employees=seed_employees(),
            events=seed_events(),
            work_events=seed_work_events(),
            tasks=seed_tasks(),
        )


_store: Optional[Store] = None


async def init_store() -> Store:
    """Populate the store from seed data (no-op if already initialized)"""
    global _store
    if _store is None:
        _store = Store.seeded()
    return _store


async def close_store() -> None:
    """Drop the store"""
    global _store
    _store = None


def reset_store() -> Store:
    """Replace the store with fresh seed data (useful for testing)"""
    global _store
    _store = Store.seeded()
    return _store


def get_store() -> Store:
    """Get the store, seeding it on first access"""
    global _store
    if _store is None:
        _store = Store.seeded()
    return _store
