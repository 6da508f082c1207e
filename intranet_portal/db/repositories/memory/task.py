"""In-memory implementation of TaskRepository"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ....fuzzy import FieldAccessor, rank_objects
from ...entities import TASK_STATUSES, TaskEntity, TaskStatus
from ...store import Store
from ..base import TASK_SEARCH_FIELDS, TaskRepository


class MemoryTaskRepository(TaskRepository):
    """Tasks backed by the process-wide store"""

    def __init__(self, store: Store):
        self._store = store

    def _filtered(self, status: Optional[TaskStatus]) -> list[TaskEntity]:
        if status is None:
            return list(self._store.tasks)
        return [t for t in self._store.tasks if t.status == status]

    def _next_id(self) -> str:
        """Next free numeric ID (collection IDs are decimal strings)"""
        numeric = [int(t.id) for t in self._store.tasks if t.id and t.id.isdigit()]
        candidate = max(numeric, default=0) + 1
        taken = {t.id for t in self._store.tasks}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    async def list(self, status: Optional[TaskStatus] = None) -> list[TaskEntity]:
        return self._filtered(status)

    async def get(self, task_id: str) -> Optional[TaskEntity]:
        for task in self._store.tasks:
            if task.id == task_id:
                return task
        return None

    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
        status: Optional[TaskStatus] = None,
    ) -> list[TaskEntity]:
        return rank_objects(self._filtered(status), query, fields or TASK_SEARCH_FIELDS)

    async def append(self, entity: TaskEntity) -> TaskEntity:
        if entity.status not in TASK_STATUSES:
            raise ValueError(f"Unknown task status: {entity.status}")
        if not entity.id or await self.get(entity.id) is not None:
            entity = replace(entity, id=self._next_id())
        self._store.tasks.append(entity)
        return entity

    async def update_status(self, task_id: str, status: TaskStatus) -> Optional[TaskEntity]:
        if status not in TASK_STATUSES:
            raise ValueError(f"Unknown task status: {status}")
        task = await self.get(task_id)
        if task is None:
            return None
        task.status = status
        return task
