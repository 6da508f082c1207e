"""In-memory implementations of EventRepository and WorkEventRepository"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ....fuzzy import FieldAccessor, rank_objects
from ...entities import EventEntity, WorkEventEntity
from ...store import Store
from ..base import EVENT_SEARCH_FIELDS, EventRepository, WorkEventRepository


class MemoryEventRepository(EventRepository):
    """Engagement events backed by the process-wide store"""

    def __init__(self, store: Store):
        self._store = store

    async def list(self) -> list[EventEntity]:
        return list(self._store.events)

    async def get(self, event_id: str) -> Optional[EventEntity]:
        for event in self._store.events:
            if event.id == event_id:
                return event
        return None

    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
    ) -> list[EventEntity]:
        return rank_objects(self._store.events, query, fields or EVENT_SEARCH_FIELDS)


class MemoryWorkEventRepository(WorkEventRepository):
    """Calendar entries backed by the process-wide store"""

    def __init__(self, store: Store):
        self._store = store

    async def list(self) -> list[WorkEventEntity]:
        return list(self._store.work_events)

    async def get(self, event_id: str) -> Optional[WorkEventEntity]:
        for event in self._store.work_events:
            if event.id == event_id:
                return event
        return None

    async def search(
        self,
        query: str,
        fields: Optional[Sequence[FieldAccessor]] = None,
    ) -> list[WorkEventEntity]:
        return rank_objects(self._store.work_events, query, fields or EVENT_SEARCH_FIELDS)

    async def list_by_date(self, day: date) -> list[WorkEventEntity]:
        return [e for e in self._store.work_events if e.date.date() == day]

    async def list_in_range(self, start: date, end: date) -> list[WorkEventEntity]:
        # Compare calendar days only, time of day is ignored
        return [e for e in self._store.work_events if start <= e.date.date() <= end]

    async def list_dates(self) -> list[date]:
        return [e.date.date() for e in self._store.work_events]
