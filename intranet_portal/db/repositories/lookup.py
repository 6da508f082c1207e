"""Resolve entity references against the record stores"""

from __future__ import annotations

from typing import Any, Optional

from ...references import EntityKind, Lookup
from .base import UnitOfWork


async def find_by_id(uow: UnitOfWork, kind: EntityKind, entity_id: str) -> Optional[Any]:
    """Fetch the record a reference of `kind` points to"""
    if kind is EntityKind.PERSON:
        return await uow.employees.get(entity_id)
    if kind is EntityKind.EVENT:
        return await uow.events.get(entity_id)
    return None


def make_lookups(uow: UnitOfWork) -> dict[EntityKind, Lookup]:
    """Lookup mapping for extract_references, one entry per kind"""

    def bind(kind: EntityKind) -> Lookup:
        async def lookup(entity_id: str) -> Optional[Any]:
            return await find_by_id(uow, kind, entity_id)
        return lookup

    return {kind: bind(kind) for kind in EntityKind}
