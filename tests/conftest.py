"""Shared fixtures: fresh seed data and metrics for every test"""

from __future__ import annotations

import pytest
import pytest_asyncio

from intranet_portal.db.repositories.memory import MemoryUnitOfWork
from intranet_portal.db.store import Store, reset_store
from intranet_portal.observability import metrics


@pytest.fixture(autouse=True)
def fresh_store() -> Store:
    """Re-seed the process-wide store so writes never leak between tests"""
    store = reset_store()
    metrics.reset()
    return store


@pytest_asyncio.fixture
async def uow(fresh_store: Store):
    """In-memory unit of work over the seeded store"""
    async with MemoryUnitOfWork(fresh_store) as unit:
        yield unit
