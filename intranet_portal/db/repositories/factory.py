"""Repository factory for backend selection"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from ..config import settings
from .base import UnitOfWork


@asynccontextmanager
async def get_unit_of_work() -> AsyncGenerator[UnitOfWork, None]:
    """
    Get a Unit of Work based on configured backend.

    Usage:
        async with get_unit_of_work() as uow:
            employee = await uow.employees.get("1")
    """
    backend = getattr(settings, "backend", "memory")

    if backend == "memory":
        from ..store import get_store
        from .memory import MemoryUnitOfWork

        async with MemoryUnitOfWork(get_store()) as uow:
            yield uow
    else:
        raise ValueError(f"Unsupported record store backend: {backend}")
