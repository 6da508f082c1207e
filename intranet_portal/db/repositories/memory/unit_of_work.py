"""In-memory Unit of Work implementation"""

from ...store import Store
from ..base import UnitOfWork
from .employee import MemoryEmployeeRepository
from .event import MemoryEventRepository, MemoryWorkEventRepository
from .task import MemoryTaskRepository


class MemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of Unit of Work pattern"""

    def __init__(self, store: Store):
        self._store = store
        self.employees = MemoryEmployeeRepository(store)
        self.events = MemoryEventRepository(store)
        self.work_events = MemoryWorkEventRepository(store)
        self.tasks = MemoryTaskRepository(store)

    async def __aenter__(self) -> "MemoryUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        # Writes apply immediately; there is nothing to commit or roll back
        pass
