"""In-memory repository implementations"""

from .employee import MemoryEmployeeRepository
from .event import MemoryEventRepository, MemoryWorkEventRepository
from .task import MemoryTaskRepository
from .unit_of_work import MemoryUnitOfWork

__all__ = [
    "MemoryEmployeeRepository",
    "MemoryEventRepository",
    "MemoryWorkEventRepository",
    "MemoryTaskRepository",
    "MemoryUnitOfWork",
]
