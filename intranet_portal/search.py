"""Record search services over the directory, calendars and tasks"""

from __future__ import annotations

from datetime import date
from typing import Optional

from .db.entities import (
    EmployeeEntity,
    EventEntity,
    TaskEntity,
    TaskStatus,
    WorkEventEntity,
)
from .db.repositories.base import EMPLOYEE_SEARCH_FIELDS, UnitOfWork
from .fuzzy import rank_objects, score
from .observability import logger, track_latency


ALL_PROJECTS = "all"


# ============ Employees ============

@track_latency("search")
async def search_employees(
    uow: UnitOfWork,
    query: str,
    project: Optional[str] = None,
) -> list[EmployeeEntity]:
    """
    Filter by project, then rank by name, position and department.

    `project` of None or "all" disables the project filter.
    """
    employees = await uow.employees.list()
    if project and project != ALL_PROJECTS:
        employees = [e for e in employees if project in e.projects]

    results = rank_objects(employees, query, EMPLOYEE_SEARCH_FIELDS)
    logger.debug(f"Employee search '{query}' (project={project}): {len(results)} hits")
    return results


@track_latency("search")
async def find_employees_by_hobby(uow: UnitOfWork, hobby: str) -> list[EmployeeEntity]:
    """
    Employees with at least one hobby fuzzily matching `hobby`.

    An empty hobby matches every employee who has any hobby at all.
    """
    employees = await uow.employees.list()
    return [
        e for e in employees
        if any(score(own, hobby) > 0 for own in e.hobbies)
    ]


# ============ Events ============

@track_latency("search")
async def search_events(uow: UnitOfWork, query: str) -> list[EventEntity]:
    return await uow.events.search(query)


@track_latency("search")
async def search_work_events(uow: UnitOfWork, query: str) -> list[WorkEventEntity]:
    return await uow.work_events.search(query)


async def work_events_in_range(
    uow: UnitOfWork,
    start: date,
    end: Optional[date] = None,
) -> list[WorkEventEntity]:
    """Calendar entries between two days (inclusive); one day when `end` is None"""
    if end is None:
        return await uow.work_events.list_by_date(start)
    if end < start:
        raise ValueError(f"Range end {end} is before start {start}")
    return await uow.work_events.list_in_range(start, end)


async def resolve_participants(
    uow: UnitOfWork,
    work_event: WorkEventEntity,
) -> list[EmployeeEntity]:
    """Employees behind the short participant names; unknown names are skipped"""
    participants = []
    for name in work_event.participants:
        employee = await uow.employees.get_by_name(name)
        if employee is not None:
            participants.append(employee)
    return participants


# ============ Tasks ============

@track_latency("search")
async def search_tasks(
    uow: UnitOfWork,
    query: str,
    status: Optional[TaskStatus] = None,
) -> list[TaskEntity]:
    """Filter by status, then rank by title and description"""
    return await uow.tasks.search(query, status=status)


async def resolve_task_people(
    uow: UnitOfWork,
    task: TaskEntity,
) -> tuple[Optional[EmployeeEntity], list[EmployeeEntity]]:
    """Author and executors of a task; unknown executor IDs are skipped"""
    author = await uow.employees.get(task.author_id)
    executors = []
    for executor_id in task.executor_ids:
        employee = await uow.employees.get(executor_id)
        if employee is not None:
            executors.append(employee)
    return author, executors
