"""FastAPI endpoints for the intranet portal"""

from datetime import date, datetime
from typing import Literal, Optional, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from . import __version__
from .chat import reply_to
from .db.config import settings
from .db.entities import TaskEntity, TaskStatus
from .db.repositories.factory import get_unit_of_work
from .db.repositories.lookup import make_lookups
from .db.store import close_store, init_store
from .intent import get_intent_classifier
from .observability import get_health_status, log_with_context, logger, metrics, track_errors
from .references import EntitySegment, Segment, resolve_segments
from .search import (
    find_employees_by_hobby,
    resolve_participants,
    resolve_task_people,
    search_employees,
    search_events,
    search_tasks,
    search_work_events,
    work_events_in_range,
)


app = FastAPI(
    title="Intranet Portal API",
    description="Employee directory, calendars, tasks and chat assistant",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ Schemas ============

class EmployeeOut(BaseModel):
    id: str
    name: str
    position: str
    projects: list[str]
    hobbies: list[str]
    team: str
    department: str
    gender: str
    manager: str
    messenger: str
    photo: str
    birth_date: Optional[str]

    class Config:
        from_attributes = True


class EventOut(BaseModel):
    id: str
    title: str
    date: date
    time: Optional[str]
    location: str
    description: str

    class Config:
        from_attributes = True


class WorkEventOut(BaseModel):
    id: str
    title: str
    date: datetime
    end_date: datetime
    type: str
    location: str
    participants: list[str]
    description: str

    class Config:
        from_attributes = True


class TaskOut(BaseModel):
    id: str
    title: str
    description: str
    deadline: date
    status: str
    author_id: str
    executor_ids: list[str]

    class Config:
        from_attributes = True


class TaskPeopleOut(BaseModel):
    author: Optional[EmployeeOut]
    executors: list[EmployeeOut]


class CreateTaskRequest(BaseModel):
    """New task; it starts in progress and is authored by the current user"""
    title: str = Field(..., min_length=1)
    description: str = ""
    deadline: date
    executor_ids: list[str] = Field(default_factory=list)


class UpdateTaskStatusRequest(BaseModel):
    status: TaskStatus


class TextSegmentOut(BaseModel):
    type: Literal["text"] = "text"
    text: str


class EntitySegmentOut(BaseModel):
    type: Literal["entity"] = "entity"
    kind: str
    id: str
    label: str
    raw: str


SegmentOut = Union[TextSegmentOut, EntitySegmentOut]


class ChatRequest(BaseModel):
    message: str


class ChatResponse(BaseModel):
    message: str
    segments: list[SegmentOut]


class RenderRequest(BaseModel):
    content: str


class RenderResponse(BaseModel):
    segments: list[SegmentOut]


class IntentResponse(BaseModel):
    type: str
    query: Optional[str]


# ============ Lifecycle ============

@app.on_event("startup")
async def startup():
    await init_store()
    logger.info(f"Portal started (backend={settings.backend}, intent={settings.intent_provider})")


@app.on_event("shutdown")
async def shutdown():
    await close_store()


# ============ Helpers ============

def _segment_out(segment: Segment) -> SegmentOut:
    if isinstance(segment, EntitySegment):
        return EntitySegmentOut(
            kind=segment.kind.value,
            id=segment.id,
            label=segment.label,
            raw=segment.raw,
        )
    return TextSegmentOut(text=segment.text)


@track_errors
async def _render(uow, content: str) -> list[SegmentOut]:
    segments = await resolve_segments(content, make_lookups(uow))
    return [_segment_out(s) for s in segments or []]


def _employee_out(entity) -> EmployeeOut:
    return EmployeeOut.model_validate(entity)


# ============ Health & Metrics ============

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "version": __version__}


@app.get("/health/detailed")
async def detailed_health():
    """Get detailed health status"""
    async with get_unit_of_work() as uow:
        return await get_health_status(uow)


@app.get("/metrics")
async def metrics_endpoint():
    """Get application metrics"""
    return metrics.to_dict()


@app.post("/metrics/reset")
async def reset_metrics():
    """Reset all metrics"""
    metrics.reset()
    return {"status": "reset"}


# ============ Employees ============

@app.get("/employees", response_model=list[EmployeeOut])
async def list_employees(
    query: str = "",
    project: Optional[str] = None,
    limit: int = Query(100, ge=1),
):
    """Search the directory by name, position or department"""
    async with get_unit_of_work() as uow:
        results = await search_employees(uow, query, project)
        return [_employee_out(e) for e in results[:limit]]


@app.get("/employees/by-hobby", response_model=list[EmployeeOut])
async def employees_by_hobby(hobby: str = ""):
    """Employees sharing a hobby; nothing until a hobby is picked"""
    if not hobby:
        return []
    async with get_unit_of_work() as uow:
        return [_employee_out(e) for e in await find_employees_by_hobby(uow, hobby)]


@app.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(employee_id: str):
    async with get_unit_of_work() as uow:
        employee = await uow.employees.get(employee_id)
        if not employee:
            raise HTTPException(status_code=404, detail="Employee not found")
        return _employee_out(employee)


@app.get("/projects", response_model=list[str])
async def list_projects():
    async with get_unit_of_work() as uow:
        return await uow.employees.list_projects()


@app.get("/hobbies", response_model=list[str])
async def list_hobbies():
    async with get_unit_of_work() as uow:
        return await uow.employees.list_hobbies()


# ============ Events ============

@app.get("/events", response_model=list[EventOut])
async def list_events(query: str = "", limit: int = Query(100, ge=1)):
    """Search engagement events by title, description or location"""
    async with get_unit_of_work() as uow:
        results = await search_events(uow, query)
        return [EventOut.model_validate(e) for e in results[:limit]]


@app.get("/events/{event_id}", response_model=EventOut)
async def get_event(event_id: str):
    async with get_unit_of_work() as uow:
        event = await uow.events.get(event_id)
        if not event:
            raise HTTPException(status_code=404, detail="Event not found")
        return EventOut.model_validate(event)


# ============ Work Events (Calendar) ============

@app.get("/work-events", response_model=list[WorkEventOut])
async def list_work_events(query: str = "", limit: int = Query(100, ge=1)):
    """Search calendar entries by title, description or location"""
    async with get_unit_of_work() as uow:
        results = await search_work_events(uow, query)
        return [WorkEventOut.model_validate(e) for e in results[:limit]]


@app.get("/work-events/dates", response_model=list[date])
async def list_work_event_dates():
    """Days that have at least one calendar entry"""
    async with get_unit_of_work() as uow:
        return await uow.work_events.list_dates()


@app.get("/work-events/range", response_model=list[WorkEventOut])
async def list_work_events_in_range(start: date, end: Optional[date] = None):
    """Calendar entries for one day, or for an inclusive range of days"""
    async with get_unit_of_work() as uow:
        try:
            results = await work_events_in_range(uow, start, end)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return [WorkEventOut.model_validate(e) for e in results]


@app.get("/work-events/{event_id}", response_model=WorkEventOut)
async def get_work_event(event_id: str):
    async with get_unit_of_work() as uow:
        event = await uow.work_events.get(event_id)
        if not event:
            raise HTTPException(status_code=404, detail="Work event not found")
        return WorkEventOut.model_validate(event)


@app.get("/work-events/{event_id}/participants", response_model=list[EmployeeOut])
async def get_work_event_participants(event_id: str):
    async with get_unit_of_work() as uow:
        event = await uow.work_events.get(event_id)
        if not event:
            raise HTTPException(status_code=404, detail="Work event not found")
        return [_employee_out(e) for e in await resolve_participants(uow, event)]


# ============ Tasks ============

@app.get("/tasks", response_model=list[TaskOut])
async def list_tasks(
    query: str = "",
    status: Optional[TaskStatus] = None,
    limit: int = Query(100, ge=1),
):
    """Search tasks by title or description within a status"""
    async with get_unit_of_work() as uow:
        results = await search_tasks(uow, query, status)
        return [TaskOut.model_validate(t) for t in results[:limit]]


@app.post("/tasks", response_model=TaskOut)
async def create_task(request: CreateTaskRequest):
    async with get_unit_of_work() as uow:
        task = await uow.tasks.append(TaskEntity(
            title=request.title,
            description=request.description,
            deadline=request.deadline,
            status="in-progress",
            author_id=settings.current_user_id,
            executor_ids=request.executor_ids,
        ))
        log_with_context(task_id=task.id, author_id=task.author_id).info("Task created")
        return TaskOut.model_validate(task)


@app.patch("/tasks/{task_id}/status", response_model=TaskOut)
async def update_task_status(task_id: str, request: UpdateTaskStatusRequest):
    async with get_unit_of_work() as uow:
        task = await uow.tasks.update_status(task_id, request.status)
        if not task:
            raise HTTPException(status_code=404, detail="Task not found")
        return TaskOut.model_validate(task)


@app.get("/tasks/{task_id}/people", response_model=TaskPeopleOut)
async def get_task_people(task_id: str):
    """Author and executors of a task"""
    async with get_unit_of_work() as uow:
        task = await uow.tasks.get(task_id)
        if not task:
            raise HTTPException(status_code=404, detail="Task not found")
        author, executors = await resolve_task_people(uow, task)
        return TaskPeopleOut(
            author=_employee_out(author) if author else None,
            executors=[_employee_out(e) for e in executors],
        )


# ============ Chat ============

@app.post("/chat", response_model=ChatResponse)
async def chat_endpoint(request: ChatRequest):
    """Reply to a chat message; references in the reply come pre-rendered"""
    try:
        message = reply_to(request.message)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid message format")

    try:
        async with get_unit_of_work() as uow:
            segments = await _render(uow, message)
    except Exception:
        # Already logged and counted by track_errors
        raise HTTPException(status_code=500, detail="Internal server error")

    return ChatResponse(message=message, segments=segments)


@app.post("/chat/render", response_model=RenderResponse)
async def render_endpoint(request: RenderRequest):
    """Render arbitrary text with inline references into segments"""
    async with get_unit_of_work() as uow:
        return RenderResponse(segments=await _render(uow, request.content))


@app.post("/chat/intent", response_model=IntentResponse)
async def intent_endpoint(request: ChatRequest):
    """Classify a message with the configured intent classifier"""
    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Invalid message format")
    intent = await get_intent_classifier().classify(request.message)
    return IntentResponse(type=intent.type, query=intent.query)
