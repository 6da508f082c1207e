"""API tests through the ASGI transport"""

from __future__ import annotations

import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from intranet_portal.api import app
from intranet_portal.chat import CANNED_REPLY
from intranet_portal.db.config import settings
from intranet_portal.intent import clear_classifier_cache
from intranet_portal.observability import metrics


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ============ Health & Metrics ============


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_detailed_health_reports_counts(client):
    resp = await client.get("/health/detailed")
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["checks"]["data"]["employees"] == 5
    assert data["checks"]["data"]["tasks"] == 3


@pytest.mark.asyncio
async def test_metrics_count_searches(client):
    await client.get("/employees", params={"query": "иван"})
    resp = await client.get("/metrics")
    assert resp.json()["counters"]["search_count"] == 1

    await client.post("/metrics/reset")
    resp = await client.get("/metrics")
    assert resp.json()["counters"]["search_count"] == 0


# ============ Employees ============


@pytest.mark.asyncio
async def test_employee_search(client):
    resp = await client.get("/employees", params={"query": "иван"})
    assert resp.status_code == 200
    assert [e["id"] for e in resp.json()] == ["1", "5"]


@pytest.mark.asyncio
async def test_employee_search_limit(client):
    resp = await client.get("/employees", params={"limit": 2})
    assert [e["id"] for e in resp.json()] == ["1", "2"]


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/employees", "/events", "/work-events", "/tasks"])
@pytest.mark.parametrize("limit", [-1, 0])
async def test_list_rejects_non_positive_limit(client, path, limit):
    resp = await client.get(path, params={"limit": limit})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_employee_project_filter(client):
    resp = await client.get("/employees", params={"project": "Бета"})
    assert [e["id"] for e in resp.json()] == ["2"]


@pytest.mark.asyncio
async def test_get_employee(client):
    resp = await client.get("/employees/3")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Сидоров Алексей Владимирович"


@pytest.mark.asyncio
async def test_get_employee_404(client):
    resp = await client.get("/employees/999")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_employees_by_hobby(client):
    resp = await client.get("/employees/by-hobby", params={"hobby": "Йога"})
    assert [e["id"] for e in resp.json()] == ["3"]


@pytest.mark.asyncio
async def test_employees_by_hobby_without_hobby(client):
    resp = await client.get("/employees/by-hobby")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_projects_and_hobbies(client):
    assert (await client.get("/projects")).json() == ["Альфа", "Бета", "Руководство"]
    assert "Кулинария" in (await client.get("/hobbies")).json()


# ============ Events ============


@pytest.mark.asyncio
async def test_events(client):
    resp = await client.get("/events", params={"query": "Горького"})
    assert [e["id"] for e in resp.json()] == ["1"]
    assert resp.json()[0]["date"] == "2025-06-15"


@pytest.mark.asyncio
async def test_event_404(client):
    assert (await client.get("/events/99")).status_code == 404


@pytest.mark.asyncio
async def test_work_events_range(client):
    resp = await client.get("/work-events/range", params={"start": "2025-06-17", "end": "2025-06-22"})
    assert [e["id"] for e in resp.json()] == ["2", "3", "4"]


@pytest.mark.asyncio
async def test_work_events_single_day(client):
    resp = await client.get("/work-events/range", params={"start": "2025-06-20"})
    assert [e["id"] for e in resp.json()] == ["3"]


@pytest.mark.asyncio
async def test_work_events_inverted_range(client):
    resp = await client.get("/work-events/range", params={"start": "2025-06-22", "end": "2025-06-17"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_work_event_dates(client):
    resp = await client.get("/work-events/dates")
    assert len(resp.json()) == 6


@pytest.mark.asyncio
async def test_work_event_participants(client):
    resp = await client.get("/work-events/3/participants")
    assert [e["id"] for e in resp.json()] == ["1", "2"]


# ============ Tasks ============


@pytest.mark.asyncio
async def test_create_and_complete_task(client):
    resp = await client.post("/tasks", json={
        "title": "Подготовить презентацию",
        "description": "Слайды для клиента",
        "deadline": "2025-07-01",
        "executor_ids": ["2", "4"],
    })
    assert resp.status_code == 200
    task = resp.json()
    assert task["status"] == "in-progress"
    assert task["author_id"] == settings.current_user_id

    resp = await client.patch(f"/tasks/{task['id']}/status", json={"status": "completed"})
    assert resp.json()["status"] == "completed"

    resp = await client.get("/tasks", params={"query": "презентацию", "status": "completed"})
    assert [t["id"] for t in resp.json()] == [task["id"]]


@pytest.mark.asyncio
async def test_create_task_logs_context(client, caplog):
    with caplog.at_level(logging.INFO, logger="portal"):
        resp = await client.post("/tasks", json={"title": "Собрать отзывы", "deadline": "2025-07-10"})

    records = [r for r in caplog.records if r.getMessage() == "Task created"]
    assert len(records) == 1
    assert records[0].extra == {"task_id": resp.json()["id"], "author_id": settings.current_user_id}


@pytest.mark.asyncio
async def test_create_task_requires_title(client):
    resp = await client.post("/tasks", json={"title": "", "deadline": "2025-07-01"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_unknown_task(client):
    resp = await client.patch("/tasks/999/status", json={"status": "completed"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_invalid_status(client):
    resp = await client.patch("/tasks/1/status", json={"status": "done"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_task_people(client):
    resp = await client.get("/tasks/3/people")
    data = resp.json()
    assert data["author"]["id"] == "5"
    assert [e["id"] for e in data["executors"]] == ["3", "4"]


# ============ Chat ============


@pytest.mark.asyncio
async def test_chat_reply_with_segments(client):
    resp = await client.post("/chat", json={"message": "Привет"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == CANNED_REPLY
    entities = [s for s in data["segments"] if s["type"] == "entity"]
    assert [(s["kind"], s["label"]) for s in entities] == [
        ("person", "Иванов Иван Иванович"),
        ("event", "Онлайн-лекция по AI"),
    ]


@pytest.mark.asyncio
async def test_chat_blank_message(client):
    resp = await client.post("/chat", json={"message": "   "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid message format"


@pytest.mark.asyncio
async def test_chat_render_failure_is_500(client, monkeypatch):
    async def broken(content, lookups, scope=None):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr("intranet_portal.api.resolve_segments", broken)

    resp = await client.post("/chat", json={"message": "Привет"})

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Internal server error"
    assert metrics.error_count == 1


@pytest.mark.asyncio
async def test_render_fallback_label(client):
    resp = await client.post("/chat/render", json={"content": "see <U:999> and <E:1>"})
    segments = resp.json()["segments"]
    assert segments[0] == {"type": "text", "text": "see "}
    assert segments[1]["label"] == "Сотрудник #999"
    assert segments[3]["label"] == "Корпоративный тимбилдинг"


@pytest.mark.asyncio
async def test_intent_without_provider(client, monkeypatch):
    monkeypatch.setattr(settings, "intent_provider", "none")
    clear_classifier_cache()
    resp = await client.post("/chat/intent", json={"message": "Когда спортивный день?"})
    assert resp.json() == {"type": "unknown", "query": None}
