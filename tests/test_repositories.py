"""Tests for the in-memory record stores"""

from __future__ import annotations

from datetime import date

import pytest

from intranet_portal.db.config import settings
from intranet_portal.db.entities import TaskEntity
from intranet_portal.db.repositories.factory import get_unit_of_work
from intranet_portal.db.repositories.lookup import find_by_id, make_lookups
from intranet_portal.db.store import get_store, init_store, close_store
from intranet_portal.references import EntityKind


# ============ Store lifecycle ============


class TestStore:
    @pytest.mark.asyncio
    async def test_init_is_idempotent(self):
        first = await init_store()
        first.tasks.clear()
        second = await init_store()
        assert second is first
        assert second.tasks == []

    @pytest.mark.asyncio
    async def test_close_then_lazy_reseed(self):
        await close_store()
        store = get_store()
        assert len(store.employees) == 5
        assert len(store.work_events) == 6


# ============ Employees ============


class TestEmployeeRepository:
    @pytest.mark.asyncio
    async def test_get(self, uow):
        employee = await uow.employees.get("2")
        assert employee.name == "Петрова Анна Сергеевна"

    @pytest.mark.asyncio
    async def test_get_unknown(self, uow):
        assert await uow.employees.get("999") is None

    @pytest.mark.asyncio
    async def test_get_by_full_name(self, uow):
        employee = await uow.employees.get_by_name("Козлов Дмитрий Александрович")
        assert employee.id == "4"

    @pytest.mark.asyncio
    async def test_get_by_short_name(self, uow):
        employee = await uow.employees.get_by_name("Иванов И.И.")
        assert employee.id == "1"

    @pytest.mark.asyncio
    async def test_get_by_partial_initials(self, uow):
        employee = await uow.employees.get_by_name("Смирнова Е.")
        assert employee.id == "5"

    @pytest.mark.asyncio
    async def test_get_by_name_wrong_initials(self, uow):
        assert await uow.employees.get_by_name("Иванов П.П.") is None

    @pytest.mark.asyncio
    async def test_get_by_single_word(self, uow):
        assert await uow.employees.get_by_name("Иванов") is None

    @pytest.mark.asyncio
    async def test_short_name_property(self, uow):
        employee = await uow.employees.get("3")
        assert employee.short_name == "Сидоров А.В."

    @pytest.mark.asyncio
    async def test_search_default_fields(self, uow):
        results = await uow.employees.search("дизайнер")
        assert [e.id for e in results] == ["2"]

    @pytest.mark.asyncio
    async def test_search_custom_fields(self, uow):
        results = await uow.employees.search("HR", fields=["team"])
        assert [e.id for e in results] == ["5"]

    @pytest.mark.asyncio
    async def test_list_projects(self, uow):
        assert await uow.employees.list_projects() == ["Альфа", "Бета", "Руководство"]

    @pytest.mark.asyncio
    async def test_list_hobbies(self, uow):
        hobbies = await uow.employees.list_hobbies()
        assert hobbies[:3] == ["Шахматы", "Программирование", "Фотография"]
        assert len(hobbies) == len(set(hobbies)) == 9


# ============ Events ============


class TestEventRepositories:
    @pytest.mark.asyncio
    async def test_event_get(self, uow):
        event = await uow.events.get("2")
        assert event.title == "Онлайн-лекция по AI"
        assert event.date == date(2025, 6, 20)

    @pytest.mark.asyncio
    async def test_event_search(self, uow):
        results = await uow.events.search("Zoom")
        assert [e.id for e in results] == ["2"]

    @pytest.mark.asyncio
    async def test_work_events_by_date(self, uow):
        results = await uow.work_events.list_by_date(date(2025, 6, 15))
        assert [e.id for e in results] == ["1"]

    @pytest.mark.asyncio
    async def test_work_events_in_range_inclusive(self, uow):
        results = await uow.work_events.list_in_range(date(2025, 6, 15), date(2025, 6, 20))
        assert [e.id for e in results] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_work_event_dates(self, uow):
        dates = await uow.work_events.list_dates()
        assert len(dates) == 6
        assert date(2025, 5, 28) in dates


# ============ Tasks ============


class TestTaskRepository:
    @pytest.mark.asyncio
    async def test_list_by_status(self, uow):
        completed = await uow.tasks.list(status="completed")
        assert [t.id for t in completed] == ["3"]

    @pytest.mark.asyncio
    async def test_append_assigns_id(self, uow):
        task = await uow.tasks.append(TaskEntity(title="Новая задача", deadline=date(2025, 7, 1)))
        assert task.id == "4"
        assert await uow.tasks.get("4") is task

    @pytest.mark.asyncio
    async def test_append_replaces_taken_id(self, uow):
        task = await uow.tasks.append(TaskEntity(id="1", title="Дубликат", deadline=date(2025, 7, 1)))
        assert task.id == "4"
        assert (await uow.tasks.get("1")).title == "Подготовить отчет за квартал"

    @pytest.mark.asyncio
    async def test_append_rejects_unknown_status(self, uow):
        with pytest.raises(ValueError):
            await uow.tasks.append(TaskEntity(title="x", deadline=date(2025, 7, 1), status="done"))

    @pytest.mark.asyncio
    async def test_update_status(self, uow):
        task = await uow.tasks.update_status("1", "completed")
        assert task.status == "completed"
        assert [t.id for t in await uow.tasks.list(status="completed")] == ["1", "3"]

    @pytest.mark.asyncio
    async def test_update_status_unknown_task(self, uow):
        assert await uow.tasks.update_status("999", "completed") is None

    @pytest.mark.asyncio
    async def test_search_within_status(self, uow):
        assert [t.id for t in await uow.tasks.search("отчет")] == ["1"]
        assert await uow.tasks.search("отчет", status="completed") == []


# ============ Factory & lookups ============


class TestFactoryAndLookups:
    @pytest.mark.asyncio
    async def test_unit_of_work_shares_store(self):
        async with get_unit_of_work() as uow:
            await uow.tasks.update_status("2", "completed")
        async with get_unit_of_work() as uow:
            assert (await uow.tasks.get("2")).status == "completed"

    @pytest.mark.asyncio
    async def test_unsupported_backend(self, monkeypatch):
        monkeypatch.setattr(settings, "backend", "postgres")
        with pytest.raises(ValueError):
            async with get_unit_of_work():
                pass

    @pytest.mark.asyncio
    async def test_find_by_id(self, uow):
        person = await find_by_id(uow, EntityKind.PERSON, "1")
        event = await find_by_id(uow, EntityKind.EVENT, "3")
        assert person.name == "Иванов Иван Иванович"
        assert event.title == "Спортивный день"

    @pytest.mark.asyncio
    async def test_make_lookups_covers_all_kinds(self, uow):
        lookups = make_lookups(uow)
        assert set(lookups) == set(EntityKind)
        assert await lookups[EntityKind.EVENT]("999") is None
