"""Seed data loaded into the in-memory store at startup"""

from __future__ import annotations

from datetime import date, datetime

from .entities import (
    EmployeeEntity,
    EventEntity,
    TaskEntity,
    WorkEventEntity,
    pixel_art_avatar,
)


def seed_employees() -> list[EmployeeEntity]:
    return [
        EmployeeEntity(
            id="1",
            name="Иванов Иван Иванович",
            position="Frontend-разработчик",
            projects=["Альфа"],
            hobbies=["Шахматы", "Программирование"],
            team="Разработка",
            department="IT",
            gender="Мужской",
            manager="Петров Петр Петрович",
            messenger="slack://user/U01234567",
            photo=pixel_art_avatar("ivanov"),
            birth_date="1990-01-01",
        ),
        EmployeeEntity(
            id="2",
            name="Петрова Анна Сергеевна",
            position="UX/UI дизайнер",
            projects=["Бета"],
            hobbies=["Фотография", "Рисование"],
            team="Дизайн",
            department="Продукт",
            gender="Женский",
            manager="Сидоров Алексей Владимирович",
            messenger="slack://user/U07654321",
            photo=pixel_art_avatar("petrova"),
            birth_date="1985-05-23",
        ),
        EmployeeEntity(
            id="3",
            name="Сидоров Алексей Владимирович",
            position="Руководитель отдела",
            projects=["Руководство"],
            hobbies=["Бег", "Плавание", "Йога"],
            team="Руководство",
            department="Продукт",
            gender="Мужской",
            manager="Козлов Дмитрий Александрович",
            messenger="slack://user/U09876543",
            photo=pixel_art_avatar("sidorov"),
            birth_date="1992-08-12",
        ),
        EmployeeEntity(
            id="4",
            name="Козлов Дмитрий Александрович",
            position="Backend-разработчик",
            projects=["Альфа"],
            hobbies=["Шахматы", "Настольные игры"],
            team="Разработка",
            department="IT",
            gender="Мужской",
            manager="Сидоров Алексей Владимирович",
            messenger="slack://user/U01234568",
            photo=pixel_art_avatar("kozlov"),
            birth_date="1988-03-14",
        ),
        EmployeeEntity(
            id="5",
            name="Смирнова Елена Игоревна",
            position="HR-менеджер",
            projects=["Руководство"],
            hobbies=["Бег", "Кулинария"],
            team="HR",
            department="Управление персоналом",
            gender="Женский",
            manager="Сидоров Алексей Владимирович",
            messenger="slack://user/U01234569",
            photo=pixel_art_avatar("smirnova"),
            birth_date="1993-07-05",
        ),
    ]


def seed_events() -> list[EventEntity]:
    return [
        EventEntity(
            id="1",
            title="Корпоративный тимбилдинг",
            date=date(2025, 6, 15),
            time="14:00",
            location="Парк Горького",
            description="Командные игры и барбекю на свежем воздухе",
        ),
        EventEntity(
            id="2",
            title="Онлайн-лекция по AI",
            date=date(2025, 6, 20),
            time="11:00",
            location="Zoom",
            description="Приглашенный спикер расскажет о последних трендах в AI",
        ),
        EventEntity(
            id="3",
            title="Спортивный день",
            date=date(2025, 6, 25),
            time="10:00",
            location="Спортивный центр 'Олимп'",
            description="Волейбол, баскетбол и настольный теннис",
        ),
    ]


def seed_work_events() -> list[WorkEventEntity]:
    return [
        WorkEventEntity(
            id="1",
            title="Еженедельный статус-митинг",
            date=datetime(2025, 6, 15, 10, 0),
            end_date=datetime(2025, 6, 15, 11, 0),
            type="online",
            location="Zoom",
            participants=["Иванов И.И.", "Петрова А.С.", "Сидоров А.В."],
            description="Обсуждение текущего статуса проектов и планирование на неделю",
        ),
        WorkEventEntity(
            id="2",
            title="Презентация нового продукта",
            date=datetime(2025, 6, 17, 14, 0),
            end_date=datetime(2025, 6, 17, 16, 0),
            type="offline",
            location="Конференц-зал 'Москва'",
            participants=["Иванов И.И.", "Петрова А.С.", "Сидоров А.В.", "Козлов Д.А."],
            description="Презентация нового продукта для клиентов и партнеров",
        ),
        WorkEventEntity(
            id="3",
            title="Дедлайн проекта 'Альфа'",
            date=datetime(2025, 6, 20, 18, 0),
            end_date=datetime(2025, 6, 20, 18, 0),
            type="deadline",
            location="",
            participants=["Иванов И.И.", "Петрова А.С."],
            description="Финальный срок сдачи проекта 'Альфа'",
        ),
        WorkEventEntity(
            id="4",
            title="Обучение по новым технологиям",
            date=datetime(2025, 6, 22, 11, 0),
            end_date=datetime(2025, 6, 22, 13, 0),
            type="online",
            location="Microsoft Teams",
            participants=["Иванов И.И.", "Козлов Д.А."],
            description="Обучение команды разработки новым технологиям",
        ),
        WorkEventEntity(
            id="5",
            title="Ежемесячное собрание отдела",
            date=datetime(2025, 5, 30, 9, 0),
            end_date=datetime(2025, 5, 30, 10, 30),
            type="offline",
            location="Конференц-зал 'Санкт-Петербург'",
            participants=["Иванов И.И.", "Петрова А.С.", "Сидоров А.В.", "Козлов Д.А.", "Смирнова Е.И."],
            description="Подведение итогов месяца и планирование на следующий",
        ),
        WorkEventEntity(
            id="6",
            title="Встреча с клиентом",
            date=datetime(2025, 5, 28, 15, 0),
            end_date=datetime(2025, 5, 28, 16, 0),
            type="online",
            location="Google Meet",
            participants=["Иванов И.И.", "Петрова А.С."],
            description="Обсуждение требований к новому проекту",
        ),
    ]


def seed_tasks() -> list[TaskEntity]:
    return [
        TaskEntity(
            id="1",
            title="Подготовить отчет за квартал",
            description="Собрать данные и подготовить квартальный отчет для руководства",
            deadline=date(2025, 6, 20),
            status="in-progress",
            author_id="3",
            executor_ids=["1", "2"],
        ),
        TaskEntity(
            id="2",
            title="Обновить дизайн главной страницы",
            description="Внести изменения в дизайн главной страницы согласно новому брендбуку",
            deadline=date(2025, 6, 25),
            status="in-progress",
            author_id="3",
            executor_ids=["2"],
        ),
        TaskEntity(
            id="3",
            title="Провести интервью с кандидатами",
            description="Провести собеседования с кандидатами на должность разработчика",
            deadline=date(2025, 6, 15),
            status="completed",
            author_id="5",
            executor_ids=["3", "4"],
        ),
    ]
