"""Domain entities - backend-agnostic record shapes"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal, Optional


TaskStatus = Literal["in-progress", "completed"]
WorkEventType = Literal["online", "offline", "deadline"]

TASK_STATUSES: tuple[str, ...] = ("in-progress", "completed")

AVATAR_URL = "https://api.dicebear.com/9.x/pixel-art/svg?seed={seed}"


def pixel_art_avatar(seed: str) -> str:
    """Generated avatar URL for an employee photo"""
    return AVATAR_URL.format(seed=seed)


@dataclass
class EmployeeEntity:
    """Employee directory record"""
    id: str
    name: str
    position: str = ""
    projects: list[str] = field(default_factory=list)
    hobbies: list[str] = field(default_factory=list)
    team: str = ""
    department: str = ""
    gender: str = ""
    manager: str = ""
    messenger: str = ""
    photo: str = ""
    birth_date: Optional[str] = None

    @property
    def short_name(self) -> str:
        """'Иванов Иван Иванович' -> 'Иванов И.И.'"""
        parts = self.name.split()
        if len(parts) < 2:
            return self.name
        initials = "".join(f"{part[0]}." for part in parts[1:])
        return f"{parts[0]} {initials}"


@dataclass
class EventEntity:
    """Engagement event (team building, lecture, sports day)"""
    id: str
    title: str
    date: date
    time: Optional[str] = None
    location: str = ""
    description: str = ""


@dataclass
class WorkEventEntity:
    """Calendar entry: meeting, presentation or deadline"""
    id: str
    title: str
    date: datetime
    end_date: datetime
    type: WorkEventType = "online"
    location: str = ""
    participants: list[str] = field(default_factory=list)
    description: str = ""


@dataclass
class TaskEntity:
    """Tracked task; only the status changes after creation"""
    title: str
    deadline: date
    id: Optional[str] = None
    description: str = ""
    status: TaskStatus = "in-progress"
    author_id: str = ""
    executor_ids: list[str] = field(default_factory=list)
