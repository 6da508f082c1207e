"""Rule-based chat assistant with inline employee and event references"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from itertools import count
from typing import Literal, Optional

from .db.repositories.base import UnitOfWork
from .db.repositories.lookup import make_lookups
from .observability import logger, metrics
from .references import RenderScope, Segment, resolve_segments


GREETING = "Привет! Я корпоративный бот. Чем могу помочь?"

# The active reply path always answers with one employee and one event
CANNED_REPLY = (
    "Вот информация, которую вы запрашивали: "
    "сотрудник <u:1> и предстоящее мероприятие <e:2>"
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def reply_to(message: str) -> str:
    """Assistant reply for a user message"""
    if not message or not message.strip():
        raise ValueError("Invalid message format")
    metrics.increment("chat_count")
    return CANNED_REPLY


@dataclass
class ChatMessage:
    """One message in a conversation"""
    id: str
    content: str
    role: Literal["user", "assistant"]
    timestamp: datetime = field(default_factory=_utcnow)


class ChatSession:
    """
    Conversation history plus per-message rendering.

    Rendering a message again supersedes any render of the same message
    still waiting on lookups; the superseded call returns None.
    """

    def __init__(self) -> None:
        self._ids = count(1)
        self._renders: dict[str, RenderScope] = {}
        self.messages: list[ChatMessage] = [self._message(GREETING, "assistant")]

    def _message(self, content: str, role: Literal["user", "assistant"]) -> ChatMessage:
        return ChatMessage(id=str(next(self._ids)), content=content, role=role)

    def get(self, message_id: str) -> Optional[ChatMessage]:
        for message in self.messages:
            if message.id == message_id:
                return message
        return None

    def send(self, text: str) -> ChatMessage:
        """Append the user message and the assistant reply, return the reply"""
        reply = reply_to(text)
        self.messages.append(self._message(text, "user"))
        answer = self._message(reply, "assistant")
        self.messages.append(answer)
        return answer

    async def render(self, message_id: str, uow: UnitOfWork) -> Optional[list[Segment]]:
        """Resolve a message into segments; None if unknown or superseded"""
        message = self.get(message_id)
        if message is None:
            return None

        previous = self._renders.get(message_id)
        if previous is not None:
            previous.cancel()

        scope = RenderScope()
        self._renders[message_id] = scope
        try:
            segments = await resolve_segments(message.content, make_lookups(uow), scope)
        finally:
            if self._renders.get(message_id) is scope:
                del self._renders[message_id]

        if segments is None:
            logger.debug(f"Render of message {message_id} superseded")
        return segments

    def close(self) -> None:
        """Cancel all pending renders"""
        for scope in self._renders.values():
            scope.cancel()
        self._renders.clear()
