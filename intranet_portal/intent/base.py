"""Abstract intent classifier interface"""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal, Optional

from ..observability import logger


IntentType = Literal["event_info", "employee_search", "unknown"]

INTENT_TYPES: tuple[str, ...] = ("event_info", "employee_search", "unknown")

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```")
# First "{" through the last "}", so nested objects stay whole
_BARE_OBJECT = re.compile(r"{[\s\S]*}")


@dataclass(frozen=True)
class Intent:
    """What the user is asking for"""
    type: IntentType = "unknown"
    query: Optional[str] = None


UNKNOWN_INTENT = Intent()


def parse_intent(content: Optional[str]) -> Intent:
    """
    Parse a model reply into an Intent.

    The JSON object may be wrapped in a ```json fence or surrounded by
    prose. Anything unparseable becomes the unknown intent.
    """
    if not content:
        return UNKNOWN_INTENT

    match = _FENCED_JSON.search(content)
    if match:
        payload = match.group(1)
    else:
        match = _BARE_OBJECT.search(content)
        payload = match.group(0) if match else content

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing intent response: {e}")
        return UNKNOWN_INTENT

    if not isinstance(data, dict):
        return UNKNOWN_INTENT

    intent_type = data.get("type")
    if intent_type not in INTENT_TYPES:
        intent_type = "unknown"

    query = data.get("query")
    if intent_type == "unknown" or not isinstance(query, str):
        query = None

    return Intent(type=intent_type, query=query)


class IntentClassifier(ABC):
    """Abstract interface for intent classifiers"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Classifier name (e.g., 'groq', 'none')"""
        ...

    @abstractmethod
    async def classify(self, message: str) -> Intent:
        """
        Classify a chat message.

        Implementations must not raise; failures map to the unknown intent.
        """
        ...


class NullIntentClassifier(IntentClassifier):
    """Classifier used when no external service is configured"""

    @property
    def name(self) -> str:
        return "none"

    async def classify(self, message: str) -> Intent:
        return UNKNOWN_INTENT
