"""Groq intent classifier (OpenAI-compatible chat completions API)"""

from __future__ import annotations

from openai import AsyncOpenAI, OpenAIError

from ..observability import logger
from .base import UNKNOWN_INTENT, Intent, IntentClassifier, parse_intent


SYSTEM_PROMPT = """Ты помощник, который определяет намерение пользователя.
Определи, хочет ли пользователь получить информацию о мероприятиях (event_info)
или найти сотрудника (employee_search).
Ответь в формате JSON: {"type": "event_info" или "employee_search" или "unknown", "query": "поисковый запрос"}.
Если тип "unknown", поле query не требуется."""


class GroqIntentClassifier(IntentClassifier):
    """Intent classifier backed by a Groq-hosted chat model"""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.groq.com/openai/v1",
        model_name: str = "llama3-8b-8192",
        client: AsyncOpenAI | None = None,
    ):
        """
        Initialize Groq intent classifier.

        Args:
            api_key: Groq API key
            base_url: OpenAI-compatible endpoint
            model_name: Chat model to use
            client: Preconfigured client (tests inject a fake here)
        """
        self._client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)
        self._model_name = model_name

    @property
    def name(self) -> str:
        return "groq"

    @property
    def model_name(self) -> str:
        return self._model_name

    async def classify(self, message: str) -> Intent:
        try:
            response = await self._client.chat.completions.create(
                model=self._model_name,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": message},
                ],
                temperature=0.1,
            )
        except OpenAIError as e:
            logger.error(f"Error calling Groq API: {e}")
            return UNKNOWN_INTENT

        if not response.choices:
            return UNKNOWN_INTENT

        return parse_intent(response.choices[0].message.content)
