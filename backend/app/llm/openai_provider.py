from __future__ import annotations

from openai import AsyncOpenAI

from app.config import settings
from app.llm.base import LLMProvider

# The client refuses to start without a key; this placeholder only ever
# reaches the API when is_configured is already False.
_MISSING_KEY = "sk-not-configured"


class OpenAIProvider(LLMProvider):
    def __init__(self) -> None:
        self.client = AsyncOpenAI(
            api_key=settings.openai_api_key or _MISSING_KEY,
            timeout=settings.llm_timeout_seconds,
        )
        self._model = settings.openai_model

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return bool(settings.openai_api_key)

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self._model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        return response.choices[0].message.content or ""
