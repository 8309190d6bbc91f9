from __future__ import annotations

import logging

from app.config import settings
from app.llm.base import LLMProvider

logger = logging.getLogger(__name__)

_provider_instance: LLMProvider | None = None


def get_llm_provider() -> LLMProvider:
    """Shared chat provider selected by ``settings.llm_provider``."""
    global _provider_instance
    if _provider_instance is None:
        if settings.llm_provider == "claude":
            from app.llm.claude_provider import ClaudeProvider

            _provider_instance = ClaudeProvider()
        elif settings.llm_provider == "openai":
            from app.llm.openai_provider import OpenAIProvider

            _provider_instance = OpenAIProvider()
        else:
            raise ValueError(f"Unknown LLM provider: {settings.llm_provider}")

        if not _provider_instance.is_configured:
            logger.warning(
                "LLM provider %s has no API key; the assistant will answer with "
                "its fallback message",
                _provider_instance.provider_name,
            )
    return _provider_instance


def reset_llm_provider() -> None:
    """Forget the cached provider so the next call re-reads settings."""
    global _provider_instance
    _provider_instance = None
