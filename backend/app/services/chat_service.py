"""Investment Q&A backed by an LLM, with a canned answer when it is unavailable."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.config import settings
from app.llm.prompts.assistant import FALLBACK_RESPONSE, build_assistant_system_prompt
from app.services import listing_service
from app.utils.numbers import mean

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from app.llm.base import LLMProvider

logger = logging.getLogger(__name__)

# Listings summarized in the system prompt
CONTEXT_LISTING_LIMIT = 10


def build_system_prompt(db: Session) -> str:
    listings = listing_service.list_listings(db, limit=CONTEXT_LISTING_LIMIT)
    return build_assistant_system_prompt(
        property_count=len(listings),
        avg_price=mean(l.price for l in listings),
        avg_roi=mean(l.roi or 0 for l in listings),
    )


async def answer(db: Session, message: str, llm: LLMProvider) -> dict:
    """Ask the provider; any failure produces the fallback message instead."""
    if not llm.is_configured:
        logger.info("LLM provider %s not configured, using fallback", llm.provider_name)
        return {"response": FALLBACK_RESPONSE, "fallback": True, "provider": None}

    system_prompt = build_system_prompt(db)
    try:
        reply = await asyncio.wait_for(
            llm.complete(system_prompt, message),
            timeout=settings.llm_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.error(
            "LLM chat call timed out after %.1fs", settings.llm_timeout_seconds
        )
        return {"response": FALLBACK_RESPONSE, "fallback": True, "provider": None}
    except Exception:
        logger.exception("LLM chat call failed")
        return {"response": FALLBACK_RESPONSE, "fallback": True, "provider": None}

    if not reply.strip():
        logger.warning("LLM returned an empty answer, using fallback")
        return {"response": FALLBACK_RESPONSE, "fallback": True, "provider": None}

    return {"response": reply, "fallback": False, "provider": llm.provider_name}
