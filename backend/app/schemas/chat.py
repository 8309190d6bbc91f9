from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    context: dict[str, Any] | None = None


class ChatResponse(BaseModel):
    response: str
    fallback: bool = False
    provider: str | None = None
