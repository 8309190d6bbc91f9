from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from app.schemas.listing import ListingResponse

RiskTolerance = Literal["low", "medium", "high"]


class ScoreSet(BaseModel):
    investment: int
    location: int
    condition: int
    roi: int


class ListingAnalysis(BaseModel):
    property_id: int
    scores: ScoreSet
    recommendations: list[str]
    risks: list[str]
    opportunities: list[str]


class RecommendedListing(ListingResponse):
    score: int
    reasoning: str
