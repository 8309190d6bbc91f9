from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.llm.base import LLMProvider
from app.llm.factory import get_llm_provider
from app.schemas.analysis import ListingAnalysis, RecommendedListing, RiskTolerance
from app.schemas.chat import ChatRequest, ChatResponse
from app.schemas.listing import ListingResponse
from app.services import chat_service, listing_service, scoring_service
from app.utils.exceptions import ListingNotFoundError

router = APIRouter(prefix="/ai")


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    db: Session = Depends(get_db),
    llm: LLMProvider = Depends(get_llm_provider),
) -> ChatResponse:
    result = await chat_service.answer(db, body.message, llm)
    return ChatResponse(**result)


@router.post("/analyze/{property_id}", response_model=ListingAnalysis)
def analyze_property(
    property_id: int, db: Session = Depends(get_db)
) -> ListingAnalysis:
    try:
        listing = listing_service.get_listing(db, property_id)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return ListingAnalysis(**scoring_service.analyze_listing(listing))


@router.get("/recommendations", response_model=list[RecommendedListing])
def get_recommendations(
    budget: float | None = None,
    risk_tolerance: RiskTolerance = "medium",
    db: Session = Depends(get_db),
) -> list[RecommendedListing]:
    recommended = listing_service.recommend_listings(db, budget, risk_tolerance)
    return [
        RecommendedListing(
            **ListingResponse.model_validate(r["listing"]).model_dump(),
            score=r["score"],
            reasoning=r["reasoning"],
        )
        for r in recommended
    ]
