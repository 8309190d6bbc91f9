from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.analytics import (
    CityComparison,
    MarketOverview,
    PriceTrend,
    PropertyTypeSummary,
    RoiBucket,
)
from app.services import analytics_service, listing_service

router = APIRouter(prefix="/analytics")


@router.get("/price-trends", response_model=list[PriceTrend])
def get_price_trends(
    city: str | None = None, db: Session = Depends(get_db)
) -> list[PriceTrend]:
    listings = listing_service.list_listings(db)
    return [PriceTrend(**row) for row in analytics_service.price_trends(listings, city)]


@router.get("/roi-distribution", response_model=list[RoiBucket])
def get_roi_distribution(db: Session = Depends(get_db)) -> list[RoiBucket]:
    listings = listing_service.list_listings(db)
    return [RoiBucket(**row) for row in analytics_service.roi_distribution(listings)]


@router.get("/property-types", response_model=list[PropertyTypeSummary])
def get_property_types(db: Session = Depends(get_db)) -> list[PropertyTypeSummary]:
    listings = listing_service.list_listings(db)
    return [
        PropertyTypeSummary(**row)
        for row in analytics_service.property_type_breakdown(listings)
    ]


@router.get("/market-overview", response_model=MarketOverview)
def get_market_overview(db: Session = Depends(get_db)) -> MarketOverview:
    listings = listing_service.list_listings(db)
    return MarketOverview(**analytics_service.summarize_market(listings))


@router.get("/city-comparison", response_model=list[CityComparison])
def get_city_comparison(db: Session = Depends(get_db)) -> list[CityComparison]:
    listings = listing_service.list_listings(db)
    return [CityComparison(**row) for row in analytics_service.city_comparison(listings)]
