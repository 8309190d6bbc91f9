from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.analytics import StatsOverview
from app.schemas.financing import FinancingConfig, FinancingProjection
from app.schemas.listing import (
    FetchRequest,
    FetchResponse,
    ListingCreate,
    ListingFilters,
    ListingMetrics,
    ListingResponse,
    ListingUpdate,
)
from app.services import analytics_service, fetch_service, financing_service, listing_service
from app.services.metrics import break_even_years
from app.utils.exceptions import FinancingError, ListingNotFoundError

router = APIRouter(prefix="/properties")


@router.get("", response_model=list[ListingResponse])
def list_properties(
    filters: ListingFilters = Depends(),
    db: Session = Depends(get_db),
) -> list[ListingResponse]:
    listings = listing_service.query_listings(db, filters)
    return [ListingResponse.model_validate(l) for l in listings]


@router.get("/stats/overview", response_model=StatsOverview)
def get_stats_overview(db: Session = Depends(get_db)) -> StatsOverview:
    listings = listing_service.list_listings(db)
    return StatsOverview(**analytics_service.stats_overview(listings))


@router.post("", response_model=ListingResponse)
def create_property(
    body: ListingCreate, db: Session = Depends(get_db)
) -> ListingResponse:
    listing = listing_service.create_listing(db, body.model_dump())
    return ListingResponse.model_validate(listing)


@router.post("/fetch", response_model=FetchResponse)
async def fetch_properties(
    body: FetchRequest, db: Session = Depends(get_db)
) -> FetchResponse:
    """Pull listings from one feed (or ``all``) and store them."""
    try:
        saved = await fetch_service.fetch_and_import(db, body.source, body.city)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return FetchResponse(
        message=f"Fetched and saved {len(saved)} properties", count=len(saved)
    )


@router.get("/{property_id}", response_model=ListingResponse)
def get_property(
    property_id: int, db: Session = Depends(get_db)
) -> ListingResponse:
    try:
        listing = listing_service.get_listing(db, property_id)
        return ListingResponse.model_validate(listing)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.put("/{property_id}", response_model=ListingResponse)
def update_property(
    property_id: int,
    body: ListingUpdate,
    db: Session = Depends(get_db),
) -> ListingResponse:
    try:
        listing = listing_service.update_listing(
            db, property_id, body.model_dump(exclude_unset=True)
        )
        return ListingResponse.model_validate(listing)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/{property_id}/metrics", response_model=ListingMetrics)
def get_property_metrics(
    property_id: int, db: Session = Depends(get_db)
) -> ListingMetrics:
    try:
        listing = listing_service.get_listing(db, property_id)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return ListingMetrics(
        property_id=listing.id,
        estimated_rent=listing.estimated_rent,
        price_per_sqm=listing.price_per_sqm,
        rental_yield=listing.rental_yield,
        roi=listing.roi,
        break_even_years=break_even_years(listing),
    )


@router.post("/{property_id}/financing", response_model=FinancingProjection)
def project_property_financing(
    property_id: int,
    body: FinancingConfig,
    db: Session = Depends(get_db),
) -> FinancingProjection:
    try:
        listing = listing_service.get_listing(db, property_id)
        projection = financing_service.project_financing(listing, body)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except FinancingError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return FinancingProjection(**projection)
