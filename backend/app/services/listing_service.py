"""Listing persistence: create, read, filter and bulk import."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from app.models.listing import Listing
from app.services.metrics import enrich_with_metrics, estimate_monthly_rent
from app.services.scoring_service import build_recommendation_reasoning, investment_score
from app.utils.exceptions import ListingNotFoundError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from app.schemas.listing import ListingFilters

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 5
# Listings slightly over budget are still worth showing
BUDGET_TOLERANCE = 1.1

_LISTING_COLUMNS = frozenset(c.key for c in Listing.__table__.columns) - {
    "id", "created_at", "updated_at", "price_per_sqm", "rental_yield", "roi",
}
_NOT_NULL_COLUMNS = frozenset(c.key for c in Listing.__table__.columns if not c.nullable)


def build_listing(raw: dict[str, Any]) -> Listing:
    """Turn a raw feed or user record into an enriched, unsaved Listing.

    Derived fields present in ``raw`` are ignored and recomputed.
    """
    fields = {k: v for k, v in raw.items() if k in _LISTING_COLUMNS}
    return enrich_with_metrics(Listing(**fields))


def create_listing(db: Session, data: dict[str, Any]) -> Listing:
    listing = build_listing(data)
    db.add(listing)
    db.commit()
    db.refresh(listing)
    logger.info(
        "Created listing %d in %s (roi=%s%%)", listing.id, listing.city, listing.roi
    )
    return listing


def get_listing(db: Session, listing_id: int) -> Listing:
    listing = db.query(Listing).filter(Listing.id == listing_id).first()
    if not listing:
        raise ListingNotFoundError(f"Property {listing_id} not found")
    return listing


def update_listing(db: Session, listing_id: int, updates: dict[str, Any]) -> Listing:
    """Apply a partial update and recompute the derived fields."""
    listing = get_listing(db, listing_id)
    # a rent still equal to the table estimate follows size and city changes
    rent_is_estimate = (
        "estimated_rent" not in updates
        and listing.estimated_rent == estimate_monthly_rent(listing)
    )
    for key, value in updates.items():
        if key not in _LISTING_COLUMNS:
            continue
        if value is None and key in _NOT_NULL_COLUMNS:
            logger.warning("Ignoring null %s for listing %d", key, listing_id)
            continue
        setattr(listing, key, value)

    if rent_is_estimate:
        listing.estimated_rent = None
    enrich_with_metrics(listing)
    db.commit()
    db.refresh(listing)
    return listing


def query_listings(db: Session, filters: ListingFilters | None = None) -> list[Listing]:
    """Listings matching every set filter, newest first."""
    query = db.query(Listing)
    if filters is not None:
        if filters.city:
            query = query.filter(Listing.city.ilike(f"%{filters.city}%"))
        if filters.min_price is not None:
            query = query.filter(Listing.price >= filters.min_price)
        if filters.max_price is not None:
            query = query.filter(Listing.price <= filters.max_price)
        if filters.min_size is not None:
            query = query.filter(Listing.size >= filters.min_size)
        if filters.max_size is not None:
            query = query.filter(Listing.size <= filters.max_size)
        if filters.property_type:
            query = query.filter(Listing.property_type == filters.property_type)
        if filters.min_roi is not None:
            query = query.filter(Listing.roi >= filters.min_roi)
    return query.order_by(Listing.created_at.desc(), Listing.id.desc()).all()


def list_listings(db: Session, limit: int | None = None) -> list[Listing]:
    query = db.query(Listing).order_by(Listing.id.asc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def _already_imported(db: Session, source: str | None, external_id: str | None) -> bool:
    if not source or not external_id:
        return False
    return (
        db.query(Listing.id)
        .filter(Listing.source == source, Listing.external_id == external_id)
        .first()
        is not None
    )


def import_listings(db: Session, raw_listings: list[dict[str, Any]]) -> list[Listing]:
    """Enrich and persist feed records one row at a time.

    A row that fails to save is rolled back and skipped; rows already stored
    under the same ``(source, external_id)`` are skipped too.
    """
    saved: list[Listing] = []
    for raw in raw_listings:
        if _already_imported(db, raw.get("source"), raw.get("external_id")):
            logger.info(
                "Skipping duplicate %s listing %s", raw.get("source"), raw.get("external_id")
            )
            continue
        listing = build_listing(raw)
        try:
            db.add(listing)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Error saving imported listing %s", raw.get("external_id"))
            continue
        db.refresh(listing)
        saved.append(listing)

    logger.info("Imported %d of %d fetched listings", len(saved), len(raw_listings))
    return saved


def recommend_listings(
    db: Session, budget: float | None = None, risk_tolerance: str = "medium"
) -> list[dict[str, Any]]:
    """Best listings by ROI, then yield, each with a score and reasoning."""
    query = db.query(Listing)
    if budget:
        query = query.filter(Listing.price <= budget * BUDGET_TOLERANCE)
    listings = (
        query.order_by(Listing.roi.desc(), Listing.rental_yield.desc())
        .limit(RECOMMENDATION_LIMIT)
        .all()
    )
    return [
        {
            "listing": listing,
            "score": investment_score(listing),
            "reasoning": build_recommendation_reasoning(listing, risk_tolerance),
        }
        for listing in listings
    ]
