from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Listing(Base):
    """Property for sale, entered by hand or imported from a listing feed.

    ``price_per_sqm``, ``rental_yield`` and ``roi`` are derived fields and are
    recomputed by :func:`app.services.metrics.enrich_with_metrics` before
    every write.
    """

    __tablename__ = "listings"
    __table_args__ = (Index("ix_listings_source_external_id", "source", "external_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    price: Mapped[float] = mapped_column(Float, nullable=False)
    size: Mapped[float] = mapped_column(Float, nullable=False)
    rooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    property_type: Mapped[str] = mapped_column(String(50), nullable=False)
    year_built: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    condition: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    current_rent: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    estimated_rent: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    rental_yield: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    price_per_sqm: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    roi: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    image_url: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    source: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    external_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=func.now(), onupdate=func.now()
    )
