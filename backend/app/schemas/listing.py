from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

Condition = Literal["excellent", "good", "fair", "poor"]

# Columns a listing cannot exist without
REQUIRED_LISTING_FIELDS = (
    "title", "address", "city", "latitude", "longitude", "price", "size", "property_type",
)


class ListingCreate(BaseModel):
    title: str
    address: str
    city: str
    postal_code: str | None = None
    latitude: float
    longitude: float
    price: float = Field(gt=0)
    size: float = Field(gt=0)
    rooms: int | None = Field(default=None, ge=0)
    property_type: str
    year_built: int | None = None
    condition: Condition | None = None
    current_rent: float | None = None
    estimated_rent: float | None = Field(default=None, ge=0)
    image_url: str | None = None
    description: str | None = None
    source: str | None = None
    external_id: str | None = None


class ListingUpdate(BaseModel):
    title: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    price: float | None = Field(default=None, gt=0)
    size: float | None = Field(default=None, gt=0)
    rooms: int | None = Field(default=None, ge=0)
    property_type: str | None = None
    year_built: int | None = None
    condition: Condition | None = None
    current_rent: float | None = None
    estimated_rent: float | None = Field(default=None, ge=0)
    image_url: str | None = None
    description: str | None = None

    @model_validator(mode="after")
    def _required_fields_not_null(self) -> ListingUpdate:
        cleared = sorted(
            name for name in REQUIRED_LISTING_FIELDS
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class ListingResponse(BaseModel):
    id: int
    title: str
    address: str
    city: str
    postal_code: str | None = None
    latitude: float
    longitude: float
    price: float
    size: float
    rooms: int | None = None
    property_type: str
    year_built: int | None = None
    condition: str | None = None
    current_rent: float | None = None
    estimated_rent: float | None = None
    rental_yield: float | None = None
    price_per_sqm: float | None = None
    roi: float | None = None
    image_url: str | None = None
    description: str | None = None
    source: str | None = None
    external_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ListingFilters(BaseModel):
    """Conjunction of optional listing filters; unset fields do not filter."""

    city: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_size: float | None = None
    max_size: float | None = None
    property_type: str | None = None
    min_roi: float | None = None


class ListingMetrics(BaseModel):
    property_id: int
    estimated_rent: float | None
    price_per_sqm: float | None
    rental_yield: float | None
    roi: float | None
    break_even_years: float | None


class FetchRequest(BaseModel):
    source: str = "all"
    city: str = "Berlin"


class FetchResponse(BaseModel):
    message: str
    count: int
