from __future__ import annotations

from pydantic import BaseModel


class PriceTrend(BaseModel):
    city: str
    avg_price_per_sqm: float | None
    avg_price: float | None
    count: int


class RoiBucket(BaseModel):
    roi_range: str
    count: int


class PropertyTypeSummary(BaseModel):
    property_type: str | None
    count: int
    avg_price: float | None
    avg_roi: float | None


class CityCount(BaseModel):
    city: str
    count: int


class PriceRangeBucket(BaseModel):
    price_range: str
    count: int


class MarketOverview(BaseModel):
    total_properties: int
    avg_price: float | None
    avg_roi: float | None
    avg_rental_yield: float | None
    top_cities: list[CityCount]
    price_ranges: list[PriceRangeBucket]


class StatsOverview(BaseModel):
    total_properties: int
    avg_price: float | None
    avg_price_per_sqm: float | None
    avg_roi: float | None
    avg_rental_yield: float | None


class CityComparison(BaseModel):
    city: str
    count: int
    avg_price: float | None
    avg_price_per_sqm: float | None
    avg_size: float | None
    avg_roi: float | None
    avg_rental_yield: float | None
    min_price: float | None
    max_price: float | None
