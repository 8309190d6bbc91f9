"""Unit tests for collection-level analytics."""

from __future__ import annotations

import pytest

from app.models.listing import Listing
from app.services.analytics_service import (
    city_comparison,
    price_trends,
    property_type_breakdown,
    roi_distribution,
    stats_overview,
    summarize_market,
)
from conftest import listing_data


def _listing(**overrides) -> Listing:
    return Listing(**listing_data(**overrides))


def _city_listings(city: str, count: int, **overrides) -> list[Listing]:
    return [_listing(city=city, **overrides) for _ in range(count)]


class TestPriceTrends:
    def test_grouped_and_sorted_by_count(self):
        listings = (
            _city_listings("Köln", 1, price=200_000, price_per_sqm=2500)
            + _city_listings("Berlin", 3, price=300_000, price_per_sqm=3750)
            + _city_listings("Hamburg", 2, price=400_000, price_per_sqm=5000)
        )
        rows = price_trends(listings)
        assert [r["city"] for r in rows] == ["Berlin", "Hamburg", "Köln"]
        assert rows[0] == {
            "city": "Berlin", "avg_price_per_sqm": 3750, "avg_price": 300_000, "count": 3,
        }

    def test_capped_at_ten_cities(self):
        listings = [_listing(city=f"City{i:02d}") for i in range(12)]
        assert len(price_trends(listings)) == 10

    def test_city_filter(self):
        listings = _city_listings("Berlin", 2) + _city_listings("Leipzig", 1, price=150_000)
        rows = price_trends(listings, city="Leipzig")
        assert rows == [
            {"city": "Leipzig", "avg_price_per_sqm": None, "avg_price": 150_000, "count": 1}
        ]

    def test_empty(self):
        assert price_trends([]) == []


class TestRoiDistribution:
    def test_bucket_edges(self):
        rois = [2, 3, 4.9, 5, 6.9, 7, 9.9, 10, 15]
        rows = roi_distribution([_listing(roi=r) for r in rois])
        assert rows == [
            {"roi_range": "0-3%", "count": 1},
            {"roi_range": "3-5%", "count": 2},
            {"roi_range": "5-7%", "count": 2},
            {"roi_range": "7-10%", "count": 2},
            {"roi_range": "10%+", "count": 2},
        ]

    def test_null_roi_excluded_and_empty_buckets_omitted(self):
        rows = roi_distribution([_listing(roi=None), _listing(roi=-1.5), _listing(roi=12)])
        assert rows == [
            {"roi_range": "0-3%", "count": 1},
            {"roi_range": "10%+", "count": 1},
        ]


class TestPropertyTypeBreakdown:
    def test_counts_and_averages(self):
        listings = [
            _listing(property_type="house", price=500_000, roi=3.0),
            _listing(property_type="apartment", price=200_000, roi=5.0),
            _listing(property_type="apartment", price=300_000, roi=None),
        ]
        rows = property_type_breakdown(listings)
        assert rows[0] == {
            "property_type": "apartment", "count": 2, "avg_price": 250_000, "avg_roi": 5.0,
        }
        assert rows[1]["property_type"] == "house"


class TestMarketOverview:
    def test_empty_collection(self):
        overview = summarize_market([])
        assert overview == {
            "total_properties": 0,
            "avg_price": None,
            "avg_roi": None,
            "avg_rental_yield": None,
            "top_cities": [],
            "price_ranges": [],
        }

    def test_overview(self):
        listings = [
            _listing(city="Berlin", price=150_000, roi=4.0, rental_yield=5.0),
            _listing(city="Berlin", price=200_000, roi=None, rental_yield=None),
            _listing(city="Köln", price=650_000, roi=6.0, rental_yield=3.0),
            _listing(city="Bonn", price=900_000, roi=2.0, rental_yield=2.0),
        ]
        overview = summarize_market(listings)
        assert overview["total_properties"] == 4
        assert overview["avg_price"] == pytest.approx(475_000)
        assert overview["avg_roi"] == pytest.approx(4.0)
        assert overview["avg_rental_yield"] == pytest.approx(10 / 3)
        assert overview["top_cities"] == [
            {"city": "Berlin", "count": 2},
            {"city": "Bonn", "count": 1},
            {"city": "Köln", "count": 1},
        ]
        assert overview["price_ranges"] == [
            {"price_range": "Under 200k", "count": 1},
            {"price_range": "200k-400k", "count": 1},
            {"price_range": "600k-800k", "count": 1},
            {"price_range": "Over 800k", "count": 1},
        ]

    def test_top_cities_limited_to_five(self):
        listings = [_listing(city=f"City{i}") for i in range(8)]
        assert len(summarize_market(listings)["top_cities"]) == 5

    def test_stats_overview(self):
        stats = stats_overview([_listing(price_per_sqm=3000, roi=4), _listing(price_per_sqm=5000, roi=None)])
        assert stats["total_properties"] == 2
        assert stats["avg_price_per_sqm"] == 4000
        assert stats["avg_roi"] == 4


class TestCityComparison:
    def test_minimum_group_size(self):
        listings = _city_listings("Berlin", 3, roi=4.0) + _city_listings("Hamburg", 2, roi=9.0)
        rows = city_comparison(listings)
        assert [r["city"] for r in rows] == ["Berlin"]

    def test_sorted_by_avg_roi_desc(self):
        listings = (
            _city_listings("Berlin", 3, roi=4.0)
            + _city_listings("Leipzig", 4, roi=7.5)
            + _city_listings("München", 3, roi=None)
        )
        rows = city_comparison(listings)
        assert [r["city"] for r in rows] == ["Leipzig", "Berlin", "München"]
        assert rows[2]["avg_roi"] is None

    def test_row_fields(self):
        listings = [
            _listing(city="Dresden", price=100_000, size=50, price_per_sqm=2000, roi=5, rental_yield=6),
            _listing(city="Dresden", price=200_000, size=70, price_per_sqm=2857.14, roi=4, rental_yield=5),
            _listing(city="Dresden", price=300_000, size=90, price_per_sqm=3333.33, roi=3, rental_yield=4),
        ]
        row = city_comparison(listings)[0]
        assert row["count"] == 3
        assert row["avg_price"] == pytest.approx(200_000)
        assert row["avg_size"] == pytest.approx(70)
        assert row["avg_roi"] == pytest.approx(4)
        assert row["avg_rental_yield"] == pytest.approx(5)
        assert row["min_price"] == 100_000
        assert row["max_price"] == 300_000
