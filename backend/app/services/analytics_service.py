"""Collection-level market summaries.

Every function takes the listings to summarize and recomputes its result from
scratch. Averages skip missing values and are ``None`` for an empty group.
Ties on counts are broken by the grouping key so results are stable.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TYPE_CHECKING, Any

from app.utils.numbers import mean

if TYPE_CHECKING:
    from app.models.listing import Listing

logger = logging.getLogger(__name__)

PRICE_TREND_LIMIT = 10
TOP_CITIES_LIMIT = 5
MIN_LISTINGS_FOR_COMPARISON = 3

# (label, lower bound inclusive), upper bound is the next lower bound
ROI_BUCKETS: tuple[tuple[str, float], ...] = (
    ("0-3%", float("-inf")),
    ("3-5%", 3),
    ("5-7%", 5),
    ("7-10%", 7),
    ("10%+", 10),
)

PRICE_BANDS: tuple[tuple[str, float], ...] = (
    ("Under 200k", float("-inf")),
    ("200k-400k", 200_000),
    ("400k-600k", 400_000),
    ("600k-800k", 600_000),
    ("Over 800k", 800_000),
)


def _group_by(
    listings: Iterable[Listing], key: Callable[[Listing], Hashable]
) -> dict[Hashable, list[Listing]]:
    groups: dict[Hashable, list[Listing]] = defaultdict(list)
    for listing in listings:
        groups[key(listing)].append(listing)
    return groups


def _sort_key(value: Any) -> tuple[bool, str]:
    # None keys sort last
    return (value is None, str(value or ""))


def _by_count_desc(rows: list[dict[str, Any]], key_field: str) -> list[dict[str, Any]]:
    return sorted(rows, key=lambda r: (-r["count"], _sort_key(r[key_field])))


def _band_index(value: float, bands: tuple[tuple[str, float], ...]) -> int:
    index = 0
    for i, (_, lower) in enumerate(bands):
        if value >= lower:
            index = i
    return index


def _histogram(
    values: Iterable[float], bands: tuple[tuple[str, float], ...], label_field: str
) -> list[dict[str, Any]]:
    counts = [0] * len(bands)
    for value in values:
        counts[_band_index(value, bands)] += 1
    return [
        {label_field: label, "count": count}
        for (label, _), count in zip(bands, counts)
        if count
    ]


def price_trends(listings: Sequence[Listing], city: str | None = None) -> list[dict[str, Any]]:
    """Per-city averages; top cities by count unless narrowed to one city."""
    if city:
        listings = [l for l in listings if l.city == city]

    rows = [
        {
            "city": group_city,
            "avg_price_per_sqm": mean(l.price_per_sqm for l in group),
            "avg_price": mean(l.price for l in group),
            "count": len(group),
        }
        for group_city, group in _group_by(listings, lambda l: l.city).items()
    ]
    rows = _by_count_desc(rows, "city")
    return rows if city else rows[:PRICE_TREND_LIMIT]


def roi_distribution(listings: Sequence[Listing]) -> list[dict[str, Any]]:
    return _histogram(
        (l.roi for l in listings if l.roi is not None), ROI_BUCKETS, "roi_range"
    )


def property_type_breakdown(listings: Sequence[Listing]) -> list[dict[str, Any]]:
    rows = [
        {
            "property_type": property_type,
            "count": len(group),
            "avg_price": mean(l.price for l in group),
            "avg_roi": mean(l.roi for l in group),
        }
        for property_type, group in _group_by(listings, lambda l: l.property_type).items()
    ]
    return _by_count_desc(rows, "property_type")


def summarize_market(listings: Sequence[Listing]) -> dict[str, Any]:
    """Market overview: totals, averages, top cities and a price histogram."""
    city_counts = [
        {"city": city, "count": len(group)}
        for city, group in _group_by(listings, lambda l: l.city).items()
    ]
    return {
        "total_properties": len(listings),
        "avg_price": mean(l.price for l in listings),
        "avg_roi": mean(l.roi for l in listings),
        "avg_rental_yield": mean(l.rental_yield for l in listings),
        "top_cities": _by_count_desc(city_counts, "city")[:TOP_CITIES_LIMIT],
        "price_ranges": _histogram(
            (l.price for l in listings if l.price is not None), PRICE_BANDS, "price_range"
        ),
    }


def stats_overview(listings: Sequence[Listing]) -> dict[str, Any]:
    return {
        "total_properties": len(listings),
        "avg_price": mean(l.price for l in listings),
        "avg_price_per_sqm": mean(l.price_per_sqm for l in listings),
        "avg_roi": mean(l.roi for l in listings),
        "avg_rental_yield": mean(l.rental_yield for l in listings),
    }


def city_comparison(listings: Sequence[Listing]) -> list[dict[str, Any]]:
    """Side-by-side city metrics for cities with enough listings to compare."""
    rows: list[dict[str, Any]] = []
    for city, group in _group_by(listings, lambda l: l.city).items():
        if len(group) < MIN_LISTINGS_FOR_COMPARISON:
            continue
        prices = [l.price for l in group if l.price is not None]
        rows.append({
            "city": city,
            "count": len(group),
            "avg_price": mean(prices),
            "avg_price_per_sqm": mean(l.price_per_sqm for l in group),
            "avg_size": mean(l.size for l in group),
            "avg_roi": mean(l.roi for l in group),
            "avg_rental_yield": mean(l.rental_yield for l in group),
            "min_price": min(prices, default=None),
            "max_price": max(prices, default=None),
        })

    logger.debug("City comparison: %d of %d listings in comparable cities",
                 sum(r["count"] for r in rows), len(listings))
    return sorted(
        rows,
        key=lambda r: (r["avg_roi"] is None, -(r["avg_roi"] or 0), _sort_key(r["city"])),
    )
