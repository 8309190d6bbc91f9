"""Step-function scoring and rule-based commentary for a single listing.

Every score is a lookup over fixed thresholds rather than an interpolation so
that a user can always tell which band a listing fell into. Derived metrics
that are not known yet are read as ``0``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from app.utils.numbers import round_half_up

if TYPE_CHECKING:
    from app.models.listing import Listing

logger = logging.getLogger(__name__)

# ── Investment score bands ───────────────────────────────────────────────

# (threshold, points), first match wins
_ROI_BANDS: tuple[tuple[float, int], ...] = ((8, 35), (5, 25), (3, 15))
_YIELD_BANDS: tuple[tuple[float, int], ...] = ((5, 30), (4, 20), (3, 10))
# price per m² must be *below* the threshold
_PRICE_PER_SQM_BANDS: tuple[tuple[float, int], ...] = ((3000, 20), (4000, 15), (5000, 10))
_CONDITION_POINTS = MappingProxyType({"excellent": 15, "good": 10, "fair": 5})

# ── Categorical tables ───────────────────────────────────────────────────

TIER_1_CITIES = frozenset({"Berlin", "München", "Hamburg", "Frankfurt", "Köln"})
TIER_2_CITIES = frozenset({"Stuttgart", "Düsseldorf", "Dortmund", "Leipzig", "Dresden"})
TIER_1_SCORE = 90
TIER_2_SCORE = 75
DEFAULT_LOCATION_SCORE = 60

CONDITION_SCORES = MappingProxyType({
    "excellent": 95,
    "good": 80,
    "fair": 60,
    "poor": 40,
})
DEFAULT_CONDITION_SCORE = 50

_ROI_TIERS: tuple[tuple[float, int], ...] = ((8, 95), (6, 80), (4, 65), (2, 50))
DEFAULT_ROI_TIER_SCORE = 30


def _metric(listing: Listing, attr: str) -> float:
    return getattr(listing, attr, None) or 0


def _points_above(value: float, bands: tuple[tuple[float, int], ...]) -> int:
    for threshold, points in bands:
        if value > threshold:
            return points
    return 0


def _points_below(value: float, bands: tuple[tuple[float, int], ...]) -> int:
    for threshold, points in bands:
        if value < threshold:
            return points
    return 0


def investment_score(listing: Listing) -> int:
    """Additive 0-100 score: ROI 35, yield 30, price per m² 20, condition 15."""
    score = (
        _points_above(_metric(listing, "roi"), _ROI_BANDS)
        + _points_above(_metric(listing, "rental_yield"), _YIELD_BANDS)
        + _points_below(_metric(listing, "price_per_sqm"), _PRICE_PER_SQM_BANDS)
        + _CONDITION_POINTS.get(listing.condition or "", 0)
    )
    return int(round_half_up(score, 0))


def location_score(listing: Listing) -> int:
    if listing.city in TIER_1_CITIES:
        return TIER_1_SCORE
    if listing.city in TIER_2_CITIES:
        return TIER_2_SCORE
    return DEFAULT_LOCATION_SCORE


def condition_score(listing: Listing) -> int:
    return CONDITION_SCORES.get(listing.condition or "", DEFAULT_CONDITION_SCORE)


def roi_tier_score(listing: Listing) -> int:
    return _points_above(_metric(listing, "roi"), _ROI_TIERS) or DEFAULT_ROI_TIER_SCORE


def score_listing(listing: Listing) -> dict[str, int]:
    return {
        "investment": investment_score(listing),
        "location": location_score(listing),
        "condition": condition_score(listing),
        "roi": roi_tier_score(listing),
    }


# ── Commentary rules ─────────────────────────────────────────────────────

Rule = tuple[Callable[[Any], bool], str]

# Evaluation order is the display order.
RECOMMENDATION_RULES: tuple[Rule, ...] = (
    (lambda l: _metric(l, "roi") > 6,
     "Excellent investment opportunity with high ROI"),
    (lambda l: _metric(l, "rental_yield") > 4.5,
     "Attractive rental yield for long-term cash flow generation"),
    (lambda l: _metric(l, "price_per_sqm") < 3500,
     "Favorable price per square meter with appreciation potential"),
    (lambda l: l.condition in ("excellent", "good"),
     "Good condition reduces renovation costs"),
)

RISK_RULES: tuple[Rule, ...] = (
    (lambda l: _metric(l, "roi") < 3,
     "Low ROI could indicate overpriced property"),
    (lambda l: _metric(l, "rental_yield") < 3,
     "Low rental yield - long-term cash flow at risk"),
    (lambda l: _metric(l, "price_per_sqm") > 6000,
     "High price per sqm limits appreciation potential"),
    (lambda l: bool(l.year_built) and l.year_built < 1970,
     "Older building - potential renovation and energy costs"),
)

OPPORTUNITY_RULES: tuple[Rule, ...] = (
    (lambda l: l.condition in ("fair", "poor"),
     "Renovation potential for value appreciation"),
    (lambda l: _metric(l, "price_per_sqm") < 3000,
     "Undervalued property with upward potential"),
    (lambda l: _metric(l, "size") > 100,
     "Large living space enables flexible usage concepts"),
)


def _apply_rules(listing: Listing, rules: tuple[Rule, ...]) -> list[str]:
    return [message for predicate, message in rules if predicate(listing)]


def generate_recommendations(listing: Listing) -> list[str]:
    return _apply_rules(listing, RECOMMENDATION_RULES)


def identify_risks(listing: Listing) -> list[str]:
    return _apply_rules(listing, RISK_RULES)


def identify_opportunities(listing: Listing) -> list[str]:
    return _apply_rules(listing, OPPORTUNITY_RULES)


def analyze_listing(listing: Listing) -> dict[str, Any]:
    analysis = {
        "property_id": listing.id,
        "scores": score_listing(listing),
        "recommendations": generate_recommendations(listing),
        "risks": identify_risks(listing),
        "opportunities": identify_opportunities(listing),
    }
    logger.info(
        "Analyzed listing %s: investment=%d, %d recommendations, %d risks",
        listing.id,
        analysis["scores"]["investment"],
        len(analysis["recommendations"]),
        len(analysis["risks"]),
    )
    return analysis


def build_recommendation_reasoning(listing: Listing, risk_tolerance: str) -> str:
    """Explain a recommended listing in a few fixed sentences."""
    roi = round_half_up(_metric(listing, "roi"), 2)
    yield_pct = round_half_up(_metric(listing, "rental_yield"), 2)
    reasons = [
        f"ROI of {roi:.2f}% offers attractive returns",
        f"Rental yield of {yield_pct:.2f}% generates stable cash flow",
        f"Location in {listing.city} with good infrastructure",
    ]
    if risk_tolerance == "low" and listing.condition == "excellent":
        reasons.append("Excellent condition minimizes investment risk")
    return ". ".join(reasons)
