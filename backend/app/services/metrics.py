"""Per-listing financial metrics.

All formulas are pure. A missing or zero input is not an error: the metric is
simply not known yet and comes back as ``0`` (or ``None`` for the break-even
horizon).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.config import FinancialAssumptions, settings
from app.utils.numbers import round_half_up

if TYPE_CHECKING:
    from app.models.listing import Listing

logger = logging.getLogger(__name__)

DEFAULT_RENT_RATE_KEY = "Default"

# Monthly cold rent in EUR per m², cities not listed use the "Default" entry.
RENT_PER_SQM: MappingProxyType[str, float] = MappingProxyType({
    "Berlin": 12,
    "München": 18,
    "Hamburg": 14,
    "Frankfurt": 15,
    "Köln": 11,
    "Stuttgart": 13,
    "Düsseldorf": 12,
    "Leipzig": 8,
    "Dresden": 9,
    DEFAULT_RENT_RATE_KEY: 10,
})


def rent_rate_for_city(city: str | None) -> float:
    return RENT_PER_SQM.get(city or "", RENT_PER_SQM[DEFAULT_RENT_RATE_KEY])


def price_per_area(price: float | None, size: float | None) -> float:
    if not price or not size:
        return 0
    return round_half_up(price / size, 2)


def rental_yield(annual_rent: float | None, price: float | None) -> float:
    if not annual_rent or not price:
        return 0
    return round_half_up(annual_rent / price * 100, 2)


def _total_investment(price: float, assumptions: FinancialAssumptions) -> float:
    return price + price * assumptions.acquisition_cost_rate


def acquisition_roi(
    listing: Listing, assumptions: FinancialAssumptions | None = None
) -> float:
    """Gross rent over purchase price plus acquisition costs, in percent.

    Only transaction costs are counted; running costs belong to
    :func:`app.services.financing_service.operating_roi_breakdown`.
    """
    if not listing.estimated_rent or not listing.price:
        return 0
    assumptions = assumptions or settings.assumptions
    annual_rent = listing.estimated_rent * 12
    return round_half_up(
        annual_rent / _total_investment(listing.price, assumptions) * 100, 2
    )


def estimate_monthly_rent(listing: Listing) -> float:
    if not listing.size:
        return 0
    return round_half_up(listing.size * rent_rate_for_city(listing.city), 2)


def break_even_years(
    listing: Listing, assumptions: FinancialAssumptions | None = None
) -> float | None:
    """Years of gross rent needed to recoup price plus acquisition costs."""
    if not listing.estimated_rent or not listing.price:
        return None
    assumptions = assumptions or settings.assumptions
    annual_rent = listing.estimated_rent * 12
    return round_half_up(_total_investment(listing.price, assumptions) / annual_rent, 1)


def enrich_with_metrics(
    listing: Listing, assumptions: FinancialAssumptions | None = None
) -> Listing:
    """Fill in the derived fields of ``listing`` in place and return it.

    A supplied ``estimated_rent`` is kept, otherwise it is estimated from the
    city rent table. Running this twice on unchanged inputs is a no-op.
    """
    if listing.estimated_rent is None:
        listing.estimated_rent = estimate_monthly_rent(listing)

    listing.price_per_sqm = price_per_area(listing.price, listing.size)
    listing.rental_yield = rental_yield(
        (listing.estimated_rent or 0) * 12, listing.price
    )
    listing.roi = acquisition_roi(listing, assumptions)

    logger.debug(
        "Enriched listing %s: price/m²=%s yield=%s roi=%s",
        listing.id, listing.price_per_sqm, listing.rental_yield, listing.roi,
    )
    return listing
