"""Mortgage, cash flow and long-term projection for a single listing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.config import FinancialAssumptions, settings
from app.utils.exceptions import FinancingError

if TYPE_CHECKING:
    from app.models.listing import Listing
    from app.schemas.financing import FinancingConfig

logger = logging.getLogger(__name__)


def monthly_payment(loan_amount: float, annual_rate_pct: float, term_years: int) -> float:
    """Annuity payment for a fixed-rate loan."""
    num_payments = term_years * 12
    if num_payments <= 0:
        raise FinancingError("Loan term must be at least one year")

    monthly_rate = annual_rate_pct / 100 / 12
    if monthly_rate == 0:
        return loan_amount / num_payments

    growth = (1 + monthly_rate) ** num_payments
    return loan_amount * (monthly_rate * growth) / (growth - 1)


def operating_roi_breakdown(
    listing: Listing, assumptions: FinancialAssumptions | None = None
) -> dict[str, float]:
    """ROI after yearly operating expenses.

    Not the same quantity as ``Listing.roi``, which only subtracts
    acquisition costs.
    """
    assumptions = assumptions or settings.assumptions
    price = listing.price or 0
    annual_rent = (listing.estimated_rent or 0) * 12
    acquisition_cost = price * assumptions.acquisition_cost_rate
    total_investment = price + acquisition_cost
    annual_expenses = price * assumptions.annual_operating_expense_rate
    net_annual_income = annual_rent - annual_expenses
    operating_roi = net_annual_income / total_investment * 100 if total_investment else 0

    return {
        "annual_rent": annual_rent,
        "acquisition_cost": acquisition_cost,
        "total_investment": total_investment,
        "annual_expenses": annual_expenses,
        "net_annual_income": net_annual_income,
        "operating_roi": operating_roi,
    }


def yearly_projections(
    price: float,
    baseline_annual_rent: float,
    assumptions: FinancialAssumptions | None = None,
) -> list[dict[str, float]]:
    """Value, rent and cumulative return for years 1..N under fixed growth rates."""
    assumptions = assumptions or settings.assumptions
    projections: list[dict[str, float]] = []
    for year in range(1, assumptions.projection_years + 1):
        property_value = price * (1 + assumptions.annual_appreciation_rate) ** year
        annual_rent = baseline_annual_rent * (1 + assumptions.annual_rent_growth_rate) ** year
        projections.append({
            "year": year,
            "property_value": property_value,
            "annual_rent": annual_rent,
            "cumulative_return": annual_rent * year + (property_value - price),
        })
    return projections


def project_financing(
    listing: Listing,
    config: FinancingConfig,
    assumptions: FinancialAssumptions | None = None,
) -> dict[str, Any]:
    assumptions = assumptions or settings.assumptions
    price = listing.price or 0
    monthly_rent = listing.estimated_rent or 0

    total_cost = price + price * assumptions.acquisition_cost_rate
    down_payment_share = config.down_payment / 100
    loan_amount = total_cost * (1 - down_payment_share)

    payment = monthly_payment(loan_amount, config.interest_rate, config.loan_term)
    monthly_upkeep = price * assumptions.monthly_upkeep_rate
    breakdown = operating_roi_breakdown(listing, assumptions)

    logger.info(
        "Financing projection for listing %s: loan=%.2f rate=%.2f%% term=%dy payment=%.2f",
        listing.id, loan_amount, config.interest_rate, config.loan_term, payment,
    )
    return {
        "property_id": listing.id,
        "loan_amount": loan_amount,
        "monthly_payment": payment,
        "monthly_cash_flow": monthly_rent - payment - monthly_upkeep,
        "total_investment": total_cost * down_payment_share,
        "total_paid": payment * config.loan_term * 12,
        "roi_breakdown": breakdown,
        "yearly_projections": yearly_projections(
            price, breakdown["annual_rent"], assumptions
        ),
    }
