from __future__ import annotations

from pydantic import BaseModel, Field


class FinancingConfig(BaseModel):
    down_payment: float = Field(default=20, ge=0, le=100, description="Percent of total cost")
    interest_rate: float = Field(default=3.5, ge=0, description="Annual rate in percent")
    loan_term: int = Field(default=30, gt=0, description="Years")


class RoiBreakdown(BaseModel):
    annual_rent: float
    acquisition_cost: float
    total_investment: float
    annual_expenses: float
    net_annual_income: float
    operating_roi: float


class YearlyProjection(BaseModel):
    year: int
    property_value: float
    annual_rent: float
    cumulative_return: float


class FinancingProjection(BaseModel):
    property_id: int
    loan_amount: float
    monthly_payment: float
    monthly_cash_flow: float
    total_investment: float
    total_paid: float
    roi_breakdown: RoiBreakdown
    yearly_projections: list[YearlyProjection]
