from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class FinancialAssumptions(BaseModel):
    """Fixed economic policy used by the metric formulas and projections."""

    # Fees and taxes added on top of the purchase price
    acquisition_cost_rate: float = 0.10
    # Share of the price spent on upkeep every month (cash flow)
    monthly_upkeep_rate: float = 0.002
    # Share of the price spent on operating costs every year (operating ROI)
    annual_operating_expense_rate: float = 0.024
    annual_appreciation_rate: float = 0.03
    annual_rent_growth_rate: float = 0.02
    projection_years: int = 10


class Settings(BaseSettings):
    app_name: str = "Estatify"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    database_url: str = "sqlite:///./estatify.db"

    llm_provider: Literal["claude", "openai"] = "openai"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    openai_api_key: str = ""
    openai_model: str = "gpt-4-turbo-preview"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000
    llm_timeout_seconds: float = 30.0

    # Upper bound for a single listing feed call
    fetch_timeout_seconds: float = 15.0

    cors_origins: str = "http://localhost:5173"

    assumptions: FinancialAssumptions = FinancialAssumptions()

    model_config = {"env_file": ".env", "env_nested_delimiter": "__"}


settings = Settings()
