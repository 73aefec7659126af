"""Pydantic models for financial health scores.

FinancialData is the raw input for the score calculators; the result models
are derived from it and never carry identity of their own.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FinancialData(BaseModel):
    """Financial-statement line items for a single fiscal period."""

    model_config = ConfigDict(frozen=True)

    current_assets: float = 0.0
    current_liabilities: float = 0.0
    total_assets: float = 0.0
    retained_earnings: float = 0.0
    ebit: float = 0.0
    market_cap: float = 0.0
    total_liabilities: float = 0.0
    revenue: float = 0.0
    operating_income: float = 0.0


class AltmanZone(str, Enum):
    """Bankruptcy-risk zone derived from the Z-Score."""

    safe = "safe"
    gray = "gray"
    distress = "distress"


class AltmanZComponents(BaseModel):
    """The five ratios that make up the Z-Score."""

    model_config = ConfigDict(frozen=True)

    working_capital_to_assets: float = 0.0
    retained_earnings_to_assets: float = 0.0
    ebit_to_assets: float = 0.0
    market_cap_to_liabilities: float = 0.0
    sales_to_assets: float = 0.0


class AltmanZResult(BaseModel):
    """Altman Z-Score with zone classification."""

    model_config = ConfigDict(frozen=True)

    score: float
    zone: AltmanZone
    components: AltmanZComponents = Field(default_factory=AltmanZComponents)


class RuleOf40Result(BaseModel):
    """Revenue growth plus profit margin, both in percent."""

    model_config = ConfigDict(frozen=True)

    score: float
    revenue_growth_percent: float
    profit_margin_percent: float
    passed: bool


class PiotroskiResult(BaseModel):
    """Piotroski F-Score (0-9), computed upstream and consumed by signal rules."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=9)
