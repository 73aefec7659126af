"""Models for signal generation.

These models define the data structures consumed and produced by the rule engine:
- Signal output (type, category, priority)
- Per-ticker data records assembled by the caller
- RuleContext, the read-only view every rule evaluates
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from recon.scores.models import AltmanZResult, PiotroskiResult

SignalValue = int | float | str | bool


# =============================================================================
# Signal
# =============================================================================


class SignalType(str, Enum):
    """Sentiment of a signal."""

    bullish = "bullish"
    bearish = "bearish"
    warning = "warning"


class SignalCategory(str, Enum):
    """Source category of a signal."""

    insider = "insider"
    institutional = "institutional"
    fundamental = "fundamental"
    valuation = "valuation"
    technical = "technical"


class Signal(BaseModel):
    """An actionable insight derived from a ticker's data."""

    model_config = ConfigDict(frozen=True)

    type: SignalType
    category: SignalCategory
    message: str
    priority: int = Field(ge=1, le=5, description="1-5, higher = more important")
    data: dict[str, SignalValue] = Field(default_factory=dict)


# =============================================================================
# Ticker data records
# =============================================================================


class Company(BaseModel):
    """Basic company identification and classification."""

    ticker: str
    name: str = ""
    exchange: str = ""
    sector: str = ""
    industry: str = ""
    description: str | None = None


class Quote(BaseModel):
    """Market quote snapshot."""

    price: float
    change: float = 0.0
    change_percent: float = 0.0
    volume: int = 0
    market_cap: int = 0
    fifty_two_week_high: float | None = None
    fifty_two_week_low: float | None = None
    as_of: datetime | None = None


class Financials(BaseModel):
    """Key financial ratios, margins and growth rates in percent."""

    revenue_growth_yoy: float = 0.0
    gross_margin: float = 0.0
    operating_margin: float = 0.0
    net_margin: float = 0.0
    fcf_margin: float = 0.0
    roe: float = 0.0
    roic: float = 0.0
    debt_to_equity: float = 0.0
    current_ratio: float = 0.0
    interest_coverage: float | None = None


class InstitutionalHolder(BaseModel):
    """A single institutional holder's position."""

    fund_name: str
    fund_cik: str = ""
    shares: int = 0
    value: int = 0
    portfolio_percent: float = 0.0
    change_shares: int = 0
    change_percent: float = 0.0
    quarter_date: date | None = None


class Holdings(BaseModel):
    """Aggregated institutional holdings."""

    top_institutional: list[InstitutionalHolder] = Field(default_factory=list)
    total_institutional_ownership: float = 0.0
    net_change_shares: int = 0
    net_change_quarters: int = 0


class InsiderTrade(BaseModel):
    """A single insider transaction."""

    insider_name: str
    title: str = ""
    trade_type: str  # "buy" or "sell"
    shares: int = 0
    price: float = 0.0
    value: int = 0
    trade_date: date | None = None


class InsiderActivity(BaseModel):
    """Insider trades with 90-day aggregates."""

    trades: list[InsiderTrade] = Field(default_factory=list)
    buy_count_90d: int = 0
    sell_count_90d: int = 0
    net_value_90d: float = 0.0


class ShortInterest(BaseModel):
    """Short interest snapshot."""

    shares_short: float = 0.0
    short_ratio: float = 0.0
    short_percent_float: float = 0.0  # percent, e.g. 12.5
    days_to_cover: float = 0.0


# =============================================================================
# Rule Context
# =============================================================================


class RuleContext(BaseModel):
    """Everything known about a ticker at request time.

    Any field may be None; rules treat a missing field as insufficient data and
    abstain, never as zero.
    """

    model_config = ConfigDict(frozen=True)

    company: Company | None = None
    quote: Quote | None = None
    financials: Financials | None = None
    holdings: Holdings | None = None
    insider_activity: InsiderActivity | None = None
    short_interest: ShortInterest | None = None
    piotroski: PiotroskiResult | None = None
    altman_z: AltmanZResult | None = None
