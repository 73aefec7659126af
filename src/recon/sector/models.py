"""Pydantic models for sector screens."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field


class PriceBar(BaseModel):
    """One daily OHLCV bar."""

    date: dt.date
    open: float = 0.0
    high: float
    low: float
    close: float
    volume: int = 0


class StockInput(BaseModel):
    """A sector member as supplied by the caller, with optional price history."""

    ticker: str
    name: str = ""
    market_cap: float = 0.0
    ps: float | None = None
    pe: float | None = None
    prices: list[PriceBar] = Field(default_factory=list)


class StockEntry(BaseModel):
    """A sector member with derived performance metrics."""

    ticker: str
    name: str = ""
    market_cap: float = 0.0
    ps: float | None = None
    pe: float | None = None
    ytd_change: float | None = None
    one_month_change: float | None = None
    one_year_change: float | None = None
    high_52w: float | None = None
    low_52w: float | None = None
    from_52w_high: float | None = None  # percent below the 52-week high, <= 0
    rs_rank: int | None = None
    sparkline: list[float] = Field(default_factory=list)


class SectorSummary(BaseModel):
    """Sector-wide aggregates."""

    count: int
    avg_ps: float | None = None
    avg_pe: float | None = None
    median_ytd: float | None = None
    median_1y: float | None = None


class SectorScreen(BaseModel):
    """Ranked and sorted sector members with summary."""

    sector: str
    sort: str
    stocks: list[StockEntry]
    summary: SectorSummary
