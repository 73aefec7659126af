"""Sector screen: per-stock performance metrics, relative strength and sorting."""

from __future__ import annotations

import calendar
import datetime as dt
from collections.abc import Sequence

from recon.core.constants import DEFAULT_SPARKLINE_POINTS
from recon.sector.models import PriceBar, SectorSummary, StockEntry, StockInput
from recon.sector.stats import average, high_low, median, rank_ascending, sample_evenly

# FMP sector names
STANDARD_SECTORS: tuple[str, ...] = (
    "Basic Materials",
    "Communication Services",
    "Consumer Cyclical",
    "Consumer Defensive",
    "Energy",
    "Financial Services",
    "Healthcare",
    "Industrials",
    "Real Estate",
    "Technology",
    "Utilities",
)

# Industry groupings exposed as sectors of their own
CUSTOM_SECTORS: tuple[str, ...] = ("Software",)

# sort field -> (attribute, descending)
_SORT_KEYS: dict[str, tuple[str, bool]] = {
    "52whigh": ("from_52w_high", True),
    "ytd": ("ytd_change", True),
    "1y": ("one_year_change", True),
    "marketcap": ("market_cap", True),
    "ps": ("ps", False),
    "pe": ("pe", False),
}
VALID_SORT_FIELDS = frozenset(_SORT_KEYS)
DEFAULT_SORT_FIELD = "52whigh"


def is_valid_sector(sector: str) -> bool:
    """Case-sensitive membership check against standard and custom sectors."""
    return sector in STANDARD_SECTORS or sector in CUSTOM_SECTORS


def is_custom_sector(sector: str) -> bool:
    return sector in CUSTOM_SECTORS


def normalize_sector_param(param: str) -> str:
    """Turn a URL-friendly sector ("Financial-Services") into its name."""
    return param.replace("-", " ")


def _months_before(day: dt.date, months: int) -> dt.date:
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return dt.date(year, month, min(day.day, last_day))


def _change_since(prices: Sequence[PriceBar], cutoff: dt.date) -> float | None:
    base = next((p for p in prices if p.date >= cutoff), None)
    if base is None or base.close == 0:
        return None
    latest = prices[-1].close
    return (latest - base.close) / base.close * 100


def calculate_returns(
    prices: Sequence[PriceBar],
    now: dt.date | dt.datetime,
) -> tuple[float | None, float | None, float | None]:
    """YTD, one-month and one-year percent change up to the latest bar.

    Each change is measured from the first bar on or after its cutoff date.

    Returns:
        Tuple of (ytd, one_month, one_year); an element is None when no bar
        falls inside its window
    """
    if not prices:
        return None, None, None

    today = now.date() if isinstance(now, dt.datetime) else now
    ordered = sorted(prices, key=lambda p: p.date)

    ytd = _change_since(ordered, dt.date(today.year, 1, 1))
    one_month = _change_since(ordered, _months_before(today, 1))
    one_year = _change_since(ordered, _months_before(today, 12))
    return ytd, one_month, one_year


def sparkline_prices(
    prices: Sequence[PriceBar], points: int = DEFAULT_SPARKLINE_POINTS
) -> list[float]:
    """Closing prices sampled down to at most ``points`` values."""
    return [bar.close for bar in sample_evenly(prices, points)]


def build_stock_entry(stock: StockInput, now: dt.date | dt.datetime) -> StockEntry:
    """Derive performance metrics for one sector member from its price history."""
    ordered = sorted(stock.prices, key=lambda p: p.date)
    ytd, one_month, one_year = calculate_returns(ordered, now)

    today = now.date() if isinstance(now, dt.datetime) else now
    year_start = _months_before(today, 12)
    high, low = high_low(p for p in ordered if p.date >= year_start)

    from_high = None
    if high and ordered:
        from_high = (ordered[-1].close - high) / high * 100

    return StockEntry(
        ticker=stock.ticker,
        name=stock.name,
        market_cap=stock.market_cap,
        ps=stock.ps,
        pe=stock.pe,
        ytd_change=ytd,
        one_month_change=one_month,
        one_year_change=one_year,
        high_52w=high,
        low_52w=low,
        from_52w_high=from_high,
        sparkline=sparkline_prices(ordered),
    )


def calculate_rs_rank(entries: Sequence[StockEntry]) -> list[StockEntry]:
    """Assign relative-strength ranks by one-year change (1 = weakest).

    Entries without a one-year change are left unranked.
    """
    ranks = rank_ascending({i: e.one_year_change for i, e in enumerate(entries)})
    return [e.model_copy(update={"rs_rank": ranks[i]}) for i, e in enumerate(entries)]


def calculate_summary(entries: Sequence[StockEntry]) -> SectorSummary:
    return SectorSummary(
        count=len(entries),
        avg_ps=average(e.ps for e in entries),
        avg_pe=average(e.pe for e in entries),
        median_ytd=median(e.ytd_change for e in entries),
        median_1y=median(e.one_year_change for e in entries),
    )


def sort_stocks(entries: Sequence[StockEntry], field: str) -> list[StockEntry]:
    """Sort entries by ``field``; entries missing the value go last.

    Raises:
        ValueError: If ``field`` is not one of VALID_SORT_FIELDS
    """
    if field not in _SORT_KEYS:
        raise ValueError(f"Unsupported sort field: {field}")

    attr, descending = _SORT_KEYS[field]
    present = [e for e in entries if getattr(e, attr) is not None]
    missing = [e for e in entries if getattr(e, attr) is None]
    present.sort(key=lambda e: getattr(e, attr), reverse=descending)
    return present + missing
