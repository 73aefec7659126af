"""Sector and peer statistics."""

from recon.sector.models import PriceBar, SectorScreen, SectorSummary, StockEntry, StockInput
from recon.sector.peers import PeerContext, build_peer_context
from recon.sector.screen import (
    VALID_SORT_FIELDS,
    build_stock_entry,
    calculate_returns,
    calculate_rs_rank,
    calculate_summary,
    is_custom_sector,
    is_valid_sector,
    normalize_sector_param,
    sort_stocks,
)
from recon.sector.stats import (
    average,
    high_low,
    median,
    percentile_rank,
    rank_ascending,
    sample_evenly,
)

__all__ = [
    "VALID_SORT_FIELDS",
    "PeerContext",
    "PriceBar",
    "SectorScreen",
    "SectorSummary",
    "StockEntry",
    "StockInput",
    "average",
    "build_peer_context",
    "build_stock_entry",
    "calculate_returns",
    "calculate_rs_rank",
    "calculate_summary",
    "high_low",
    "is_custom_sector",
    "is_valid_sector",
    "median",
    "normalize_sector_param",
    "percentile_rank",
    "rank_ascending",
    "sample_evenly",
    "sort_stocks",
]
