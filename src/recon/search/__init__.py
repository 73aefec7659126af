"""Ticker search."""

from recon.search.index import (
    SearchResult,
    TickerEntry,
    TickerIndex,
    TickerRecord,
    load_default_index,
    map_asset_type,
)

__all__ = [
    "SearchResult",
    "TickerEntry",
    "TickerIndex",
    "TickerRecord",
    "load_default_index",
    "map_asset_type",
]
