"""Ticker search endpoint for autocomplete."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query

from recon.core.constants import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT
from recon.core.dependencies import TickerIndexDep
from recon.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


def parse_limit(raw: str | None) -> int:
    """Coerce the raw limit: bad or below 1 becomes the default, above the max is capped."""
    if not raw:
        return DEFAULT_SEARCH_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return DEFAULT_SEARCH_LIMIT
    if limit < 1:
        return DEFAULT_SEARCH_LIMIT
    return min(limit, MAX_SEARCH_LIMIT)


@router.get("")
async def search_tickers(
    index: TickerIndexDep,
    q: str = Query("", description="Ticker symbol or company name fragment"),
    limit: str | None = Query(None, description="Max results, default 10, capped at 50"),
) -> dict[str, Any]:
    """Search tickers: exact symbol, then symbol prefix, then name substring."""
    if not q:
        raise HTTPException(status_code=400, detail="Query parameter 'q' is required")

    results = index.search(q, limit=parse_limit(limit))
    logger.debug("Ticker search", query=q, count=len(results))
    return {
        "query": q,
        "results": [r.model_dump(mode="json") for r in results],
        "count": len(results),
    }
