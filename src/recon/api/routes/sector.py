"""Sector screen and peer comparison endpoints."""

from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from recon.core.logging import get_logger
from recon.sector import (
    VALID_SORT_FIELDS,
    PeerContext,
    SectorScreen,
    StockInput,
    build_peer_context,
    build_stock_entry,
    calculate_rs_rank,
    calculate_summary,
    is_valid_sector,
    normalize_sector_param,
    sort_stocks,
)
from recon.sector.screen import CUSTOM_SECTORS, DEFAULT_SORT_FIELD, STANDARD_SECTORS

logger = get_logger(__name__)

router = APIRouter()


class ScreenRequest(BaseModel):
    stocks: list[StockInput] = Field(default_factory=list)
    as_of: date | None = None


class PeerContextRequest(BaseModel):
    value: float | None = None
    peers: dict[str, float | None] = Field(default_factory=dict)


@router.get("/sectors")
async def list_sectors() -> dict[str, Any]:
    return {"sectors": [*STANDARD_SECTORS, *CUSTOM_SECTORS]}


@router.post("/peers/context")
async def peer_context(body: PeerContextRequest) -> PeerContext:
    """Median, average and percentile of a metric against its peers."""
    return build_peer_context(body.value, body.peers)


@router.post("/{sector}/screen")
async def screen_sector(
    sector: str,
    body: ScreenRequest,
    sort: str = Query(DEFAULT_SORT_FIELD, description="52whigh, ytd, 1y, marketcap, ps or pe"),
) -> SectorScreen:
    """Rank sector members by relative strength, sort them and summarise the sector."""
    name = normalize_sector_param(sector)
    if not is_valid_sector(name):
        raise HTTPException(status_code=400, detail=f"Unknown sector: {sector}")
    if sort not in VALID_SORT_FIELDS:
        raise HTTPException(status_code=400, detail=f"Unsupported sort field: {sort}")

    as_of = body.as_of or date.today()
    entries = calculate_rs_rank([build_stock_entry(s, as_of) for s in body.stocks])
    logger.debug("Sector screen", sector=name, sort=sort, count=len(entries))
    return SectorScreen(
        sector=name,
        sort=sort,
        stocks=sort_stocks(entries, sort),
        summary=calculate_summary(entries),
    )
