"""Signal generation endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from recon.core.dependencies import SignalGeneratorDep
from recon.core.logging import get_logger
from recon.signals.models import RuleContext

logger = get_logger(__name__)

router = APIRouter()


@router.post("")
async def generate_signals(ctx: RuleContext, generator: SignalGeneratorDep) -> dict[str, Any]:
    """Evaluate all signal rules against the supplied ticker data."""
    signals = generator.generate_all(ctx)
    logger.debug(
        "Signals generated",
        ticker=ctx.company.ticker if ctx.company else None,
        count=len(signals),
    )
    return {
        "ticker": ctx.company.ticker.upper() if ctx.company else None,
        "signals": [s.model_dump(mode="json") for s in signals],
        "count": len(signals),
    }
