"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from recon.config import Settings, get_settings
from recon.search.index import TickerIndex
from recon.signals.generator import SignalGenerator

# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Module-level singleton (rules are stateless, one generator serves all requests)
_signal_generator: SignalGenerator | None = None


def get_ticker_index(request: Request) -> TickerIndex:
    """Get the ticker index built during lifespan."""
    index: TickerIndex | None = getattr(request.app.state, "ticker_index", None)
    if index is None:
        raise HTTPException(status_code=503, detail="Ticker index not available")
    return index


def get_signal_generator() -> SignalGenerator:
    """Get or create the singleton signal generator."""
    global _signal_generator
    if _signal_generator is None:
        _signal_generator = SignalGenerator()
    return _signal_generator


# Annotated dependencies for use in route handlers
TickerIndexDep = Annotated[TickerIndex, Depends(get_ticker_index)]
SignalGeneratorDep = Annotated[SignalGenerator, Depends(get_signal_generator)]
