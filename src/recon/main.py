"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recon.api import api_router
from recon.config import get_settings
from recon.core.constants import API_VERSION
from recon.core.logging import get_logger, setup_logging
from recon.search.index import load_default_index

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: builds the ticker index once before serving."""
    settings = get_settings()
    setup_logging(settings)

    # A bad dataset raises TickerDatasetError here and aborts startup
    app.state.ticker_index = load_default_index(settings.tickers_path)
    logger.info("Recon ready", env=settings.env, tickers=len(app.state.ticker_index))
    yield
    logger.info("Recon shutting down")


app = FastAPI(
    title="Recon",
    description="Financial health scores, stock signals and ticker search",
    version=API_VERSION,
    debug=get_settings().debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Infrastructure (no prefix, not versioned)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check, always ok if process is running."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
    }


# Domain API
app.include_router(api_router, prefix="/api/v1")
