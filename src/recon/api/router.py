"""Top-level API router, mounts all domain routers under /api/v1."""

from fastapi import APIRouter

from recon.api.routes import scores, search, sector, signals

api_router = APIRouter()
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(scores.router, prefix="/scores", tags=["scores"])
api_router.include_router(signals.router, prefix="/signals", tags=["signals"])
api_router.include_router(sector.router, prefix="/sector", tags=["sector"])
