"""HTTP API."""

from recon.api.router import api_router

__all__ = ["api_router"]
