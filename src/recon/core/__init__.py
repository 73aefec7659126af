"""Core utilities: logging, exceptions, constants."""

from recon.core.exceptions import ReconError
from recon.core.logging import get_logger, setup_logging

__all__ = [
    "ReconError",
    "get_logger",
    "setup_logging",
]
