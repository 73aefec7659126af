"""CLI entry point for Recon."""

import argparse

import uvicorn

from recon.config import get_settings


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="recon",
        description="Serve the Recon scores, signals, search and sector API",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    parser.add_argument("--port", type=int, default=8080, help="Bind port")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.debug,
        help="Restart on code changes (defaults to RECON_DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=settings.log_level.lower(),
        help="uvicorn log level (defaults to RECON_LOG_LEVEL)",
    )
    args = parser.parse_args()

    uvicorn.run(
        "recon.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )
