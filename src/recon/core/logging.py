"""Structured logging configuration with structlog."""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from recon.config import Settings

SERVICE_NAME = "recon"


def _service_context(env: str) -> structlog.types.Processor:
    """Stamp every event with the service name and deployment env."""

    def processor(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("env", env)
        return event_dict

    return processor


def setup_logging(settings: "Settings") -> None:
    """Configure structlog for the application.

    Development gets a colored console renderer; staging and production get
    one JSON object per line, tagged with service and env.
    """
    level = getattr(logging, settings.log_level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if settings.env == "development":
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]
    else:
        processors = [
            *shared_processors,
            _service_context(settings.env),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )

    # uvicorn and fastapi log through the stdlib
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        level=level,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
