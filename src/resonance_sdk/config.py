"""Configuration and logging setup for the Resonance SDK."""

import logging
import sys
from typing import Literal, TextIO

import pydantic
import structlog

from .restapi.client import DEFAULT_TIMEOUT_MS

LogFormat = Literal["logfmt", "json"]


class SDKConfig(pydantic.BaseModel):
    """Configuration for the Resonance SDK."""

    api_url: str = pydantic.Field(
        min_length=1,
        description="Base URL of the Resonance API",
    )
    timeout_ms: int = pydantic.Field(
        DEFAULT_TIMEOUT_MS,
        description="Request deadline in milliseconds",
        gt=0,
    )
    headers: dict[str, str] = pydantic.Field(
        default_factory=dict,
        description="Extra headers sent with every request",
    )
    max_get_attempts: int = pydantic.Field(
        1,
        description="Attempts for GET requests failing at the transport level",
        ge=1,
    )
    log_level: str | None = pydantic.Field(
        None,
        description="Configure structlog at this level; leave unset to keep "
        "the application's logging configuration",
    )
    log_format: LogFormat = pydantic.Field(
        "logfmt",
        description="Rendering of SDK log lines when log_level is set",
    )


def _renderer(log_format: LogFormat) -> structlog.typing.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.processors.LogfmtRenderer(
        key_order=("timestamp", "level", "msg"),
    )


def configure_logging(
    log_level_name: str,
    log_format: LogFormat = "logfmt",
    file: TextIO | None = None,
) -> None:
    """Configure structlog for the SDK's request and auth events.

    Args:
        log_level_name: Minimum level name; unknown names fall back to INFO.
        log_format: ``"logfmt"`` or ``"json"`` lines.
        file: Destination stream (default: stderr, leaving stdout to the
            host application).
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=file or sys.stderr),
        cache_logger_on_first_use=False,
    )

