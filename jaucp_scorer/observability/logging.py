"""
Structured logging for the scoring tool, built on structlog.

Production renders one JSON object per line; every other environment gets
the coloured console renderer. Events emitted inside ``scoring_context``
carry the provider and model they concern, and credential-looking fields
are masked before any renderer sees them.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from jaucp_scorer.config.settings import AppConfig, get_config

# Event keys whose values are never rendered
SECRET_KEYS = frozenset({"api_key", "credential", "authorization", "x-goog-api-key"})
REDACTED = "***"

# Library loggers that would otherwise print full request lines
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def redact_secrets(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask values of credential fields, e.g. ``api_key=sk-...`` becomes ``api_key=***``."""
    for key in event_dict.keys() & SECRET_KEYS:
        event_dict[key] = REDACTED
    return event_dict


def _renderer(config: AppConfig) -> list[Processor]:
    if config.is_production:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging(config: AppConfig | None = None) -> None:
    """
    Configure structlog and the stdlib root logger from ``config``.

    Usage:
        setup_logging()
        logger = get_logger(__name__)
        with scoring_context(provider="gemini", model="gemini-1.5-flash"):
            logger.info("Article scored", total=72)
    """
    config = config or get_config()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_secrets,
        *_renderer(config),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.log_level),
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Structured logger for ``name`` (usually the module's ``__name__``)."""
    return structlog.get_logger(name)


@contextmanager
def scoring_context(provider: str, model: str | None = None, **extra: Any) -> Iterator[None]:
    """
    Attach provider/model fields to every event logged inside the block.

    Fields bound by an enclosing block are restored on exit, so nested
    and concurrent scopes (one per ``asyncio`` task) do not leak into
    each other.
    """
    fields: dict[str, Any] = {"provider": provider, **extra}
    if model is not None:
        fields["model"] = model
    with structlog.contextvars.bound_contextvars(**fields):
        yield
