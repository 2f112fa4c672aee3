# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Structured Logging
JSON-formatted logs via structlog. Every event emitted during a render
carries that render's render_id, item_count and tier_count (bound by
render_context) so a single request can be followed end to end.
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from structlog.types import EventDict, Processor


def _add_app_info(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    """Inject application name into every log entry."""
    event_dict["app"] = "tierlist"
    return event_dict


def _drop_color_message_key(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    """Remove uvicorn's color_message to keep logs clean."""
    event_dict.pop("color_message", None)
    return event_dict


def configure_logging(log_level_name: str | None = None) -> None:
    """
    Configure structlog for JSON output in production and
    human-readable console output in development (DEBUG level).
    Called once at application startup.
    """
    if log_level_name is None:
        from tierlist.config import get_settings
        log_level_name = get_settings().log_level
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_app_info,
        _drop_color_message_key,
    ]

    if log_level_name.upper() == "DEBUG":
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging level (for uvicorn/fastapi passthrough)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str = "tierlist") -> structlog.BoundLogger:
    """
    Return a structlog bound logger.

    Usage:
        log = get_logger(__name__)
        log.info("tier_list_rendered", width=800, height=612)
    """
    return structlog.get_logger(name)


@contextmanager
def render_context(item_count: int, tier_count: int | str) -> Iterator[str]:
    """
    Bind a fresh render_id plus the render's counts to every log entry
    emitted inside the block. Yields the render_id.

    Usage:
        with render_context(item_count=3, tier_count="default") as render_id:
            log.info("render_start")
    """
    render_id = uuid.uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(
        render_id=render_id,
        item_count=item_count,
        tier_count=tier_count,
    )
    try:
        yield render_id
    finally:
        structlog.contextvars.unbind_contextvars("render_id", "item_count", "tier_count")
