"""
Structured logging for the bookgraph service.

Request-scoped values (request id, GraphQL operation, looked-up book id) are
bound with ``structlog.contextvars`` so every event emitted while serving a
request carries them without repeating them at each call site.
"""

import logging
import re
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.contextvars import (
    bind_contextvars,
    bound_contextvars,
    clear_contextvars,
    get_contextvars,
)

# Accepted shape for client-supplied X-Request-ID values
REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Console renderer when True, JSON lines otherwise.
        log_level: Level name; defaults to DEBUG in debug mode, INFO otherwise.
    """
    level = logging.DEBUG if debug else logging.INFO
    if log_level:
        named = logging.getLevelName(log_level.upper())
        if isinstance(named, int):
            level = named

    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    return secrets.token_urlsafe(9)


def accept_request_id(candidate: str | None) -> str:
    """Use a client-supplied request id if it is short and safe, else mint one."""
    if candidate and REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return new_request_id()


def bind_request_context(request_id: str | None = None, **values: Any) -> str:
    """Start a fresh logging context for one request.

    Returns:
        The request id bound into the context
    """
    request_id = accept_request_id(request_id)
    clear_contextvars()
    bind_contextvars(request_id=request_id, **{k: v for k, v in values.items() if v is not None})
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")


@contextmanager
def book_lookup_context(book_id: str) -> Iterator[None]:
    """Tag events logged during a lookup with the requested book id."""
    with bound_contextvars(book_id=book_id):
        yield
