"""
Middleware that scopes a logging context to each HTTP request
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

SENSITIVE_KEYS = {"password", "token", "secret", "auth", "key", "session", "cookie", "credentials"}

# GraphQL payload parameters never logged from a query string
GRAPHQL_PAYLOAD_PARAMS = ("query", "variables", "extensions")

_QUERY_NAME_RE = re.compile(r"\bquery\s+(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact query parameters whose name contains a sensitive keyword."""
    return {
        key: "[REDACTED]" if any(s in key.lower() for s in SENSITIVE_KEYS) else value
        for key, value in params.items()
    }


def operation_name_from_payload(operation_name: Any, query: Any) -> str | None:
    """Name a GraphQL request for the logs: its operationName, its query name, or a fallback."""
    if isinstance(operation_name, str) and operation_name:
        return operation_name
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _QUERY_NAME_RE.search(query)
    return match.group(1) if match else "unnamed_operation"


async def graphql_operation_of(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        params = request.query_params
        return operation_name_from_payload(params.get("operationName"), params.get("query"))

    if request.method != "POST":
        return None
    try:
        data = json.loads(await request.body() or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    return operation_name_from_payload(data.get("operationName"), data.get("query"))


def loggable_params(request: Request) -> dict[str, Any] | None:
    if not request.query_params:
        return None
    params = sanitize_query_params(dict(request.query_params))
    if request.url.path == "/graphql":
        params.update({k: "[REDACTED]" for k in GRAPHQL_PAYLOAD_PARAMS if k in params})
    return params


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Binds request id, route and GraphQL operation for every event of a request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = bind_request_context(
            request.headers.get("x-request-id"),
            method=request.method,
            path=request.url.path,
            graphql_operation=await graphql_operation_of(request),
        )

        try:
            logger.info(
                "Request started",
                query_params=loggable_params(request),
                remote_addr=request.client.host if request.client else None,
            )
            response = await call_next(request)
            logger.info("Request completed", status_code=response.status_code)
        except Exception as e:
            logger.error("Request failed", error=str(e))
            raise
        finally:
            clear_request_context()

        response.headers["X-Request-ID"] = request_id
        return response
