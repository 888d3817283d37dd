"""
Tests for request logging helpers and the logging context middleware
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.contextvars import get_contextvars

from bookgraph.middleware import (
    LoggingContextMiddleware,
    operation_name_from_payload,
    sanitize_query_params,
)


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(LoggingContextMiddleware)

    @app.post("/graphql")
    async def graphql_context():
        return get_contextvars()

    @app.get("/books/id/{book_id}")
    async def book_context(book_id: str):
        return get_contextvars()

    return TestClient(app)


def test_sanitize_redacts_sensitive_keys():
    params = {"id": "1", "api_key": "abc", "Authorization": "Bearer x", "page": "2"}

    assert sanitize_query_params(params) == {
        "id": "1",
        "api_key": "[REDACTED]",
        "Authorization": "[REDACTED]",
        "page": "2",
    }


@pytest.mark.parametrize(
    "operation_name, query, expected",
    [
        ("GetBook", "{ book { id } }", "GetBook"),
        (None, "query GetBook { book(id: \"1\") { id } }", "GetBook"),
        (None, "query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        (None, "{ books { id } }", "unnamed_operation"),
        (None, "", None),
        (None, None, None),
        ("", 42, None),
    ],
)
def test_operation_name_from_payload(operation_name, query, expected):
    assert operation_name_from_payload(operation_name, query) == expected


class TestLoggingContextMiddleware:
    def test_binds_graphql_operation_and_route(self, client):
        resp = client.post(
            "/graphql",
            json={"query": 'query GetBook { book(id: "2") { id } }'},
            headers={"X-Request-ID": "req-42"},
        )

        assert resp.json() == {
            "request_id": "req-42",
            "method": "POST",
            "path": "/graphql",
            "graphql_operation": "GetBook",
        }
        assert resp.headers["X-Request-ID"] == "req-42"

    def test_non_graphql_route_has_no_operation(self, client):
        context = client.get("/books/id/3").json()

        assert context["path"] == "/books/id/3"
        assert "graphql_operation" not in context

    @pytest.mark.parametrize("supplied", ["x" * 65, "bad id", "<script>alert(1)</script>"])
    def test_untrusted_request_id_is_replaced(self, client, supplied):
        resp = client.get("/books/id/1", headers={"X-Request-ID": supplied})

        echoed = resp.headers["X-Request-ID"]
        assert echoed != supplied
        assert resp.json()["request_id"] == echoed
        assert len(echoed) <= 64

    def test_generates_request_id_when_missing(self, client):
        first = client.get("/books/id/1").headers["X-Request-ID"]
        second = client.get("/books/id/1").headers["X-Request-ID"]

        assert first and second and first != second
