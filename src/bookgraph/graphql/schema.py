"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLNamedType, GraphQLObjectType, get_named_type
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..catalog.models import TypeDescription, describe_book_type
from ..catalog.repository import BookCatalog
from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema fails start-up validation."""


schema = strawberry.Schema(query=Query)


def check_type_description(description: TypeDescription) -> list[str]:
    """Compare a structural type description against the built schema.

    Returns:
        A list of mismatch messages; empty when the schema agrees
    """
    graphql_type = schema._schema.get_type(description.name)
    if not isinstance(graphql_type, GraphQLObjectType):
        return [f"Type '{description.name}' is not an object type in the schema"]

    problems = []
    expected = {field.name: field.type for field in description.fields}
    actual: dict[str, str] = {}
    for field_name, field in graphql_type.fields.items():
        named: GraphQLNamedType = get_named_type(field.type)
        actual[field_name] = named.name

    for name, type_name in expected.items():
        if name not in actual:
            problems.append(f"{description.name}.{name} is missing")
        elif actual[name] != type_name:
            problems.append(f"{description.name}.{name} is {actual[name]}, expected {type_name}")
    for name in actual.keys() - expected.keys():
        problems.append(f"{description.name}.{name} is not described")

    return problems


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core validation, an introspection round-trip and a check of
    the Book type against its structural description.

    Raises:
        SchemaValidationError: If any of the checks fail
    """
    from graphql import get_introspection_query, graphql_sync

    graphql_schema = schema._schema

    try:
        errors = gql_validate_schema(graphql_schema)
        if errors:
            raise SchemaValidationError(
                f"GraphQL schema validation failed: {'; '.join(str(e) for e in errors)}"
            )

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            raise SchemaValidationError(
                f"GraphQL introspection failed: {'; '.join(str(e) for e in result.errors)}"
            )

        problems = check_type_description(describe_book_type())
        if problems:
            raise SchemaValidationError(f"Book type mismatch: {'; '.join(problems)}")

        logger.info("GraphQL schema validation successful")

    except SchemaValidationError as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    catalog: BookCatalog, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI serving the given catalog."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "catalog": catalog,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=graphiql,
        context_getter=get_context,
    )
