"""GraphQL front end, served by Strawberry on top of the shared services."""

from .schema import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
