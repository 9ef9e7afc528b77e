"""API layer."""

from .graphql import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
