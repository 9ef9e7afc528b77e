"""GraphQL API."""

from .schema import schema, create_graphql_router
from .types import UserType, PostType, CommentType
from .resolvers import Query, Mutation

__all__ = [
    "schema",
    "create_graphql_router",
    "UserType",
    "PostType",
    "CommentType",
    "Query",
    "Mutation",
]
