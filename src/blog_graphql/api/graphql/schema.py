"""GraphQL schema definition."""

import logging
from typing import Any, Optional

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext
from strawberry.utils.logging import StrawberryLogger

from ...errors import BlogError
from .context import get_context
from .resolvers import Query, Mutation

logger = logging.getLogger("graphql_schema")


class BlogSchema(strawberry.Schema):
    """Schema that logs client-input errors without a traceback."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            if isinstance(error.original_error, BlogError):
                logger.info(f"Rejected {error.path}: {error.message}")
            else:
                StrawberryLogger.error(error, execution_context)


# Create schema
schema = BlogSchema(query=Query, mutation=Mutation)


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
