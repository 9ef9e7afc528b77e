"""Per-request GraphQL context."""

from typing import Any

import strawberry
from fastapi import Request

from ...store import Store


async def get_context(request: Request) -> dict[str, Any]:
    """Build the context for GraphQL resolvers."""
    return {
        "request": request,
        "store": request.app.state.store,
    }


def get_store(info: strawberry.Info) -> Store:
    """Store the current request runs against."""
    return info.context["store"]
