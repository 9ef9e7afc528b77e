"""Pytest configuration and fixtures."""

from typing import Any, Optional

import pytest
import pytest_asyncio

from blog_graphql.api.graphql import schema
from blog_graphql.store import Store


@pytest.fixture
def store() -> Store:
    """Fresh store with the demo records."""
    return Store.seeded()


@pytest_asyncio.fixture
async def execute(store):
    """Run a GraphQL document against the seeded store."""

    async def _execute(document: str, variables: Optional[dict[str, Any]] = None):
        return await schema.execute(
            document,
            variable_values=variables,
            context_value={"request": None, "store": store},
        )

    yield _execute
