"""Blog GraphQL - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api import create_graphql_router
from .config import get_settings
from .store import Store

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("blog_graphql")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")

    app.state.store = Store.seeded() if settings.seed_demo_data else Store()
    logger.info(f"Store ready: {app.state.store.counts()}")

    yield

    # Shutdown
    logger.info("Shutting down, in-memory records are discarded")


app = FastAPI(
    title="Blog GraphQL",
    description="In-memory users, posts and comments served over GraphQL",
    version=settings.service_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# GraphQL router
app.include_router(create_graphql_router(settings.graphiql), prefix=settings.graphql_path)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "graphql": settings.graphql_path,
    }


@app.get("/health")
async def health(request: Request) -> dict:
    """Health check endpoint."""
    return {"status": "healthy", **request.app.state.store.counts()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog_graphql.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
