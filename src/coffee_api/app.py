"""FastAPI application serving the coffee GraphQL schema."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from strawberry.fastapi import GraphQLRouter

from coffee_api import __version__
from coffee_api.config import Settings
from coffee_api.graphql_schema import schema
from coffee_api.logging_config import setup_logging
from coffee_api.repository import CoffeeRepository

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    repository: CoffeeRepository | None = None,
) -> FastAPI:
    """Build the HTTP app.

    Configures the root logger from ``settings.log_level`` first, so every
    process uvicorn spawns (including reload workers) logs mutations.

    Args:
        settings: Runtime settings. Defaults to ``Settings.from_env()``.
        repository: Repository to serve. Defaults to a new one, seeded
            unless ``settings.seed`` is false.

    Returns:
        FastAPI app with ``/graphql``, ``/health`` and ``/schema.graphql``.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    if repository is None:
        repository = CoffeeRepository() if settings.seed else CoffeeRepository(seed=())

    app = FastAPI(title=settings.title, version=__version__)
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allow_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_context() -> dict[str, Any]:
        return {"repository": repository}

    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
    app.include_router(graphql_router, prefix="/graphql")

    @app.get("/health")
    def health() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/schema.graphql", include_in_schema=False)
    def schema_sdl() -> PlainTextResponse:
        return PlainTextResponse(schema.as_str() + "\n")

    logger.info("coffee-api ready with %d coffees", len(repository))
    return app
