"""
Application factory for serving a GraphQL schema.

Creates a pre-configured FastAPI application with:
- The GraphQL route (GET and POST)
- CORS middleware when origins are configured
- Health check endpoint
- Logging filter to suppress noisy healthcheck logs

Usage:
    from graphql_route import create_graphql_app, RouteSettings

    app = create_graphql_app(schema, RouteSettings(show_explorer=True))
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from graphql import GraphQLSchema

from .api import graphql_route
from .core.request import GraphQLRequest
from .explorer import make_explorer_renderer
from .runtime.config import RouteConfig, SetupFunction
from .runtime.settings import RouteSettings

logger = logging.getLogger(__name__)


HEALTH_PATH = "/health"


class HealthcheckLogFilter(logging.Filter):
    """
    Drop uvicorn access log lines for the health check of the GraphQL app.

    uvicorn logs access lines with the args
    (client, method, path, http_version, status); only the path, without
    its query string, is compared.
    """

    def __init__(self, paths: tuple[str, ...] = (HEALTH_PATH,)):
        super().__init__()
        self.paths = paths

    def filter(self, record: logging.LogRecord) -> bool:
        args = record.args
        if not isinstance(args, tuple) or len(args) < 3:
            return True
        path = str(args[2]).split("?", 1)[0]
        return path not in self.paths


def _setup_logging_filter() -> None:
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthcheckLogFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(HealthcheckLogFilter())


def explorer_setup(settings: RouteSettings) -> SetupFunction:
    """Get a setup function enabling the explorer as configured in settings."""
    render_explorer = make_explorer_renderer(title=settings.explorer_title)

    def setup(request: Request, graphql_request: GraphQLRequest) -> RouteConfig:
        return RouteConfig(show_explorer=True, render_explorer=render_explorer)

    return setup


def create_graphql_app(
    schema: GraphQLSchema,
    settings: Optional[RouteSettings] = None,
    *,
    setup: Optional[SetupFunction] = None,
    title: str = "GraphQL API",
) -> FastAPI:
    """
    Create a FastAPI app serving a GraphQL schema.

    Args:
        schema: Executable schema
        settings: Application settings (default: RouteSettings())
        setup: Function building the RouteConfig of each request. When not
            given and settings enable the explorer, the explorer is enabled
            for every request.
        title: FastAPI app title

    Returns:
        Configured FastAPI application
    """
    settings = settings or RouteSettings()

    if setup is None and settings.show_explorer:
        setup = explorer_setup(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _setup_logging_filter()
        logger.info(f"Serving GraphQL at {settings.path} (explorer: {settings.show_explorer})")
        yield

    app = FastAPI(title=title, version="1.0.0", lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @app.get(HEALTH_PATH)
    async def health_check():
        return {"status": "ok"}

    graphql_route(app, settings.path, schema, setup)

    return app
