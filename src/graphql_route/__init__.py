"""
graphql-route - GraphQL over HTTP for FastAPI.

Serves a graphql-core schema on a single route:
- GET with query string parameters
- POST with JSON or application/graphql bodies
- Optional GraphiQL explorer for clients preferring HTML

Usage:
    from fastapi import FastAPI
    from graphql_route import RouteConfig, graphql_route

    app = FastAPI()

    def setup(http_request, graphql_request):
        return RouteConfig(show_explorer=True)

    graphql_route(app, "/graphql", schema, setup)
"""

from __future__ import annotations

from .api import create_graphql_router, graphql_route
from .app import create_graphql_app
from .core import (
    ExecutionResultData,
    GraphQLRequest,
    GraphQLRouteError,
    HttpError,
    default_format_error,
    format_result,
)
from .explorer import make_explorer_renderer, render_graphiql
from .runtime import RequestHandler, RouteConfig, RouteSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    # API
    "graphql_route",
    "create_graphql_router",
    "create_graphql_app",
    # Request
    "GraphQLRequest",
    # Errors
    "GraphQLRouteError",
    "HttpError",
    # Formatting
    "ExecutionResultData",
    "default_format_error",
    "format_result",
    # Runtime
    "RequestHandler",
    "RouteConfig",
    "RouteSettings",
    "load_settings",
    # Explorer
    "render_graphiql",
    "make_explorer_renderer",
]
