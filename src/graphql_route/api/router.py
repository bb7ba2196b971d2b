"""
FastAPI binding for the GraphQL route.

Endpoints:
- GET  /<path> - Queries via query string (?query=...&variables=...&operationName=...)
- POST /<path> - Queries and mutations via JSON or application/graphql body

Other methods reach the handler too and are answered with a GraphQL-shaped
405 response.

Usage:
    from fastapi import FastAPI
    from graphql_route import graphql_route

    app = FastAPI()
    graphql_route(app, "/graphql", schema)
"""

from __future__ import annotations

from typing import Optional, Union

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import Response
from graphql import GraphQLSchema

from ..runtime.config import SetupFunction
from ..runtime.handler import RequestHandler

ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def graphql_route(
    router: Union[APIRouter, FastAPI],
    path: str,
    schema: GraphQLSchema,
    setup: Optional[SetupFunction] = None,
) -> RequestHandler:
    """
    Register the GraphQL endpoint on a router or application.

    Args:
        router: FastAPI application or router
        path: URL path of the endpoint
        schema: Executable schema
        setup: Optional function building the RouteConfig of each request

    Returns:
        The RequestHandler serving the endpoint
    """
    handler = RequestHandler(schema, setup)

    async def graphql_endpoint(request: Request) -> Response:
        return await handler.handle(request)

    router.add_api_route(
        path,
        graphql_endpoint,
        methods=ROUTE_METHODS,
        include_in_schema=False,
    )
    return handler


def create_graphql_router(
    schema: GraphQLSchema,
    *,
    path: str = "/graphql",
    setup: Optional[SetupFunction] = None,
) -> APIRouter:
    """
    Create a router serving the schema.

    Args:
        schema: Executable schema
        path: URL path of the endpoint
        setup: Optional function building the RouteConfig of each request

    Returns:
        Configured FastAPI router
    """
    router = APIRouter()
    graphql_route(router, path, schema, setup)
    return router
