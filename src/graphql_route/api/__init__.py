"""
API module - FastAPI endpoints.
"""

from __future__ import annotations

from .router import ROUTE_METHODS, create_graphql_router, graphql_route

__all__ = [
    "ROUTE_METHODS",
    "graphql_route",
    "create_graphql_router",
]
