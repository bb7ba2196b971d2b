"""
Per-request route configuration.

A RouteConfig is produced for every request by the optional setup function
given to the route:

    def setup(http_request: Request, graphql_request: GraphQLRequest) -> RouteConfig:
        return RouteConfig(
            show_explorer=True,
            context={"user": http_request.headers.get("x-user")},
        )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from graphql import ExecutionResult
from starlette.requests import Request

from ..core.formatting import ErrorFormatter, default_format_error
from ..core.request import GraphQLRequest
from ..explorer import ExplorerRenderer, render_graphiql

ExecuteRequest = Callable[[], Union[ExecutionResult, Awaitable[ExecutionResult]]]

SetupFunction = Callable[
    [Request, GraphQLRequest],
    Union["RouteConfig", Awaitable["RouteConfig"]],
]


@dataclass
class RouteConfig:
    """
    Options applied to a single GraphQL request.

    Contains:
    - format_error: Shapes each error of the response
    - show_explorer: Serve the explorer page to clients preferring HTML
    - execute_request: Replaces execution by the engine when set
    - render_explorer: Renders the explorer page
    - context: Context value passed to resolvers (default: {"request": ...})
    - root_value: Root value passed to resolvers
    """
    format_error: ErrorFormatter = default_format_error
    show_explorer: bool = False
    execute_request: Optional[ExecuteRequest] = None
    render_explorer: ExplorerRenderer = render_graphiql
    context: Any = None
    root_value: Any = None
