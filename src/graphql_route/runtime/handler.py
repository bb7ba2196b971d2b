"""
Request handler - drives one HTTP call through the GraphQL pipeline.

Pipeline:
1. Parse the GraphQL request from query string and body
2. Resolve the route config through the setup function
3. Check query presence and HTTP method
4. Parse the document and resolve the operation
5. Reject mutations sent over GET
6. Validate the document against the schema
7. Execute (engine or config.execute_request)
8. Format and send JSON, or render the explorer

Each check returns an HttpError instead of raising it; exceptions from the
setup function or the engine are mapped once by to_http_error().
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Optional

from graphql import (
    DocumentNode,
    ExecutionResult,
    GraphQLError,
    GraphQLSchema,
    execute,
    parse,
    validate,
)
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response

from ..core.errors import HttpError, to_http_error
from ..core.formatting import ExecutionResultData, format_result
from ..core.negotiation import can_display_explorer
from ..core.operation import check_http_method, check_operation_method, resolve_operation
from ..core.request import GraphQLRequest
from ..core.request_parser import parse_graphql_request
from .config import RouteConfig, SetupFunction

logger = logging.getLogger(__name__)

MISSING_QUERY_MESSAGE = "Must provide query string."


@dataclass
class _RequestState:
    """Mutable state of a single request; never shared between requests."""
    request: Request
    graphql_request: GraphQLRequest = field(default_factory=GraphQLRequest)
    config: RouteConfig = field(default_factory=RouteConfig)
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def show_explorer(self) -> bool:
        return self.config.show_explorer and can_display_explorer(
            self.request.query_params,
            self.request.headers.get("accept"),
        )


class RequestHandler:
    """
    Serves GraphQL requests for one schema.

    The handler keeps no per-request state and can serve concurrent requests.

    Usage:
        handler = RequestHandler(schema, setup=setup)
        response = await handler.handle(request)
    """

    def __init__(self, schema: GraphQLSchema, setup: Optional[SetupFunction] = None):
        """
        Initialize handler.

        Args:
            schema: Executable schema
            setup: Optional function building the RouteConfig of each request
        """
        self.schema = schema
        self.setup = setup

    async def handle(self, request: Request) -> Response:
        """Handle one HTTP call and build its response."""
        state = _RequestState(request=request)

        try:
            await self._setup(state)
            result, error = await self._execute(state)
        except Exception as e:
            result, error = None, to_http_error(e)
            if not isinstance(e, HttpError):
                logger.error(f"Error while handling GraphQL request: {e}", exc_info=True)

        if error is not None:
            result = self._fail(state, error)

        return self._send_response(state, result)

    async def _setup(self, state: _RequestState) -> None:
        try:
            state.graphql_request = await parse_graphql_request(state.request)
            state.config = await self._resolve_config(state.request, state.graphql_request)
        except Exception:
            # The config is still needed to render the error (explorer mode,
            # error formatting), so resolve it for an empty request.
            try:
                state.config = await self._resolve_config(state.request, GraphQLRequest())
            except Exception as e:
                logger.warning(f"Setup function failed for empty request: {e}")
            raise

    async def _resolve_config(self, request: Request, graphql_request: GraphQLRequest) -> RouteConfig:
        if self.setup is None:
            return RouteConfig()

        config = self.setup(request, graphql_request)
        if inspect.isawaitable(config):
            config = await config
        return config or RouteConfig()

    async def _execute(
        self,
        state: _RequestState,
    ) -> tuple[Optional[ExecutionResultData], Optional[HttpError]]:
        """
        Run the request through the pipeline.

        Returns:
            (result, None) on success. The result is None when execution is
            skipped to render an empty explorer.
            (None, HttpError) when a check failed.
        """
        graphql_request = state.graphql_request
        method = state.request.method

        if graphql_request.query is None:
            if state.show_explorer:
                return None, None
            return None, HttpError.from_message(400, MISSING_QUERY_MESSAGE)

        error = check_http_method(method)
        if error is not None:
            return None, error

        document, error = self._parse_document(graphql_request.query)
        if error is not None:
            return None, error

        operation, error = resolve_operation(document, graphql_request.operation_name)
        if error is not None:
            return None, error

        error = check_operation_method(method, operation)
        if error is not None:
            # The explorer displays the mutation but never runs it
            if state.show_explorer:
                return None, None
            return None, error

        validation_errors = validate(self.schema, document)
        if validation_errors:
            return None, HttpError(400, validation_errors)

        result = await self._perform_request(state, document)

        # No data means a runtime query error; details stay in the payload.
        # http://spec.graphql.org/June2018/#sec-Data
        if result.data is None:
            state.status_code = 500

        return ExecutionResultData(is_data_present=True, result=result), None

    def _parse_document(self, query: str) -> tuple[Optional[DocumentNode], Optional[HttpError]]:
        try:
            return parse(query), None
        except GraphQLError as e:
            return None, HttpError(400, [e])

    async def _perform_request(self, state: _RequestState, document: DocumentNode) -> ExecutionResult:
        config = state.config

        if config.execute_request is not None:
            result = config.execute_request()
        else:
            graphql_request = state.graphql_request
            context = config.context if config.context is not None else {"request": state.request}
            result = execute(
                self.schema,
                document,
                root_value=config.root_value,
                context_value=context,
                variable_values=graphql_request.variables or {},
                operation_name=graphql_request.operation_name,
            )

        if inspect.isawaitable(result):
            result = await result
        return result

    def _fail(self, state: _RequestState, error: HttpError) -> ExecutionResultData:
        state.status_code = error.status_code
        state.headers.update(error.headers)
        logger.debug(f"GraphQL request failed with {error.status_code}: {error}")
        return ExecutionResultData(
            is_data_present=False,
            result=ExecutionResult(data=None, errors=error.errors),
        )

    def _send_response(self, state: _RequestState, result: Optional[ExecutionResultData]) -> Response:
        formatted = format_result(result, state.config.format_error) if result is not None else None

        if state.show_explorer:
            html = state.config.render_explorer(formatted, state.graphql_request)
            return HTMLResponse(html, status_code=state.status_code, headers=state.headers)

        if formatted is None:
            raise RuntimeError("Internal error, result can only be None if the explorer is requested")

        return JSONResponse(formatted, status_code=state.status_code, headers=state.headers)
