"""
Core module - request parsing, operation policy, negotiation and formatting.
"""

from __future__ import annotations

from .errors import GraphQLRouteError, HttpError, to_http_error
from .formatting import (
    ErrorFormatter,
    ExecutionResultData,
    default_format_error,
    format_result,
)
from .negotiation import MediaRange, can_display_explorer, parse_accept, prefers_html
from .operation import check_http_method, check_operation_method, resolve_operation
from .request import GraphQLRequest
from .request_parser import (
    ContentType,
    GraphQLBody,
    body_charset,
    decode_body,
    merge_requests,
    parse_body,
    parse_content_type,
    parse_graphql_request,
    parse_query_params,
)

__all__ = [
    # Errors
    "GraphQLRouteError",
    "HttpError",
    "to_http_error",
    # Request
    "GraphQLRequest",
    # Request parser
    "ContentType",
    "GraphQLBody",
    "parse_content_type",
    "body_charset",
    "decode_body",
    "parse_body",
    "parse_query_params",
    "merge_requests",
    "parse_graphql_request",
    # Operation policy
    "resolve_operation",
    "check_http_method",
    "check_operation_method",
    # Negotiation
    "MediaRange",
    "parse_accept",
    "prefers_html",
    "can_display_explorer",
    # Formatting
    "ErrorFormatter",
    "ExecutionResultData",
    "default_format_error",
    "format_result",
]
