"""
Request parser for GraphQL over HTTP.

Supports the request encodings described at
https://graphql.org/learn/serving-over-http/:

1. GET with query string:
   /graphql?query={...}&variables={...}&operationName=...

2. POST with JSON body (Content-Type: application/json):
   {"query": "...", "variables": {...}, "operationName": "..."}

3. POST with raw GraphQL body (Content-Type: application/graphql):
   query { ... }

Query string parameters always win over values found in the body.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field
from starlette.requests import Request

from .errors import HttpError
from .request import GraphQLRequest

logger = logging.getLogger(__name__)

APPLICATION_TYPE = "application"
GRAPHQL_SUBTYPE = "graphql"
JSON_SUBTYPE = "json"

# Object-opening brace "{" as the first non-space character. Allowed
# whitespace is defined in RFC 7159: space, tab, line feed, carriage return.
_JSON_OBJECT_PATTERN = re.compile(r"^[\x20\x09\x0a\x0d]*\{")

INVALID_BODY_MESSAGE = "POST body sent invalid JSON."
INVALID_VARIABLES_MESSAGE = "Variables are invalid JSON."
UNPARSABLE_REQUEST_MESSAGE = "The GraphQL query could not be parsed"


@dataclass(frozen=True)
class ContentType:
    """Parsed Content-Type header."""
    type: str = "*"
    subtype: str = "*"
    params: dict[str, str] = field(default_factory=dict)

    @property
    def media_type(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def charset(self) -> Optional[str]:
        return self.params.get("charset")


class GraphQLBody(BaseModel):
    """Wire shape of a JSON-encoded GraphQL request body."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    query: Optional[str] = None
    variables: Optional[dict[str, Any]] = None
    operation_name: Optional[str] = Field(default=None, alias="operationName")


def parse_content_type(header: Optional[str]) -> ContentType:
    """
    Parse a Content-Type header value.

    A missing or unparsable header yields the wildcard type ``*/*``.

    Examples:
        application/json -> ContentType("application", "json")
        application/json; charset=UTF-8 -> params {"charset": "UTF-8"}
    """
    if not header:
        return ContentType()

    media_type, *raw_params = header.split(";")
    main_type, _, subtype = media_type.strip().lower().partition("/")
    if not main_type or not subtype:
        return ContentType()

    params = {}
    for raw_param in raw_params:
        name, sep, value = raw_param.partition("=")
        if sep:
            params[name.strip().lower()] = value.strip().strip('"')

    return ContentType(type=main_type, subtype=subtype.strip(), params=params)


def body_charset(content_type: ContentType) -> str:
    """
    Charset used to decode the request body.

    Without an explicit charset, application/json defaults to UTF-8
    (RFC 4627 section 3) and everything else to ISO-8859-1, the HTTP/1.1
    default.
    """
    if content_type.charset:
        return content_type.charset
    if content_type.media_type == "application/json":
        return "utf-8"
    return "iso-8859-1"


def decode_body(raw: bytes, charset: str) -> str:
    """Decode raw body bytes. Raises LookupError for unknown charsets."""
    return raw.decode(charset)


def parse_body(body: str, content_type: ContentType) -> GraphQLRequest:
    """
    Extract a GraphQLRequest from a decoded request body.

    Bodies that are blank or not of an ``application/*`` type contribute
    nothing.
    """
    if not body.strip() or content_type.type != APPLICATION_TYPE:
        return GraphQLRequest()

    if content_type.subtype == GRAPHQL_SUBTYPE:
        return GraphQLRequest(query=body)
    if content_type.subtype == JSON_SUBTYPE:
        return _parse_json_body(body)
    return GraphQLRequest()


def _parse_json_body(body: str) -> GraphQLRequest:
    data = _load_json_object(body)
    if data is None:
        return GraphQLRequest()

    parsed = GraphQLBody.model_validate(data)
    return GraphQLRequest(
        query=parsed.query,
        operation_name=parsed.operation_name,
        variables=parsed.variables,
    )


def _load_json_object(body: str) -> Any:
    if _JSON_OBJECT_PATTERN.match(body):
        try:
            return json.loads(body)
        except ValueError:
            pass
    raise HttpError.from_message(400, INVALID_BODY_MESSAGE)


def parse_query_params(params: Mapping[str, str]) -> GraphQLRequest:
    """
    Extract a GraphQLRequest from URL query parameters.

    ``query`` and ``operationName`` are taken verbatim; ``variables`` must be
    the JSON text of an object.
    """
    return GraphQLRequest(
        query=params.get("query"),
        operation_name=params.get("operationName"),
        variables=_variables_from_params(params),
    )


def _variables_from_params(params: Mapping[str, str]) -> Optional[dict[str, Any]]:
    variables = params.get("variables")
    if variables is None:
        return None

    try:
        decoded = json.loads(variables)
    except ValueError:
        raise HttpError.from_message(400, INVALID_VARIABLES_MESSAGE)

    if not isinstance(decoded, dict):
        raise HttpError.from_message(400, INVALID_VARIABLES_MESSAGE)
    return decoded


def merge_requests(body: GraphQLRequest, url: GraphQLRequest) -> GraphQLRequest:
    """
    Combine the body and query string requests field by field.

    URL values win when present, which lets explorer UIs override a POSTed
    body through the query string. An empty operation name counts as absent.
    """
    return GraphQLRequest(
        query=url.query if url.query is not None else body.query,
        operation_name=url.operation_name or body.operation_name or None,
        variables=url.variables if url.variables is not None else body.variables,
    )


async def parse_graphql_request(request: Request) -> GraphQLRequest:
    """
    Parse the incoming HTTP request into a GraphQLRequest.

    Raises:
        HttpError: 400 for any malformed input
    """
    try:
        return await _parse_request(request)
    except HttpError:
        raise
    except Exception as e:
        logger.debug(f"Could not parse GraphQL request: {e}")
        raise HttpError.from_message(400, UNPARSABLE_REQUEST_MESSAGE) from e


async def _parse_request(request: Request) -> GraphQLRequest:
    content_type = parse_content_type(request.headers.get("content-type"))
    raw = await request.body()
    body = await run_in_threadpool(decode_body, raw, body_charset(content_type))

    body_request = parse_body(body, content_type)
    url_request = parse_query_params(request.query_params)

    return merge_requests(body_request, url_request)
