"""
Result formatting - shapes an execution result into the response payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from graphql import ExecutionResult, GraphQLError

ErrorFormatter = Callable[[GraphQLError], dict[str, Any]]


@dataclass
class ExecutionResultData:
    """
    Execution result of one request.

    ``is_data_present`` is False on error paths where the response must not
    carry a "data" key at all, as opposed to ``data: null``.
    """
    is_data_present: bool
    result: ExecutionResult


def default_format_error(error: GraphQLError) -> dict[str, Any]:
    """Format an error in the standard GraphQL shape (message, locations, path, extensions)."""
    return dict(error.formatted)


def format_result(
    result_data: ExecutionResultData,
    format_error: ErrorFormatter = default_format_error,
) -> dict[str, Any]:
    """
    Build the response payload.

    Keys:
    - data: only if the result carries data (may be None)
    - errors: only if there are errors, each passed through format_error
    - extensions: only if the result has extensions
    """
    result = result_data.result
    response: dict[str, Any] = {}

    if result_data.is_data_present:
        response["data"] = result.data

    if result.errors:
        response["errors"] = [format_error(error) for error in result.errors]

    if result.extensions is not None:
        response["extensions"] = result.extensions

    return response
