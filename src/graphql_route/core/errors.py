"""
Custom exceptions for the GraphQL route.
"""

from __future__ import annotations

from typing import Optional, Sequence

from graphql import GraphQLError


class GraphQLRouteError(Exception):
    """Base exception for all graphql-route errors."""
    pass


class HttpError(GraphQLRouteError):
    """
    Raised when a request must be answered with an HTTP error.

    Carries everything needed to build the error response: the status code,
    GraphQL-shaped errors and any response headers (e.g. ``Allow``).
    """

    def __init__(
        self,
        status_code: int,
        errors: Sequence[GraphQLError],
        headers: Optional[dict[str, str]] = None,
    ):
        self.status_code = status_code
        self.errors = list(errors)
        self.headers = dict(headers or {})
        super().__init__("; ".join(error.message for error in self.errors))

    @classmethod
    def from_message(
        cls,
        status_code: int,
        message: str,
        headers: Optional[dict[str, str]] = None,
    ) -> "HttpError":
        """Build an error response carrying a single plain message."""
        return cls(status_code, [GraphQLError(message)], headers=headers)


def to_http_error(exception: BaseException) -> HttpError:
    """
    Map any exception to an HttpError.

    HttpError passes through unchanged, everything else becomes a 500 with
    the exception message.
    """
    if isinstance(exception, HttpError):
        return exception
    message = str(exception) or "Internal server error"
    return HttpError.from_message(500, message)
