"""
Operation selection and HTTP method policy.

The execution engine picks the operation to run by itself; the route only
needs to know its type to reject mutations sent over GET.
"""

from __future__ import annotations

from typing import Optional

from graphql import DocumentNode, OperationDefinitionNode, OperationType

from .errors import HttpError

ALLOWED_METHODS = ("GET", "POST")

MULTIPLE_OPERATIONS_MESSAGE = "Must provide operation name if query contains multiple operations."
NO_OPERATION_MESSAGE = "Must provide an operation."


def resolve_operation(
    document: DocumentNode,
    operation_name: Optional[str],
) -> tuple[Optional[OperationType], Optional[HttpError]]:
    """
    Find the type of the operation a request refers to.

    Returns:
        (operation type, None) on success, (None, HttpError) otherwise
    """
    operations = [
        definition
        for definition in document.definitions
        if isinstance(definition, OperationDefinitionNode)
    ]

    if operation_name is not None:
        for operation in operations:
            if operation.name and operation.name.value == operation_name:
                return operation.operation, None
        return None, HttpError.from_message(400, f"Unknown operation named '{operation_name}'.")

    if not operations:
        return None, HttpError.from_message(400, NO_OPERATION_MESSAGE)
    if len(operations) > 1:
        return None, HttpError.from_message(400, MULTIPLE_OPERATIONS_MESSAGE)
    return operations[0].operation, None


def check_http_method(method: str) -> Optional[HttpError]:
    """Only GET and POST may reach the GraphQL route."""
    if method.upper() in ALLOWED_METHODS:
        return None
    return HttpError.from_message(
        405,
        "GraphQL only supports GET and POST requests.",
        headers={"Allow": ", ".join(ALLOWED_METHODS)},
    )


def check_operation_method(method: str, operation: OperationType) -> Optional[HttpError]:
    """GET requests may only run queries."""
    if method.upper() != "GET" or operation == OperationType.QUERY:
        return None
    return HttpError.from_message(
        405,
        f"Can only perform a {operation.value} operation from a POST request.",
        headers={"Allow": "POST"},
    )
