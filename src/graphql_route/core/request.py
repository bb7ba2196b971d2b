"""
Normalized GraphQL request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class GraphQLRequest:
    """
    A GraphQL request extracted from an HTTP call.

    Every field is optional: a request built from the query string alone or
    from the body alone is partial, and the two are merged afterwards.
    """
    query: Optional[str] = None
    operation_name: Optional[str] = None
    variables: Optional[dict[str, Any]] = None

    def is_empty(self) -> bool:
        return self.query is None and self.operation_name is None and self.variables is None
