"""
GraphiQL explorer page.

Renders an in-browser query explorer, pre-filled with the request's query,
variables and operation name and with the result of the already executed
request.

Usage:
    from graphql_route import RouteConfig
    from graphql_route.explorer import make_explorer_renderer

    def setup(http_request, graphql_request):
        return RouteConfig(
            show_explorer=True,
            render_explorer=make_explorer_renderer(title="My API"),
        )
"""

from __future__ import annotations

import html
import json
import os
from functools import partial
from typing import Any, Callable, Optional

from ..core.request import GraphQLRequest

# Can be overridden via GRAPHQL_ROUTE_GRAPHIQL_VERSION environment variable
GRAPHIQL_VERSION = os.environ.get("GRAPHQL_ROUTE_GRAPHIQL_VERSION", "1.4.7")
REACT_VERSION = "16.14.0"

ExplorerRenderer = Callable[[Optional[dict[str, Any]], GraphQLRequest], str]


def _safe_serialize(value: Any) -> str:
    """
    JSON-encode a value for embedding in a <script> block.

    "<", ">" and "&" are escaped so that no text can close the script tag.
    """
    if value is None:
        return "undefined"
    encoded = json.dumps(value)
    return (
        encoded.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def render_graphiql(
    result: Optional[dict[str, Any]],
    request: GraphQLRequest,
    *,
    title: str = "GraphiQL",
) -> str:
    """
    Get the explorer HTML for a request.

    Args:
        result: Formatted result of the request, None if it was not executed
        request: Parsed request used to pre-fill the editor
        title: Page title

    Returns:
        HTML string
    """
    query = _safe_serialize(request.query)
    variables = _safe_serialize(
        json.dumps(request.variables, indent=2) if request.variables is not None else None
    )
    operation_name = _safe_serialize(request.operation_name)
    response = _safe_serialize(
        json.dumps(result, indent=2) if result is not None else None
    )

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <title>{html.escape(title)}</title>
  <meta name="robots" content="noindex" />
  <meta name="referrer" content="origin" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <style>
    body {{ margin: 0; overflow: hidden; }}
    #graphiql {{ height: 100vh; }}
  </style>
  <link href="https://unpkg.com/graphiql@{GRAPHIQL_VERSION}/graphiql.min.css" rel="stylesheet" />
  <script src="https://unpkg.com/promise-polyfill@8.1.3/dist/polyfill.min.js"></script>
  <script src="https://unpkg.com/unfetch@4.2.0/dist/unfetch.umd.js"></script>
  <script src="https://unpkg.com/react@{REACT_VERSION}/umd/react.production.min.js"></script>
  <script src="https://unpkg.com/react-dom@{REACT_VERSION}/umd/react-dom.production.min.js"></script>
  <script src="https://unpkg.com/graphiql@{GRAPHIQL_VERSION}/graphiql.min.js"></script>
</head>
<body>
  <div id="graphiql">Loading...</div>
  <script>
    // Collect the URL parameters
    var parameters = {{}};
    window.location.search.substr(1).split('&').forEach(function (entry) {{
      var eq = entry.indexOf('=');
      if (eq >= 0) {{
        parameters[decodeURIComponent(entry.slice(0, eq))] =
          decodeURIComponent(entry.slice(eq + 1));
      }}
    }});

    // Produce a Location query string from a parameter object.
    function locationQuery(params) {{
      return '?' + Object.keys(params).filter(function (key) {{
        return Boolean(params[key]);
      }}).map(function (key) {{
        return encodeURIComponent(key) + '=' +
          encodeURIComponent(params[key]);
      }}).join('&');
    }}

    // Derive a fetch URL from the current URL, sans the GraphQL parameters.
    var graphqlParamNames = {{
      query: true,
      variables: true,
      operationName: true
    }};

    var otherParams = {{}};
    for (var k in parameters) {{
      if (parameters.hasOwnProperty(k) && graphqlParamNames[k] !== true) {{
        otherParams[k] = parameters[k];
      }}
    }}
    var fetchURL = locationQuery(otherParams);

    // Defines a GraphQL fetcher using the fetch API.
    function graphQLFetcher(graphQLParams) {{
      return fetch(fetchURL, {{
        method: 'post',
        headers: {{
          'Accept': 'application/json',
          'Content-Type': 'application/json'
        }},
        body: JSON.stringify(graphQLParams),
        credentials: 'include',
      }}).then(function (response) {{
        return response.json();
      }});
    }}

    // When the query and variables string is edited, update the URL bar so
    // that it can be easily shared.
    function onEditQuery(newQuery) {{
      parameters.query = newQuery;
      updateURL();
    }}

    function onEditVariables(newVariables) {{
      parameters.variables = newVariables;
      updateURL();
    }}

    function onEditOperationName(newOperationName) {{
      parameters.operationName = newOperationName;
      updateURL();
    }}

    function updateURL() {{
      history.replaceState(null, null, locationQuery(parameters));
    }}

    ReactDOM.render(
      React.createElement(GraphiQL, {{
        fetcher: graphQLFetcher,
        onEditQuery: onEditQuery,
        onEditVariables: onEditVariables,
        onEditOperationName: onEditOperationName,
        query: {query},
        response: {response},
        variables: {variables},
        operationName: {operation_name}
      }}),
      document.getElementById('graphiql')
    );
  </script>
</body>
</html>
"""


def make_explorer_renderer(title: str = "GraphiQL") -> ExplorerRenderer:
    """Get a renderer with a custom page title."""
    return partial(render_graphiql, title=title)


__all__ = [
    "ExplorerRenderer",
    "GRAPHIQL_VERSION",
    "render_graphiql",
    "make_explorer_renderer",
]
