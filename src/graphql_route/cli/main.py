#!/usr/bin/env python3
"""
graphql-route CLI - Main entry point.

Usage:
    graphql-route init                          # Write default graphql_route.yaml
    graphql-route serve myapp.schema:schema     # Serve a schema with uvicorn
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from graphql import GraphQLSchema

from ..app import create_graphql_app
from ..runtime.settings import DEFAULT_SETTINGS_PATH, RouteSettings, load_settings


def load_schema(target: str) -> GraphQLSchema:
    """
    Import a schema from a "module:attribute" path.

    Raises:
        ValueError: If the target is malformed or not a GraphQLSchema
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got '{target}'")

    module = importlib.import_module(module_name)
    schema: Any = module
    for name in attribute.split("."):
        schema = getattr(schema, name)

    if not isinstance(schema, GraphQLSchema):
        raise ValueError(f"'{target}' is not a GraphQLSchema")
    return schema


def cmd_init(args: argparse.Namespace) -> int:
    """Write a default settings file."""
    path = Path(args.settings)

    if path.exists() and not args.force:
        print(f"Error: {path} already exists. Use --force to overwrite.")
        return 1

    RouteSettings().save(path)
    print(f"Created {path}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Serve a schema with uvicorn."""
    import uvicorn

    settings = load_settings(args.settings) or RouteSettings()
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.explorer:
        settings.show_explorer = True

    # Allow importing the schema module from the working directory
    sys.path.insert(0, str(Path.cwd()))

    try:
        schema = load_schema(args.schema)
    except (ImportError, AttributeError, ValueError) as e:
        print(f"Error loading schema: {e}")
        return 1

    logging.basicConfig(level=settings.log_level.upper())
    app = create_graphql_app(schema, settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="graphql-route",
        description="graphql-route - Serve GraphQL schemas over HTTP"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--settings", "-s",
        default=DEFAULT_SETTINGS_PATH,
        help=f"Settings file (default: {DEFAULT_SETTINGS_PATH})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Write default settings file")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing settings")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Serve a schema")
    serve_parser.add_argument("schema", help="Schema import path (module:attribute)")
    serve_parser.add_argument("--host", help="Bind host")
    serve_parser.add_argument("--port", "-p", type=int, help="Bind port")
    serve_parser.add_argument("--explorer", action="store_true", help="Enable the GraphiQL explorer")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 0

    commands = {
        "init": cmd_init,
        "serve": cmd_serve,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
