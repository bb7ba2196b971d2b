"""
graphql-route CLI - Command line tools for serving schemas.
"""

from __future__ import annotations

from .main import app, load_schema, main

__all__ = ["main", "app", "load_schema"]
