"""
Runtime module - request pipeline and configuration.
"""

from __future__ import annotations

from .config import ExecuteRequest, RouteConfig, SetupFunction
from .handler import RequestHandler
from .settings import RouteSettings, load_settings

__all__ = [
    "RouteConfig",
    "SetupFunction",
    "ExecuteRequest",
    "RequestHandler",
    "RouteSettings",
    "load_settings",
]
