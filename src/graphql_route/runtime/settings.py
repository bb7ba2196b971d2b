"""
Settings loading for graphql-route applications.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

# Can be overridden via GRAPHQL_ROUTE_SETTINGS environment variable
DEFAULT_SETTINGS_PATH = os.environ.get("GRAPHQL_ROUTE_SETTINGS", "graphql_route.yaml")


@dataclass
class RouteSettings:
    """Process-wide settings of a GraphQL application."""
    path: str = "/graphql"
    show_explorer: bool = False
    explorer_title: str = "GraphiQL"
    cors_origins: list[str] = field(default_factory=list)
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RouteSettings":
        """Create settings from dictionary."""
        explorer = data.get("explorer", {})
        server = data.get("server", {})

        return cls(
            path=data.get("path", "/graphql"),
            show_explorer=bool(explorer.get("enabled", False)),
            explorer_title=explorer.get("title", "GraphiQL"),
            cors_origins=list(data.get("cors_origins", [])),
            host=server.get("host", "127.0.0.1"),
            port=int(server.get("port", 8000)),
            log_level=server.get("log_level", "info"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary for YAML serialization."""
        return {
            "path": self.path,
            "explorer": {
                "enabled": self.show_explorer,
                "title": self.explorer_title,
            },
            "cors_origins": self.cors_origins,
            "server": {
                "host": self.host,
                "port": self.port,
                "log_level": self.log_level,
            },
        }

    def save(self, path: Path | str = DEFAULT_SETTINGS_PATH) -> None:
        """Save settings to YAML file."""
        path = Path(path)
        content = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        path.write_text(content)


def load_settings(path: Path | str = DEFAULT_SETTINGS_PATH) -> Optional[RouteSettings]:
    """Load settings from YAML file, None if the file does not exist."""
    path = Path(path)
    if not path.exists():
        return None

    data = yaml.safe_load(path.read_text()) or {}
    return RouteSettings.from_dict(data)
