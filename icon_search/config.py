"""Configuration for the icon search MCP server."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """Main configuration for the icon search MCP server."""
    tags_path: Optional[Path] = None  # None = use bundled catalog
    server_name: str = "remix-icon-keyword-server"
    max_input_length: int = 200  # Max chars accepted by the search_icons tool

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        tags_path_str = os.environ.get("ICON_SEARCH_TAGS_PATH")
        tags_path = Path(tags_path_str) if tags_path_str else None

        return cls(
            tags_path=tags_path,
            server_name=os.environ.get("ICON_SEARCH_SERVER_NAME", "remix-icon-keyword-server"),
            max_input_length=int(os.environ.get("ICON_SEARCH_MAX_INPUT_LENGTH", "200")),
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance.

    Returns:
        Config loaded from environment
    """
    global _config

    if _config is None:
        _config = Config.from_env()

    return _config
