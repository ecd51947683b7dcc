"""Typed exception hierarchy for latest-zipalign."""

from pathlib import Path


class LatestZipalignError(Exception):
    """Base exception for all latest-zipalign errors."""

    pass


class ConfigurationError(LatestZipalignError):
    """Raised when a required environment variable is missing or empty."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"Failed to get {env_var} env")


class NotFoundError(LatestZipalignError):
    """Raised when no build tool binary could be selected."""

    def __init__(self, tool: str, message: str):
        self.tool = tool
        super().__init__(message)


class DiscoveryError(NotFoundError):
    """Raised when the search produced no candidate files."""

    def __init__(self, tool: str, search_dir: Path):
        self.search_dir = search_dir
        super().__init__(tool, f"Failed to find {tool} tool in {search_dir}")


class SelectionError(NotFoundError):
    """Raised when candidates existed but none was recorded as the best."""

    def __init__(self, tool: str):
        super().__init__(tool, f"Failed to find latest {tool} tool")
