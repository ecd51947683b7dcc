"""Android SDK path helpers."""

import os
import platform
from collections.abc import Mapping
from pathlib import Path

from latest_zipalign.core.locator import DEFAULT_TOOL, locate
from latest_zipalign.exceptions import ConfigurationError

ANDROID_HOME_ENV = "ANDROID_HOME"

# Build tools shipped as batch wrappers rather than executables on Windows
_WINDOWS_SCRIPTS = {"apksigner", "d8", "lint"}


def get_android_home(environ: Mapping[str, str] | None = None) -> Path:
    """Get Android SDK root directory from ANDROID_HOME.

    Only the environment is consulted; the filesystem is not touched.

    Args:
        environ: Environment mapping (defaults to os.environ).

    Returns:
        Path to Android SDK root.

    Raises:
        ConfigurationError: If ANDROID_HOME is unset or empty.
    """
    env = os.environ if environ is None else environ
    value = env.get(ANDROID_HOME_ENV, "")
    if not value.strip():
        raise ConfigurationError(ANDROID_HOME_ENV)
    return Path(value)


def tool_file_name(tool: str) -> str:
    """Get the on-disk file name of a build tool for this platform."""
    if platform.system() != "Windows" or Path(tool).suffix:
        return tool
    if tool in _WINDOWS_SCRIPTS:
        return f"{tool}.bat"
    return f"{tool}.exe"


def get_latest_tool(tool: str, android_home: Path | None = None) -> Path:
    """Get path to the newest installed build tool binary.

    Args:
        tool: Tool name (e.g., "zipalign").
        android_home: SDK root. Defaults to ANDROID_HOME.

    Returns:
        Path to the tool under the highest build-tools version.

    Raises:
        ConfigurationError: If ANDROID_HOME is needed but not set.
        DiscoveryError: If no build-tools version contains the tool.
        SelectionError: If no best candidate could be selected.
    """
    if android_home is None:
        android_home = get_android_home()
    return locate(android_home, tool_file_name(tool))


def get_zipalign(android_home: Path | None = None) -> Path:
    """Get path to the newest zipalign binary."""
    return get_latest_tool(DEFAULT_TOOL, android_home)
