"""
Filesystem path helpers.

All helpers read the environment at call time so that tests can point
HOME, XDG_CONFIG_HOME and APPDATA at a temporary directory.
"""

import os
from pathlib import Path

from syncode.core.platform import Platform


def get_home() -> Path:
    """Return the operator's home directory."""
    return Path.home()


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return get_home() / ".config"


def get_appdata_dir() -> Path:
    """Windows roaming AppData directory (``%APPDATA%``)."""
    if appdata := os.environ.get("APPDATA"):
        return Path(appdata)
    return get_home() / "AppData" / "Roaming"


def get_app_support_dir(platform: Platform) -> Path:
    """
    Per-platform directory where desktop applications keep user config.

    Args:
        platform: Target platform

    Returns:
        ~/Library/Application Support on macOS, %APPDATA% on Windows,
        and the XDG config home on Linux
    """
    if platform == Platform.MACOS:
        return get_home() / "Library" / "Application Support"
    if platform == Platform.WINDOWS:
        return get_appdata_dir()
    return get_xdg_config_home()


def expand_home(path: str | Path) -> Path:
    """
    Expand a leading ``~`` to the operator's home directory.

    Only the leading component is expanded; ``~user`` forms are not.

    Example:
        >>> expand_home("~/dotfiles")  # doctest: +SKIP
        PosixPath('/home/me/dotfiles')
    """
    text = str(path)
    if text == "~":
        return get_home()
    if text.startswith("~/") or text.startswith("~\\"):
        return get_home() / text[2:]
    return Path(text)


def contract_home(path: str | Path) -> str:
    """Replace the home directory prefix with ``~`` for display."""
    text = str(path)
    home = str(get_home())
    if text == home:
        return "~"
    if text.startswith(home + os.sep):
        return "~" + text[len(home):]
    return text
