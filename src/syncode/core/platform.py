"""
Platform detection.

Config locations differ per operating system (XDG on Linux, AppData on
Windows, Application Support on macOS), so every adapter resolves its
system path against a Platform value.
"""

import platform as _platform
import sys
from enum import Enum


class Platform(str, Enum):
    """Operating systems syncode knows how to resolve config paths for."""

    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"


_DISPLAY_NAMES = {
    Platform.MACOS: "macOS",
    Platform.WINDOWS: "Windows",
    Platform.LINUX: "Linux",
}


def get_platform(sys_platform: str | None = None) -> Platform:
    """
    Derive the Platform from ``sys.platform``.

    Args:
        sys_platform: Override for testing (defaults to ``sys.platform``)

    Returns:
        Platform.MACOS for darwin, Platform.WINDOWS for win32, otherwise LINUX
    """
    value = sys_platform if sys_platform is not None else sys.platform
    if value == "darwin":
        return Platform.MACOS
    if value == "win32":
        return Platform.WINDOWS
    return Platform.LINUX


def get_platform_name(platform: Platform | None = None) -> str:
    """Human-readable platform name, e.g. ``macOS``."""
    return _DISPLAY_NAMES[platform or get_platform()]


def get_platform_string() -> str:
    """Platform string recorded in trace files, e.g. ``linux x86_64``."""
    return f"{sys.platform} {_platform.machine()}"
