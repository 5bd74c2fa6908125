"""Ghostty terminal adapter: a single ``config`` file."""

from pathlib import Path

from syncode.core.adapters.base import FileAdapter, register_adapter
from syncode.core.paths import get_app_support_dir, get_xdg_config_home
from syncode.core.platform import Platform


@register_adapter
class GhosttyAdapter(FileAdapter):
    id = "ghostty"
    name = "Ghostty"

    def get_config_path(self, platform: Platform) -> Path:
        if platform == Platform.MACOS:
            return get_app_support_dir(platform) / "com.mitchellh.ghostty" / "config"
        # Ghostty has no Windows build; fall back to the XDG location
        return get_xdg_config_home() / "ghostty" / "config"
