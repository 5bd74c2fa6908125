"""
OpenCode adapter.

OpenCode keeps its config (opencode.json, agents, commands, themes) in
``~/.config/opencode`` on every platform. The whole tree is mirrored.
"""

from pathlib import Path

from syncode.core.adapters.base import DirectoryAdapter, register_adapter
from syncode.core.paths import get_xdg_config_home
from syncode.core.platform import Platform


@register_adapter
class OpenCodeAdapter(DirectoryAdapter):
    """Mirror the OpenCode config directory."""

    id = "opencode"
    name = "OpenCode"

    def get_config_path(self, platform: Platform) -> Path:
        return get_xdg_config_home() / "opencode"
