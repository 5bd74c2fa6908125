"""
Cursor adapter.

Cursor stores user settings in the VS Code layout under the platform's
application data directory:

- macOS: ~/Library/Application Support/Cursor/User
- Windows: %APPDATA%/Cursor/User
- Linux: ~/.config/Cursor/User

The User directory also holds workspace storage and history, so only the
settings, keybindings and snippets are synced.
"""

from pathlib import Path

from syncode.core.adapters.base import FilteredDirectoryAdapter, register_adapter
from syncode.core.paths import get_app_support_dir
from syncode.core.platform import Platform


@register_adapter
class CursorAdapter(FilteredDirectoryAdapter):
    """Sync Cursor settings, keybindings and snippets."""

    id = "cursor"
    name = "Cursor"
    include = ("settings.json", "keybindings.json", "snippets")

    def get_config_path(self, platform: Platform) -> Path:
        return get_app_support_dir(platform) / "Cursor" / "User"
