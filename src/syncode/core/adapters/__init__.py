"""
Config adapters and the adapter registry.

Importing this package registers every built-in adapter in
``adapter_registry``.

Example:
    >>> from syncode.core.adapters import get_adapter
    >>> from syncode.core.platform import get_platform
    >>> adapter = get_adapter("opencode")
    >>> adapter.get_config_path(get_platform())  # doctest: +SKIP
    PosixPath('/home/me/.config/opencode')
"""

from syncode.core.adapters.base import (
    REPO_CONFIGS_DIR,
    AdapterRegistry,
    BaseAdapter,
    ConfigAdapter,
    DirectoryAdapter,
    FileAdapter,
    FilteredDirectoryAdapter,
    adapter_registry,
    copy_entry,
    is_linked,
    get_adapter,
    list_adapters,
    register_adapter,
)
from syncode.core.adapters.claude import ClaudeAdapter
from syncode.core.adapters.codex import CodexAdapter
from syncode.core.adapters.cursor import CursorAdapter
from syncode.core.adapters.gemini import GeminiAdapter
from syncode.core.adapters.ghostty import GhosttyAdapter
from syncode.core.adapters.models import SyncResult
from syncode.core.adapters.opencode import OpenCodeAdapter

__all__ = [
    "REPO_CONFIGS_DIR",
    "AdapterRegistry",
    "BaseAdapter",
    "ConfigAdapter",
    "DirectoryAdapter",
    "FileAdapter",
    "FilteredDirectoryAdapter",
    "SyncResult",
    "adapter_registry",
    "copy_entry",
    "is_linked",
    "get_adapter",
    "list_adapters",
    "register_adapter",
    # Built-in adapters
    "ClaudeAdapter",
    "CodexAdapter",
    "CursorAdapter",
    "GeminiAdapter",
    "GhosttyAdapter",
    "OpenCodeAdapter",
]
