"""Gemini CLI adapter (``~/.gemini``, excluding OAuth credentials and history)."""

from pathlib import Path

from syncode.core.adapters.base import FilteredDirectoryAdapter, register_adapter
from syncode.core.paths import get_home
from syncode.core.platform import Platform


@register_adapter
class GeminiAdapter(FilteredDirectoryAdapter):
    id = "gemini"
    name = "Gemini CLI"
    include = ("settings.json", "GEMINI.md", "commands")

    def get_config_path(self, platform: Platform) -> Path:
        return get_home() / ".gemini"
