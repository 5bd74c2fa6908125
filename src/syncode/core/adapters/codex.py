"""Codex CLI adapter (``~/.codex``, excluding auth and session logs)."""

from pathlib import Path

from syncode.core.adapters.base import FilteredDirectoryAdapter, register_adapter
from syncode.core.paths import get_home
from syncode.core.platform import Platform


@register_adapter
class CodexAdapter(FilteredDirectoryAdapter):
    id = "codex"
    name = "Codex"
    include = ("config.toml", "AGENTS.md", "prompts")

    def get_config_path(self, platform: Platform) -> Path:
        return get_home() / ".codex"
