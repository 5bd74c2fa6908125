"""
Claude Code adapter.

``~/.claude`` mixes user settings with session transcripts, todo lists,
shell snapshots and credentials. Only the user-authored entries are synced.
"""

from pathlib import Path

from syncode.core.adapters.base import FilteredDirectoryAdapter, register_adapter
from syncode.core.paths import get_home
from syncode.core.platform import Platform


@register_adapter
class ClaudeAdapter(FilteredDirectoryAdapter):
    """Sync Claude Code instructions, settings, agents, commands, skills and hooks."""

    id = "claude"
    name = "Claude Code"
    include = (
        "CLAUDE.md",
        "settings.json",
        "agents",
        "commands",
        "skills",
        "hooks",
    )

    def get_config_path(self, platform: Platform) -> Path:
        return get_home() / ".claude"
