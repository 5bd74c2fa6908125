"""
Static metadata for every agent syncode knows about.

Each entry maps an agent id to its display name, whether an adapter exists
for it, and a detection predicate answering "is this agent installed on
this machine". The table is defined at import time and never mutated.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from syncode.core.paths import (
    get_app_support_dir,
    get_appdata_dir,
    get_home,
    get_xdg_config_home,
)
from syncode.core.platform import Platform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentMetadata:
    """
    Metadata for a single agent.

    Attributes:
        id: Unique agent identifier (e.g. 'opencode')
        display_name: Human-readable name (e.g. 'OpenCode')
        has_adapter: Whether a config adapter is registered for this agent
        detect: Predicate returning True if the agent is installed
    """

    id: str
    display_name: str
    has_adapter: bool
    detect: Callable[[Platform], bool]


def _exists(resolve: Callable[[Platform], Path]) -> Callable[[Platform], bool]:
    """Build a detection predicate from a path resolver."""

    def detect(platform: Platform) -> bool:
        return resolve(platform).exists()

    return detect


def _zed_config_dir(platform: Platform) -> Path:
    if platform == Platform.WINDOWS:
        return get_appdata_dir() / "Zed"
    return get_xdg_config_home() / "zed"


def _ghostty_config_dir(platform: Platform) -> Path:
    if platform == Platform.MACOS:
        return get_app_support_dir(platform) / "com.mitchellh.ghostty"
    return get_xdg_config_home() / "ghostty"


AGENTS: tuple[AgentMetadata, ...] = (
    AgentMetadata(
        id="opencode",
        display_name="OpenCode",
        has_adapter=True,
        detect=_exists(lambda p: get_xdg_config_home() / "opencode"),
    ),
    AgentMetadata(
        id="claude",
        display_name="Claude Code",
        has_adapter=True,
        detect=_exists(lambda p: get_home() / ".claude"),
    ),
    AgentMetadata(
        id="codex",
        display_name="Codex",
        has_adapter=True,
        detect=_exists(lambda p: get_home() / ".codex"),
    ),
    AgentMetadata(
        id="gemini",
        display_name="Gemini CLI",
        has_adapter=True,
        detect=_exists(lambda p: get_home() / ".gemini"),
    ),
    AgentMetadata(
        id="cursor",
        display_name="Cursor",
        has_adapter=True,
        detect=_exists(lambda p: get_app_support_dir(p) / "Cursor" / "User"),
    ),
    AgentMetadata(
        id="ghostty",
        display_name="Ghostty",
        has_adapter=True,
        detect=_exists(lambda p: _ghostty_config_dir(p) / "config"),
    ),
    AgentMetadata(
        id="windsurf",
        display_name="Windsurf",
        has_adapter=False,
        detect=_exists(lambda p: get_home() / ".codeium" / "windsurf"),
    ),
    AgentMetadata(
        id="zed",
        display_name="Zed",
        has_adapter=False,
        detect=_exists(_zed_config_dir),
    ),
)

_BY_ID: dict[str, AgentMetadata] = {agent.id: agent for agent in AGENTS}


def get_agent_metadata(agent_id: str) -> AgentMetadata | None:
    """Look up metadata for an agent id, or None if unknown."""
    return _BY_ID.get(agent_id)


def get_all_agent_ids() -> list[str]:
    """Return every known agent id in registry order."""
    return list(_BY_ID)


def is_agent_installed(agent_id: str, platform: Platform) -> bool:
    """
    Check whether an agent is installed on this machine.

    Args:
        agent_id: Agent identifier
        platform: Current platform

    Returns:
        True if the agent is known and its detection predicate holds.
        Unknown ids and unreadable paths count as not installed.
    """
    metadata = _BY_ID.get(agent_id)
    if metadata is None:
        return False
    try:
        return metadata.detect(platform)
    except OSError as e:
        logger.debug("Detection failed for %s: %s", agent_id, e)
        return False


def detect_installed_agents(platform: Platform) -> list[str]:
    """Return ids of all installed agents, in registry order."""
    return [agent.id for agent in AGENTS if is_agent_installed(agent.id, platform)]


def get_agents_with_adapters() -> list[str]:
    """Return ids of agents that have a config adapter."""
    return [agent.id for agent in AGENTS if agent.has_adapter]


def get_agents_without_adapters() -> list[str]:
    """Return ids of agents that are known but have no adapter yet."""
    return [agent.id for agent in AGENTS if not agent.has_adapter]


def get_display_name(agent_id: str) -> str:
    """Display name for an agent id, falling back to the id itself."""
    metadata = _BY_ID.get(agent_id)
    return metadata.display_name if metadata else agent_id
