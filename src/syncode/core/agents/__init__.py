"""
Agent metadata table.

Maps each known agent id to its display name, adapter availability and
an installation detection predicate.

Example:
    >>> from syncode.core.agents import detect_installed_agents
    >>> from syncode.core.platform import get_platform
    >>> detect_installed_agents(get_platform())  # doctest: +SKIP
    ['opencode', 'claude']
"""

from syncode.core.agents.metadata import (
    AGENTS,
    AgentMetadata,
    detect_installed_agents,
    get_agent_metadata,
    get_agents_with_adapters,
    get_agents_without_adapters,
    get_all_agent_ids,
    get_display_name,
    is_agent_installed,
)

__all__ = [
    "AGENTS",
    "AgentMetadata",
    "detect_installed_agents",
    "get_agent_metadata",
    "get_agents_with_adapters",
    "get_agents_without_adapters",
    "get_all_agent_ids",
    "get_display_name",
    "is_agent_installed",
]
