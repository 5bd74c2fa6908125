"""
Configuration data model for syncode.

The persisted record lives in ``~/.config/syncode/config.json``::

    {
      "repoPath": "~/dotfiles",
      "agents": ["opencode", "claude"]
    }
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from syncode.core.paths import expand_home


class GlobalConfig(BaseModel):
    """
    Process-wide persisted state.

    Uniqueness of ``agents`` is not enforced on load, since the file may be
    hand-edited; use add_agents() to append without duplicates.

    Example:
        >>> config = GlobalConfig(repo_path="~/dotfiles", agents=["claude"])
        >>> config.add_agents(["claude", "opencode"])
        ['opencode']
        >>> config.agents
        ['claude', 'opencode']
    """

    model_config = ConfigDict(populate_by_name=True)

    repo_path: str = Field(
        alias="repoPath",
        description="Root of the git-tracked config repository (may start with ~)",
    )
    agents: list[str] = Field(
        default_factory=list,
        description="Ordered agent ids tracked by this machine",
    )

    @property
    def repo_root(self) -> Path:
        """Repository path with a leading ~ expanded."""
        return expand_home(self.repo_path)

    def add_agents(self, agent_ids: list[str]) -> list[str]:
        """
        Append agent ids that are not already tracked.

        Args:
            agent_ids: Ids to add, in the order they should appear

        Returns:
            The ids that were actually appended
        """
        added: list[str] = []
        for agent_id in agent_ids:
            if agent_id in self.agents:
                continue
            self.agents.append(agent_id)
            added.append(agent_id)
        return added

    def to_json(self) -> str:
        """Serialize with the on-disk key names."""
        return self.model_dump_json(by_alias=True, indent=2) + "\n"
