"""
Sync orchestrator.

Drives one import or export pass over the selected agents:

    Start -> ConfigLoaded -> DirectionChosen -> AgentsSelected
          -> PerAgentLoop -> Summary -> End

Direction and agent selection are supplied by the caller (the CLI prompts
for them). The per-agent loop is strictly sequential: adapters copy files
and two agents may share a parent directory.

A failure for one agent never stops the others. Missing adapters and
adapter exceptions are recorded as failed outcomes and the loop continues.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from syncode.core.adapters import AdapterRegistry, SyncResult, adapter_registry
from syncode.core.agents import get_display_name
from syncode.core.config.models import GlobalConfig
from syncode.core.config.store import ConfigStore
from syncode.core.errors import (
    AdapterMissingError,
    AdapterOperationError,
    NoAgentsConfiguredError,
)
from syncode.core.platform import Platform, get_platform
from syncode.core.sync.models import AgentSyncOutcome, SyncDirection, SyncReport

logger = logging.getLogger(__name__)


class SyncService:
    """
    Service for syncing agent configs between the system and the repository.

    Example:
        >>> service = SyncService(ConfigStore())
        >>> config = service.load_config()
        >>> report = service.run(config, SyncDirection.IMPORT, config.agents)
        >>> print(report.summary())
        Sync complete: 3 succeeded, 0 failed
    """

    def __init__(
        self,
        store: ConfigStore,
        registry: AdapterRegistry | None = None,
        platform: Platform | None = None,
    ) -> None:
        """
        Initialize the sync service.

        Args:
            store: Config store handle
            registry: Adapter registry (defaults to the built-in registry)
            platform: Platform override (defaults to the current platform)
        """
        self.store = store
        self.registry = registry if registry is not None else adapter_registry
        self.platform = platform or get_platform()

    def load_config(self) -> GlobalConfig:
        """
        Load the config for a sync run.

        Raises:
            NotConfiguredError: If no config exists
            InvalidConfigError: If the config cannot be parsed
            NoAgentsConfiguredError: If the config tracks no agents
        """
        config = self.store.get_config()
        if not config.agents:
            raise NoAgentsConfiguredError()
        return config

    def agent_label(self, agent_id: str) -> str:
        """Adapter name if registered, else the metadata display name."""
        adapter = self.registry.get(agent_id)
        return adapter.name if adapter else get_display_name(agent_id)

    def sync_agent(
        self,
        agent_id: str,
        direction: SyncDirection,
        config: GlobalConfig,
    ) -> AgentSyncOutcome:
        """
        Sync a single agent and convert every failure mode into an outcome.

        Args:
            agent_id: Agent to sync
            direction: Import or export
            config: Loaded configuration (provides the repository root)

        Returns:
            AgentSyncOutcome for this agent; never raises for adapter errors
        """
        adapter = self.registry.get(agent_id)
        if adapter is None:
            error = AdapterMissingError(agent_id)
            logger.warning("%s", error)
            return AgentSyncOutcome(
                agent_id=agent_id,
                name=get_display_name(agent_id),
                success=False,
                message=error.message,
            )

        try:
            system_path = adapter.get_config_path(self.platform)
            repo_path = adapter.get_repo_path(config.repo_root)
            logger.debug("%s %s: system=%s repo=%s", direction.value, agent_id, system_path, repo_path)

            if direction == SyncDirection.IMPORT:
                result: SyncResult = adapter.import_config(system_path, repo_path)
            else:
                result = adapter.export_config(repo_path, system_path)
        except Exception as e:
            error = AdapterOperationError(agent_id, direction.value, e)
            logger.warning("%s", error, exc_info=True)
            return AgentSyncOutcome(
                agent_id=agent_id,
                name=adapter.name,
                success=False,
                message=error.message,
            )

        return AgentSyncOutcome(
            agent_id=agent_id,
            name=adapter.name,
            success=result.success,
            message=result.message,
        )

    def run(
        self,
        config: GlobalConfig,
        direction: SyncDirection,
        agent_ids: Sequence[str],
        on_progress: Callable[[AgentSyncOutcome], None] | None = None,
    ) -> SyncReport:
        """
        Sync every selected agent in order.

        Args:
            config: Loaded configuration
            direction: Import or export
            agent_ids: Selected agents, processed in this order
            on_progress: Optional callback invoked after each agent

        Returns:
            SyncReport with exactly one outcome per selected agent
        """
        report = SyncReport(direction=direction, started_at=datetime.now())

        for agent_id in agent_ids:
            outcome = self.sync_agent(agent_id, direction, config)
            report.add(outcome)
            if on_progress is not None:
                on_progress(outcome)

        report.completed_at = datetime.now()
        logger.debug(report.summary())
        return report
