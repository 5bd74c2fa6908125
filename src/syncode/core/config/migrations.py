"""
Config migration: discover agents installed on this machine that are not
yet tracked in the config, and offer to add them.

The "missing" set is ``detected - tracked``, kept in detection order.
Discovery is advisory: the query helpers never raise for a missing or
broken config, they report "nothing new" instead.
"""

import logging
from collections.abc import Callable

import typer
from rich.console import Console

from syncode.core.agents import detect_installed_agents, get_display_name
from syncode.core.config.models import GlobalConfig
from syncode.core.config.store import ConfigStore
from syncode.core.errors import NotConfiguredError, SyncodeConfigError
from syncode.core.platform import Platform, get_platform

logger = logging.getLogger(__name__)
console = Console()


def find_missing_agents(config: GlobalConfig, platform: Platform) -> list[str]:
    """
    Agents detected on this machine that the config does not track.

    Args:
        config: Loaded configuration
        platform: Current platform

    Returns:
        Missing agent ids in detection order
    """
    tracked = set(config.agents)
    return [agent_id for agent_id in detect_installed_agents(platform) if agent_id not in tracked]


def check_and_migrate_config(
    store: ConfigStore,
    *,
    silent: bool = False,
    platform: Platform | None = None,
    confirm: Callable[..., bool] = typer.confirm,
) -> list[str]:
    """
    Offer to add newly detected agents to the config.

    Steps:
        1. Load config; if not configured yet (or unreadable), do nothing.
        2. Compute the missing set; if empty, do nothing.
        3. If silent, do nothing.
        4. Ask the operator; decline or cancel leaves the config untouched.
        5. On acceptance, append missing ids (no duplicates) and save.

    Args:
        store: Config store handle
        silent: Skip the prompt entirely (non-interactive runs)
        platform: Platform override (defaults to the current platform)
        confirm: Prompt function, ``typer.confirm`` by default

    Returns:
        The agent ids that were added (empty when nothing changed)
    """
    try:
        config = store.get_config()
    except NotConfiguredError:
        logger.debug("No config yet, skipping migration check")
        return []
    except SyncodeConfigError as e:
        # Reported by the command that loads the config next
        logger.debug("Skipping migration check: %s", e)
        return []

    missing = find_missing_agents(config, platform or get_platform())
    if not missing or silent:
        return []

    names = ", ".join(get_display_name(agent_id) for agent_id in missing)
    try:
        accepted = confirm(f"New config available: {names}. Add to your config?", default=False)
    except typer.Abort:
        return []
    if not accepted:
        return []

    added = config.add_agents(missing)
    if not added:
        return []
    store.set_config(config)

    console.print(f"[green]✓[/green] Added {names} to your config")
    console.print("[dim]Run [bold]syncode sync[/bold] to import configs to your repo[/dim]")
    return added


def get_new_configs_available(store: ConfigStore, platform: Platform | None = None) -> list[str]:
    """
    Agent ids installed here but not tracked, or [] if config is unavailable.
    """
    try:
        config = store.get_config()
    except SyncodeConfigError as e:
        logger.debug("Config unavailable while checking for new configs: %s", e)
        return []
    return find_missing_agents(config, platform or get_platform())


def has_new_configs_available(store: ConfigStore, platform: Platform | None = None) -> bool:
    """Whether any installed agent is not yet tracked (False if unconfigured)."""
    return bool(get_new_configs_available(store, platform))
