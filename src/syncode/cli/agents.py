"""
Syncode CLI - Agents command.

Lists every known agent with adapter availability, installation state on
this machine, and whether the config tracks it.
"""

from rich.console import Console
from rich.table import Table

from syncode.core.adapters import adapter_registry
from syncode.core.agents import AGENTS, get_display_name, is_agent_installed
from syncode.core.config import ConfigStore, get_new_configs_available
from syncode.core.errors import SyncodeConfigError
from syncode.core.platform import get_platform, get_platform_name

console = Console()


def agents() -> None:
    """
    Show known agents and their sync status on this machine.

    Examples:
        syncode agents
    """
    store = ConfigStore()
    platform = get_platform()

    tracked: list[str] | None
    try:
        tracked = store.get_config().agents
    except SyncodeConfigError:
        tracked = None

    table = Table(title=f"Agents ({get_platform_name(platform)})")
    table.add_column("Agent", style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Adapter")
    table.add_column("Installed")
    table.add_column("Tracked")

    def mark(value: bool) -> str:
        return "[green]✓[/green]" if value else "[dim]-[/dim]"

    for agent in AGENTS:
        table.add_row(
            agent.display_name,
            agent.id,
            mark(agent.id in adapter_registry),
            mark(is_agent_installed(agent.id, platform)),
            mark(agent.id in tracked) if tracked is not None else "[dim]?[/dim]",
        )

    console.print(table)

    if tracked is None:
        console.print("\n[dim]→ Run [bold]syncode init --repo <path>[/bold] to start tracking agents[/dim]")
        return

    unknown = [agent_id for agent_id in tracked if agent_id not in adapter_registry]
    if unknown:
        console.print(
            f"\n[yellow]⚠[/yellow]  No adapter found for: {', '.join(unknown)} (skipped during sync)"
        )

    new_configs = get_new_configs_available(store, platform)
    if new_configs:
        names = ", ".join(get_display_name(agent_id) for agent_id in new_configs)
        console.print(
            f"\n[dim]→ New config available: {names}. Run [bold]syncode sync[/bold] to add it.[/dim]"
        )


__all__ = ["agents"]
