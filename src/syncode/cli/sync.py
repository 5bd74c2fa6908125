"""
Syncode CLI - Sync command.

Imports agent configs from this machine into the repository, or exports
them from the repository onto this machine.
"""

import re

import typer
from rich.console import Console

from syncode.cli.errors import (
    ExitCode,
    print_invalid_option_error,
    print_no_agents_configured_error,
    print_not_configured_error,
    print_syncode_error,
)
from syncode.core.config import ConfigStore, check_and_migrate_config
from syncode.core.errors import (
    InvalidConfigError,
    NoAgentsConfiguredError,
    NotConfiguredError,
)
from syncode.core.sync import AgentSyncOutcome, SyncDirection, SyncService

console = Console()


def parse_agent_selection(raw: str, agents: list[str]) -> list[str]:
    """
    Parse an agent selection typed at the prompt.

    Accepts ``all``, ``none``, or a comma/space separated list of 1-based
    numbers and agent ids. Order of the input is kept; repeats are dropped.

    Args:
        raw: Text entered by the operator
        agents: Configured agent ids, as numbered in the prompt

    Returns:
        Selected agent ids

    Raises:
        ValueError: If a token is neither a valid number nor a configured id

    Example:
        >>> parse_agent_selection("2, claude", ["claude", "opencode"])
        ['opencode', 'claude']
    """
    choices = list(dict.fromkeys(agents))
    text = raw.strip().lower()
    if text in ("", "all"):
        return choices
    if text == "none":
        return []

    selected: list[str] = []
    for token in re.split(r"[,\s]+", raw.strip()):
        if not token:
            continue
        if token.isdigit():
            index = int(token)
            if not 1 <= index <= len(choices):
                raise ValueError(token)
            agent_id = choices[index - 1]
        elif token in choices:
            agent_id = token
        else:
            raise ValueError(token)
        if agent_id not in selected:
            selected.append(agent_id)
    return selected


def _prompt_direction() -> SyncDirection:
    console.print("[bold]Sync direction[/bold]")
    for direction in SyncDirection:
        console.print(f"  [cyan]{direction.value}[/cyan]  {direction.label}")
    while True:
        value = typer.prompt("Direction", default=SyncDirection.IMPORT.value)
        try:
            return SyncDirection(value.strip().lower())
        except ValueError:
            console.print(f"[yellow]Please enter one of: {', '.join(d.value for d in SyncDirection)}[/yellow]")


def _prompt_agents(service: SyncService, agents: list[str], direction: SyncDirection) -> list[str]:
    choices = list(dict.fromkeys(agents))
    console.print(f"[bold]Select agents to {direction.value}[/bold]")
    for number, agent_id in enumerate(choices, start=1):
        hint = "" if agent_id in service.registry else "  [dim](No adapter found)[/dim]"
        console.print(f"  {number}. {service.agent_label(agent_id)} [dim]{agent_id}[/dim]{hint}")
    raw = typer.prompt("Agents (numbers or ids, 'all' or 'none')", default="all")
    return parse_agent_selection(raw, choices)


def _print_outcome(outcome: AgentSyncOutcome) -> None:
    console.print(outcome.summary(), style="green" if outcome.success else "red", markup=False)


def sync(
    direction: SyncDirection | None = typer.Option(
        None,
        "--direction",
        "-d",
        help="import (system → repo) or export (repo → system)",
        case_sensitive=False,
    ),
    agents: list[str] | None = typer.Option(
        None,
        "--agent",
        "-a",
        help="Agent id to sync (repeatable). Defaults to prompting.",
    ),
    all_agents: bool = typer.Option(
        False,
        "--all",
        help="Sync every configured agent without prompting",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Non-interactive: skip new-agent discovery prompt and agent selection",
    ),
) -> None:
    """
    Sync agent configs between this machine and your repository.

    Import copies configs from the system into the repository; export copies
    them from the repository onto the system. Every selected agent is
    attempted even if some fail; the exit code is 3 when any agent failed.

    Examples:
        syncode sync                                 # Interactive
        syncode sync -d import --all                 # Import everything
        syncode sync -d export -a claude -a opencode # Export two agents
    """
    store = ConfigStore()
    check_and_migrate_config(store, silent=yes)

    service = SyncService(store)
    try:
        config = service.load_config()
    except NotConfiguredError:
        print_not_configured_error()
        raise typer.Exit(ExitCode.USER_ERROR)
    except NoAgentsConfiguredError:
        print_no_agents_configured_error()
        raise typer.Exit(ExitCode.USER_ERROR)
    except InvalidConfigError as e:
        print_syncode_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    configured = list(dict.fromkeys(config.agents))

    try:
        if direction is None:
            if yes:
                print_invalid_option_error("--yes without --direction", ["import", "export"])
                raise typer.Exit(ExitCode.USER_ERROR)
            direction = _prompt_direction()

        if agents:
            unknown = [agent_id for agent_id in agents if agent_id not in configured]
            if unknown:
                print_invalid_option_error(", ".join(unknown), configured)
                raise typer.Exit(ExitCode.USER_ERROR)
            selected = list(dict.fromkeys(agents))
        elif all_agents or yes:
            selected = configured
        else:
            try:
                selected = _prompt_agents(service, configured, direction)
            except ValueError as e:
                print_invalid_option_error(str(e), configured)
                raise typer.Exit(ExitCode.USER_ERROR)
    except typer.Abort:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(ExitCode.SIGINT)

    if not selected:
        console.print("[yellow]No agents selected[/yellow]")
        return

    action = "Importing" if direction == SyncDirection.IMPORT else "Exporting"
    console.print(f"[blue]{action} {len(selected)} agent(s)...[/blue]")

    report = service.run(config, direction, selected, on_progress=_print_outcome)

    color = "red" if report.has_failures else "green"
    console.print(f"\n[{color}]{report.summary()}[/{color}]")
    if report.duration_seconds is not None:
        console.print(f"[dim]Finished in {report.duration_seconds:.1f}s[/dim]")

    if direction == SyncDirection.IMPORT:
        console.print(
            "[dim]Configs imported to repository. Commit and push to sync across machines.[/dim]"
        )
    else:
        console.print("[dim]Configs exported to system. Your agents are now synced![/dim]")

    if report.exit_code != ExitCode.SUCCESS:
        raise typer.Exit(report.exit_code)


__all__ = ["parse_agent_selection", "sync"]
