"""
Init command implementation for syncode.

Creates the global configuration that every other command reads:

- the repository path (kept as typed, so ``~/dotfiles`` stays portable)
- the agents to track (defaults to the agents detected on this machine)

It also creates the repository directory if needed and adds syncode's
trace log directory to the repository's .gitignore.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console

from syncode.cli.errors import ExitCode, print_error
from syncode.core.agents import detect_installed_agents, get_agent_metadata, get_display_name
from syncode.core.config import ConfigStore, GlobalConfig
from syncode.core.paths import contract_home, expand_home
from syncode.core.platform import get_platform
from syncode.core.trace import LOG_DIR_NAME

console = Console()
logger = logging.getLogger(__name__)

# Patterns to add to .gitignore in the config repository
GITIGNORE_PATTERNS = [
    "# syncode",
    f"{LOG_DIR_NAME}/",
]


def _update_gitignore(repo_dir: Path) -> None:
    """Append syncode-specific patterns to .gitignore if not already present."""
    gitignore = repo_dir / ".gitignore"
    existing = gitignore.read_text(encoding="utf-8") if gitignore.exists() else ""

    missing = [p for p in GITIGNORE_PATTERNS if p not in existing]
    if not missing:
        return

    with open(gitignore, "a", encoding="utf-8") as f:
        if existing and not existing.endswith("\n"):
            f.write("\n")
        f.write("\n".join(missing) + "\n")


def init(
    repo: str = typer.Option(
        ...,
        "--repo",
        "-r",
        help="Path of the git repository that stores your configs",
    ),
    agents: list[str] | None = typer.Option(
        None,
        "--agent",
        "-a",
        help="Agent id to track (repeatable). Defaults to detected agents.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing configuration",
    ),
) -> None:
    """
    Initialize syncode on this machine.

    Examples:
        syncode init --repo ~/dotfiles
        syncode init --repo ~/dotfiles -a claude -a opencode
    """
    store = ConfigStore()
    if store.exists() and not force:
        print_error(
            f"Configuration already exists at {contract_home(store.path)}",
            solution="syncode init --force  # to overwrite it",
        )
        raise typer.Exit(ExitCode.USER_ERROR)

    if agents:
        selected = list(dict.fromkeys(agents))
        for agent_id in selected:
            if get_agent_metadata(agent_id) is None:
                console.print(f"[yellow]Warning:[/yellow] Unknown agent '{agent_id}'")
    else:
        selected = detect_installed_agents(get_platform())

    repo_dir = expand_home(repo)
    try:
        repo_dir.mkdir(parents=True, exist_ok=True)
        _update_gitignore(repo_dir)
    except OSError as e:
        print_error(f"Cannot create repository directory {repo}", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    config = GlobalConfig(repo_path=repo, agents=selected)
    store.set_config(config)
    logger.debug("Initialized config at %s", store.path)

    console.print(f"[green]✓[/green] Saved config to {contract_home(store.path)}")
    console.print(f"Repository: [cyan]{repo}[/cyan]")
    if selected:
        names = ", ".join(get_display_name(agent_id) for agent_id in selected)
        console.print(f"Agents: {names}")
        console.print("\n[dim]Run [bold]syncode sync[/bold] to import your configs.[/dim]")
    else:
        console.print("[yellow]No agents detected.[/yellow] Add some with --agent.")


__all__ = ["init"]
