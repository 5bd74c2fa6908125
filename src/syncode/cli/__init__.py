"""
Syncode CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer
from rich.console import Console

from syncode import __version__
from syncode.cli import agents, init_cmd, pull, sync
from syncode.core.config import load_layered_env

# Create the main Typer app
app = typer.Typer(
    name="syncode",
    help="Sync AI coding-agent configs across machines with git",
    no_args_is_help=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Syncode - keep agent configs in sync.

    Quick Start:
        1. syncode init --repo ~/dotfiles   # Choose repo, detect agents
        2. syncode sync                     # Import configs into the repo
        3. git commit && git push           # Share them
        4. syncode pull && syncode sync     # On another machine: export
    """
    # Load the user .env early so SYNCODE_* settings apply to every command.
    # OS env always wins over .env values.
    load_layered_env()

    if debug:
        logging.basicConfig(level=logging.DEBUG)

    ctx.obj = {"debug": debug}


app.command(name="init")(init_cmd.init)
app.command(name="sync")(sync.sync)
app.command(name="pull")(pull.pull)
app.command(name="agents")(agents.agents)


@app.command()
def version() -> None:
    """Show syncode version and exit."""
    console.print(f"syncode version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
