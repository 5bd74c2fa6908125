"""
Syncode CLI - Pull command.

Updates the config repository from its remote. Refuses to pull over
uncommitted changes.
"""

import sys

import typer
from rich.console import Console

from syncode.cli.errors import (
    ExitCode,
    print_dirty_working_tree_error,
    print_error,
    print_not_configured_error,
    print_syncode_error,
)
from syncode.core.config import ConfigStore
from syncode.core.errors import (
    DirtyWorkingTreeError,
    FetchFailedError,
    InvalidConfigError,
    NoRemoteError,
    NotAGitRepositoryError,
    NotConfiguredError,
    PullFailedError,
)
from syncode.core.paths import contract_home
from syncode.core.pull import PullResult, PullService
from syncode.core.trace import LOG_DIR_NAME, trace_hint, write_trace

console = Console()


def _print_result(result: PullResult) -> None:
    if result.up_to_date:
        console.print("[green]✓[/green] Already up to date")
        console.print("[dim]No changes to pull[/dim]")
        return
    console.print(f"[blue]{result.behind_count} commit(s) behind remote[/blue]")
    console.print(f"[green]✓[/green] {result.message}")
    console.print("[dim]Successfully pulled from remote. Run [bold]syncode sync[/bold] to export.[/dim]")


def _print_fetching() -> None:
    console.print("[blue]Fetching from remote...[/blue]")


def pull(
    remote: str = typer.Option(
        PullService.DEFAULT_REMOTE,
        "--remote",
        "-r",
        help="Remote to pull from",
    ),
) -> None:
    """
    Pull agent configs from the remote repository.

    Fetches the remote, and fast-forwards the repository if it is behind.
    Uncommitted changes in the repository block the pull.

    Examples:
        syncode pull               # Pull from origin
        syncode pull -r upstream   # Pull from another remote
    """
    store = ConfigStore()
    try:
        config = store.get_config()
    except NotConfiguredError:
        print_not_configured_error()
        raise typer.Exit(ExitCode.USER_ERROR)
    except InvalidConfigError as e:
        print_syncode_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    repo_root = config.repo_root
    console.print(f"[dim]Repository: {contract_home(repo_root)}[/dim]")

    exit_code = ExitCode.SUCCESS
    try:
        service = PullService(repo_root, remote_name=remote)
        remote_url = service.remote_url()
        if remote_url:
            console.print(f"Branch: [cyan]{service.current_branch() or '(detached)'}[/cyan]")
            console.print(f"Remote: [cyan]{remote_url}[/cyan]")
        _print_result(service.run(on_fetch=_print_fetching))
    except DirtyWorkingTreeError as e:
        console.print("[yellow]⚠[/yellow]  Uncommitted changes detected")
        for line in e.status.splitlines():
            console.print(f"   {line}", markup=False)
        print_dirty_working_tree_error(e.change_count)
        exit_code = ExitCode.USER_ERROR
    except (NoRemoteError, NotAGitRepositoryError) as e:
        print_syncode_error(e)
        exit_code = ExitCode.USER_ERROR
    except FetchFailedError as e:
        print_syncode_error(e, reason="Check your network connection and credentials")
        exit_code = ExitCode.GENERAL_ERROR
    except PullFailedError as e:
        reason = trace_hint(e.trace_file) if e.trace_file else None
        print_error(e.message, reason=reason)
        exit_code = ExitCode.GENERAL_ERROR
    except Exception as e:
        trace_file = write_trace(
            e,
            log_dir=repo_root / LOG_DIR_NAME,
            command="pull",
            args=sys.argv[1:],
        )
        print_error(f"Unexpected error: {e}", reason=trace_hint(trace_file))
        exit_code = ExitCode.GENERAL_ERROR

    if exit_code != ExitCode.SUCCESS:
        console.print("[dim]Pull cancelled[/dim]")
        raise typer.Exit(exit_code)


__all__ = ["pull"]
