"""
Standardized error handling and exit codes for the syncode CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from rich.console import Console

from syncode.core.errors import ExitCode, SyncodeError

console = Console()


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Configuration not found",
        ...     reason="syncode needs to know where your config repository lives",
        ...     solution="syncode init --repo ~/dotfiles",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_syncode_error(error: SyncodeError, *, reason: str | None = None) -> None:
    """Print a SyncodeError using its message and remediation hint."""
    print_error(error.message, reason=reason, solution=error.hint)


def print_not_configured_error() -> None:
    """Print error when no config exists."""
    print_error(
        "Configuration not found",
        reason="syncode needs to know where your config repository lives",
        solution="syncode init --repo ~/dotfiles",
    )


def print_no_agents_configured_error() -> None:
    """Print error when the config tracks no agents."""
    print_error(
        "No agents configured",
        reason="Your config does not track any agent yet",
        solution="syncode init --force  # to detect installed agents again",
    )


def print_dirty_working_tree_error(change_count: int) -> None:
    """Print error when the working tree has uncommitted changes."""
    print_error(
        f"Uncommitted changes detected ({change_count} files)",
        reason="Cannot pull with uncommitted changes",
        solution="git commit -am 'WIP'  # or git stash",
    )


def print_invalid_option_error(option: str, valid_options: list[str]) -> None:
    """Print error when an invalid option value is provided."""
    valid_str = ", ".join(valid_options)
    print_error(
        f"Invalid option: {option}",
        reason=f"Valid options are: {valid_str}",
        solution=f"Use one of: {valid_str}",
    )


__all__ = [
    "ExitCode",
    "print_error",
    "print_syncode_error",
    "print_not_configured_error",
    "print_no_agents_configured_error",
    "print_dirty_working_tree_error",
    "print_invalid_option_error",
]
