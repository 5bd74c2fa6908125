"""
Custom exceptions for syncode.

Exception Hierarchy:
    SyncodeError (base)
    ├── SyncodeConfigError
    │   ├── NotConfiguredError (no persisted config)
    │   ├── InvalidConfigError (config file unreadable or invalid)
    │   └── NoAgentsConfiguredError (config tracks zero agents)
    ├── AdapterError
    │   ├── AdapterMissingError (agent id has no registered adapter)
    │   └── AdapterOperationError (import/export raised)
    └── GitWorkflowError
        ├── NotAGitRepositoryError
        ├── NoRemoteError
        ├── DirtyWorkingTreeError
        ├── FetchFailedError
        └── PullFailedError

Every error carries a human-readable message and an optional remediation
hint that the CLI prints as "→ Try: ...". ExitCode lists the process exit
codes shared by the CLI and the sync report.

Example:
    >>> from syncode.core.errors import NotConfiguredError
    >>> try:
    ...     raise NotConfiguredError()
    ... except NotConfiguredError as e:
    ...     print(e.hint)
    syncode init --repo ~/dotfiles
"""

from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Standard exit codes for syncode operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Command aborted on an unexpected or git error."""

    USER_ERROR = 2
    """Precondition failed (not configured, no remote, dirty tree)."""

    PARTIAL_FAILURE = 3
    """Sync ran for every agent but at least one agent failed."""

    SIGINT = 130
    """Cancelled by the operator (Ctrl+C at a prompt) - Unix standard."""


class SyncodeError(Exception):
    """
    Base exception for all syncode errors.

    Attributes:
        message: Human-readable error message
        hint: Optional remediation (command or action) for the operator
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class SyncodeConfigError(SyncodeError):
    """Base class for errors reading the persisted configuration."""


class NotConfiguredError(SyncodeConfigError):
    """Raised when no persisted configuration exists."""

    def __init__(self, path: Path | None = None) -> None:
        super().__init__(
            "Configuration not found",
            hint="syncode init --repo ~/dotfiles",
        )
        self.path = path


class InvalidConfigError(SyncodeConfigError):
    """Raised when the configuration file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Invalid configuration at {path}: {reason}",
            hint=f"Fix or remove {path}, then run: syncode init",
        )
        self.path = path
        self.reason = reason


class NoAgentsConfiguredError(SyncodeConfigError):
    """Raised when the configuration tracks zero agents."""

    def __init__(self) -> None:
        super().__init__(
            "No agents configured",
            hint="syncode init --force  # or add agent ids to your config",
        )


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


class AdapterError(SyncodeError):
    """
    Base class for per-agent adapter failures.

    These never abort a sync run; they are recorded against one agent.

    Attributes:
        agent_id: The agent the failure belongs to
    """

    def __init__(self, agent_id: str, message: str) -> None:
        super().__init__(message)
        self.agent_id = agent_id


class AdapterMissingError(AdapterError):
    """Raised when an agent id has no registered adapter."""

    def __init__(self, agent_id: str) -> None:
        super().__init__(agent_id, f"No adapter found for {agent_id}")


class AdapterOperationError(AdapterError):
    """Raised when an adapter's import or export raised unexpectedly."""

    def __init__(self, agent_id: str, operation: str, cause: BaseException) -> None:
        super().__init__(agent_id, f"Error during {operation} of {agent_id}: {cause}")
        self.operation = operation
        self.__cause__ = cause


# ---------------------------------------------------------------------------
# Git workflow
# ---------------------------------------------------------------------------


class GitWorkflowError(SyncodeError):
    """Base class for errors in the pull workflow."""


class NotAGitRepositoryError(GitWorkflowError):
    """Raised when the configured repository path is not a git repository."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Not a git repository: {path}",
            hint=f"git init {path}  # or fix repoPath in your config",
        )
        self.path = path


class NoRemoteError(GitWorkflowError):
    """Raised when the repository has no remote configured."""

    def __init__(self, remote_name: str = "origin") -> None:
        super().__init__(
            "No remote repository configured",
            hint=f"git remote add {remote_name} <url>",
        )
        self.remote_name = remote_name


class DirtyWorkingTreeError(GitWorkflowError):
    """
    Raised when the repository has uncommitted changes.

    Attributes:
        status: Short git status output describing the changes
    """

    def __init__(self, status: str) -> None:
        change_count = len([line for line in status.splitlines() if line.strip()])
        super().__init__(
            f"Uncommitted changes detected ({change_count} files)",
            hint="git commit -am 'WIP'  # or git stash",
        )
        self.status = status
        self.change_count = change_count


class FetchFailedError(GitWorkflowError):
    """Raised when fetching from the remote fails (network, auth)."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Fetch failed: {detail}")
        self.detail = detail


class PullFailedError(GitWorkflowError):
    """
    Raised when the pull itself fails.

    Attributes:
        trace_file: Path of the diagnostic trace written for this failure
    """

    def __init__(self, detail: str, trace_file: Path | None = None) -> None:
        super().__init__(f"Pull failed: {detail}")
        self.detail = detail
        self.trace_file = trace_file
