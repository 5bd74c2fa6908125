"""
Remote pull workflow.

Updates the config repository from its remote, refusing to touch a working
tree with uncommitted changes. Each step can short-circuit:

1. Require a configured remote            -> NoRemoteError
2. Require a clean working tree           -> DirtyWorkingTreeError
3. Fetch remote refs                      -> FetchFailedError
4. Count commits behind the remote        -> 0 means "Already up to date"
5. Fast-forward pull                      -> PullFailedError (+ trace file)

Git is driven through GitPython; every command is bounded by
SYNCODE_GIT_TIMEOUT via ``kill_after_timeout``.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from syncode.core.config.env import get_git_timeout
from syncode.core.errors import (
    DirtyWorkingTreeError,
    FetchFailedError,
    NoRemoteError,
    NotAGitRepositoryError,
    PullFailedError,
)
from syncode.core.pull.models import PullResult
from syncode.core.trace import LOG_DIR_NAME, write_trace

logger = logging.getLogger(__name__)


def _stderr(error: GitCommandError) -> str:
    """Best-effort human-readable detail from a failed git command."""
    stderr = (error.stderr or "").strip()
    # GitPython wraps stderr as "stderr: '...'"
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr or str(error)


class PullService:
    """
    Pull workflow for the config repository.

    Example:
        >>> service = PullService(Path("~/dotfiles").expanduser())
        >>> result = service.run()
        >>> result.message
        'Already up to date'
    """

    DEFAULT_REMOTE = "origin"

    def __init__(
        self,
        repo_path: Path,
        remote_name: str = DEFAULT_REMOTE,
        timeout: int | None = None,
    ) -> None:
        """
        Initialize the pull service.

        Args:
            repo_path: Root of the config repository
            remote_name: Remote to pull from (default: "origin")
            timeout: Seconds before a git command is killed
                (defaults to SYNCODE_GIT_TIMEOUT or 60)

        Raises:
            NotAGitRepositoryError: If repo_path is not a git repository
        """
        self.repo_path = repo_path
        self.remote_name = remote_name
        self.timeout = timeout or get_git_timeout()

        try:
            self.repo = Repo(repo_path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise NotAGitRepositoryError(repo_path) from e

    @property
    def log_dir(self) -> Path:
        """Directory where trace files for this repository are written."""
        return self.repo_path / LOG_DIR_NAME

    def _git(self, *args: str) -> str:
        """
        Run a git command in the repository and return its stdout.

        Raises:
            GitCommandError: If the command fails or times out
        """
        logger.debug("Running git command: git %s", " ".join(args))
        output = self.repo.git.execute(["git", *args], kill_after_timeout=self.timeout)
        return str(output).strip()

    def remote_url(self) -> str | None:
        """URL of the configured remote, or None if it does not exist."""
        try:
            return self._git("remote", "get-url", self.remote_name) or None
        except GitCommandError:
            return None

    def current_branch(self) -> str | None:
        """Name of the checked-out branch, or None if it cannot be determined."""
        try:
            return self._git("rev-parse", "--abbrev-ref", "HEAD") or None
        except GitCommandError:
            return None

    def _status(self, *options: str) -> str:
        # Trace files written by a failed pull must not block the next one
        return self._git("status", *options, "--", ".", f":(exclude){LOG_DIR_NAME}")

    def status_summary(self) -> str:
        """Short status output (``git status --short``), ignoring trace files."""
        return self._status("--short")

    def is_dirty(self) -> bool:
        """Whether the working tree has uncommitted or untracked changes."""
        return bool(self._status("--porcelain"))

    def fetch(self) -> None:
        """
        Fetch refs from the remote.

        Raises:
            FetchFailedError: On network, authentication or timeout failures
        """
        try:
            self._git("fetch", self.remote_name)
        except GitCommandError as e:
            raise FetchFailedError(_stderr(e)) from e

    def behind_count(self, branch: str | None = None) -> int:
        """
        Count commits on the remote tracking branch missing locally.

        Uses the configured upstream, falling back to ``<remote>/<branch>``.
        Returns 0 when neither can be resolved.
        """
        try:
            return int(self._git("rev-list", "--count", "HEAD..@{u}"))
        except GitCommandError:
            logger.debug("No upstream configured, falling back to %s/<branch>", self.remote_name)

        branch = branch or self.current_branch()
        if not branch:
            return 0
        try:
            return int(self._git("rev-list", "--count", f"HEAD..{self.remote_name}/{branch}"))
        except GitCommandError:
            logger.debug("Remote branch %s/%s not found", self.remote_name, branch)
            return 0

    def pull(self, branch: str | None = None) -> None:
        """
        Fast-forward the current branch from the remote.

        Raises:
            PullFailedError: If the pull fails; a trace file is written first
        """
        args = ["pull", "--ff-only", self.remote_name]
        if branch:
            args.append(branch)
        try:
            self._git(*args)
        except GitCommandError as e:
            trace_file = write_trace(e, log_dir=self.log_dir, command="pull", args=args)
            raise PullFailedError(_stderr(e), trace_file) from e

    def run(self, on_fetch: Callable[[], None] | None = None) -> PullResult:
        """
        Run the full pull workflow.

        Args:
            on_fetch: Optional callback invoked once the remote and
                working-tree checks pass, just before fetching

        Returns:
            PullResult; ``up_to_date`` is True when no pull was needed

        Raises:
            NoRemoteError: If the remote is not configured
            DirtyWorkingTreeError: If there are uncommitted changes
            FetchFailedError: If fetching fails
            PullFailedError: If the pull fails
        """
        remote_url = self.remote_url()
        if remote_url is None:
            raise NoRemoteError(self.remote_name)

        branch = self.current_branch()

        # Never pull over uncommitted local edits
        if self.is_dirty():
            raise DirtyWorkingTreeError(self.status_summary())

        if on_fetch is not None:
            on_fetch()
        self.fetch()

        behind = self.behind_count(branch)
        if behind == 0:
            return PullResult(
                branch=branch,
                remote_url=remote_url,
                up_to_date=True,
                message="Already up to date",
            )

        self.pull(branch)
        return PullResult(
            branch=branch,
            remote_url=remote_url,
            behind_count=behind,
            message=f"Pulled {behind} commit(s) from {branch or self.remote_name}",
        )
