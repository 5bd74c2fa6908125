"""
Pytest configuration and shared fixtures.

Provides an isolated home directory for every test, config store fixtures,
and throwaway git repositories (bare remote + clones) for pull tests.
"""

import os
import subprocess
from pathlib import Path

import pytest

from syncode.core.config import ConfigStore, GlobalConfig

# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    """
    Point HOME, XDG_CONFIG_HOME and APPDATA at a temporary directory.

    Autouse so that no test can read or write the real user's agent configs
    or syncode config.
    """
    home_dir = tmp_path / "home"
    home_dir.mkdir()

    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home_dir / ".config"))
    monkeypatch.setenv("APPDATA", str(home_dir / "AppData" / "Roaming"))

    # Remove all SYNCODE_* env vars
    for key in list(os.environ.keys()):
        if key.startswith("SYNCODE_"):
            monkeypatch.delenv(key, raising=False)

    return home_dir


@pytest.fixture
def config_home(home):
    """The XDG config directory inside the fake home."""
    path = home / ".config"
    path.mkdir(exist_ok=True)
    return path


# ==============================================================================
# Config Fixtures
# ==============================================================================


@pytest.fixture
def store():
    """ConfigStore at the default location inside the fake home."""
    return ConfigStore()


@pytest.fixture
def repo_root(home):
    """Config repository directory (``~/dotfiles``)."""
    path = home / "dotfiles"
    path.mkdir(exist_ok=True)
    return path


@pytest.fixture
def configure(store, repo_root):
    """
    Factory that persists a GlobalConfig tracking the given agents.

    Usage:
        def test_something(configure):
            config = configure(["claude", "opencode"])
    """

    def _configure(agents: list[str], repo_path: str = "~/dotfiles") -> GlobalConfig:
        config = GlobalConfig(repo_path=repo_path, agents=agents)
        store.set_config(config)
        return config

    return _configure


# ==============================================================================
# Agent Config Fixtures
# ==============================================================================


@pytest.fixture
def claude_home(home):
    """A ~/.claude directory with synced and unsynced entries."""
    claude = home / ".claude"
    (claude / "agents").mkdir(parents=True)
    (claude / "projects" / "-home-me-app").mkdir(parents=True)
    (claude / "CLAUDE.md").write_text("# Global instructions\n")
    (claude / "settings.json").write_text('{"theme": "dark"}\n')
    (claude / "agents" / "reviewer.md").write_text("You review code.\n")
    (claude / "projects" / "-home-me-app" / "session.jsonl").write_text("{}\n")
    (claude / ".credentials.json").write_text('{"token": "secret"}\n')
    return claude


@pytest.fixture
def opencode_home(config_home):
    """A ~/.config/opencode directory."""
    opencode = config_home / "opencode"
    (opencode / "agent").mkdir(parents=True)
    (opencode / "opencode.json").write_text('{"model": "anthropic/claude"}\n')
    (opencode / "agent" / "docs.md").write_text("Write docs.\n")
    return opencode


# ==============================================================================
# Git Fixtures
# ==============================================================================


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command for test setup and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def configure_git_user(repo: Path) -> None:
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "commit.gpgsign", "false")


def commit_file(repo: Path, name: str, content: str, message: str) -> None:
    """Write a file and commit it."""
    (repo / name).write_text(content)
    run_git(repo, "add", name)
    run_git(repo, "commit", "-m", message)


@pytest.fixture
def git_remote(tmp_path):
    """A bare repository acting as the remote."""
    remote = tmp_path / "remote.git"
    remote.mkdir()
    run_git(remote, "init", "--bare")
    return remote


@pytest.fixture
def git_repo(home, git_remote):
    """
    ``~/dotfiles`` cloned from git_remote, with one pushed commit and an
    upstream branch configured.
    """
    repo = home / "dotfiles"
    run_git(home, "clone", str(git_remote), str(repo))
    configure_git_user(repo)
    commit_file(repo, "README.md", "# dotfiles\n", "Initial commit")
    run_git(repo, "push", "-u", "origin", "HEAD")
    return repo


@pytest.fixture
def other_clone(tmp_path, git_remote, git_repo):
    """A second clone of the remote, used to push commits from 'another machine'."""
    clone = tmp_path / "other"
    run_git(tmp_path, "clone", str(git_remote), str(clone))
    configure_git_user(clone)
    return clone


@pytest.fixture
def remote_ahead(git_repo, other_clone):
    """Push one commit from the other clone so git_repo is one commit behind."""
    commit_file(other_clone, "opencode.json", '{"model": "x"}\n', "Add opencode config")
    run_git(other_clone, "push", "origin", "HEAD")
    return git_repo


@pytest.fixture
def git():
    """The run_git helper, for tests that need extra git setup."""
    return run_git


@pytest.fixture
def commit():
    """The commit_file helper."""
    return commit_file
