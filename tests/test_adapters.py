"""
Tests for config adapters.

Tests cover:
- Registry lookup and registration
- Directory, file and filtered copy strategies
- Import mirrors the system; export never deletes system files
- Ignored names and per-platform config paths
- Already-linked paths are never copied; failed copies keep the old data
- Export then import round trips for every copy strategy
"""

import shutil
from pathlib import Path

import pytest

from syncode.core.adapters import (
    AdapterRegistry,
    ClaudeAdapter,
    ConfigAdapter,
    CursorAdapter,
    DirectoryAdapter,
    GhosttyAdapter,
    OpenCodeAdapter,
    SyncResult,
    adapter_registry,
    is_linked,
    get_adapter,
    list_adapters,
)
from syncode.core.platform import Platform


def write_tree(root: Path, files: dict[str, str]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


def snapshot(root: Path) -> dict[str, str]:
    """Relative path -> content for every file under root."""
    return {
        str(path.relative_to(root)): path.read_text()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


# ==============================================================================
# Registry
# ==============================================================================


class TestRegistry:
    def test_builtin_adapters_registered(self) -> None:
        assert sorted(list_adapters()) == ["claude", "codex", "cursor", "gemini", "ghostty", "opencode"]

    def test_get_adapter(self) -> None:
        adapter = get_adapter("opencode")
        assert isinstance(adapter, OpenCodeAdapter)
        assert adapter.name == "OpenCode"

    def test_get_unknown_adapter(self) -> None:
        assert get_adapter("windsurf") is None
        assert "windsurf" not in adapter_registry

    def test_adapters_satisfy_protocol(self) -> None:
        for adapter in adapter_registry:
            assert isinstance(adapter, ConfigAdapter)

    def test_register_replaces_same_id(self) -> None:
        registry = AdapterRegistry()
        first = OpenCodeAdapter()
        second = OpenCodeAdapter()

        registry.register(first)
        registry.register(second)

        assert len(registry) == 1
        assert registry.get("opencode") is second

    def test_repo_path_layout(self, tmp_path: Path) -> None:
        for adapter in adapter_registry:
            assert adapter.get_repo_path(tmp_path) == tmp_path / "configs" / adapter.id


# ==============================================================================
# Directory adapter
# ==============================================================================


class TestDirectoryAdapter:
    @pytest.fixture
    def adapter(self) -> OpenCodeAdapter:
        return OpenCodeAdapter()

    def test_import_copies_tree(self, adapter, opencode_home: Path, tmp_path: Path) -> None:
        repo_path = tmp_path / "repo" / "configs" / "opencode"

        result = adapter.import_config(opencode_home, repo_path)

        assert result.success is True
        assert result.message == "Imported 2 files"
        assert snapshot(repo_path) == snapshot(opencode_home)

    def test_import_removes_stale_repo_files(self, adapter, opencode_home: Path, tmp_path: Path) -> None:
        repo_path = tmp_path / "repo"
        repo_path.mkdir()
        (repo_path / "deleted-on-system.json").write_text("{}")

        adapter.import_config(opencode_home, repo_path)

        assert not (repo_path / "deleted-on-system.json").exists()

    def test_import_skips_ignored_names(self, adapter, opencode_home: Path, tmp_path: Path) -> None:
        (opencode_home / "node_modules" / "pkg").mkdir(parents=True)
        (opencode_home / "node_modules" / "pkg" / "index.js").write_text("")
        (opencode_home / ".DS_Store").write_text("")
        repo_path = tmp_path / "repo"

        adapter.import_config(opencode_home, repo_path)

        assert not (repo_path / "node_modules").exists()
        assert not (repo_path / ".DS_Store").exists()

    def test_import_missing_source(self, adapter, home: Path, tmp_path: Path) -> None:
        result = adapter.import_config(home / ".config" / "opencode", tmp_path / "repo")

        assert result.success is False
        assert "OpenCode config not found at ~/.config/opencode" == result.message
        assert not (tmp_path / "repo").exists()

    def test_export_keeps_untracked_system_files(self, adapter, opencode_home: Path, tmp_path: Path) -> None:
        repo_path = tmp_path / "repo"
        adapter.import_config(opencode_home, repo_path)
        (repo_path / "opencode.json").write_text('{"model": "new"}\n')
        (opencode_home / "local-only.json").write_text("{}")

        result = adapter.export_config(repo_path, opencode_home)

        assert result.success is True
        assert (opencode_home / "opencode.json").read_text() == '{"model": "new"}\n'
        assert (opencode_home / "local-only.json").exists()

    def test_export_missing_repo_copy(self, adapter, opencode_home: Path, tmp_path: Path) -> None:
        result = adapter.export_config(tmp_path / "missing", opencode_home)

        assert result.success is False
        assert "not found" in result.message

    def test_round_trip_restores_system(self, adapter, opencode_home: Path, tmp_path: Path) -> None:
        before = snapshot(opencode_home)
        repo_path = tmp_path / "repo"

        adapter.import_config(opencode_home, repo_path)
        for path in list(opencode_home.iterdir()):
            if path.is_dir():
                for child in path.iterdir():
                    child.unlink()
                path.rmdir()
            else:
                path.unlink()
        adapter.export_config(repo_path, opencode_home)

        assert snapshot(opencode_home) == before

    def test_copy_error_is_reported(self, adapter, opencode_home: Path, tmp_path: Path, monkeypatch) -> None:
        def fail(*args, **kwargs):
            raise PermissionError("Permission denied")

        monkeypatch.setattr("syncode.core.adapters.base.shutil.copytree", fail)

        result = adapter.import_config(opencode_home, tmp_path / "repo")

        assert result.success is False
        assert "Permission denied" in result.message

    def test_failed_import_keeps_repo_copy(
        self, adapter, opencode_home: Path, tmp_path: Path, monkeypatch
    ) -> None:
        repo_path = tmp_path / "configs" / "opencode"
        adapter.import_config(opencode_home, repo_path)
        before = snapshot(repo_path)
        (opencode_home / "opencode.json").write_text("{\"model\": \"new\"}\n")

        def fail(*args, **kwargs):
            raise OSError("No space left on device")

        monkeypatch.setattr("syncode.core.adapters.base.shutil.copytree", fail)

        result = adapter.import_config(opencode_home, repo_path)

        assert result.success is False
        assert snapshot(repo_path) == before
        assert [p.name for p in repo_path.parent.iterdir()] == ["opencode"]


# ==============================================================================
# Filtered directory adapter
# ==============================================================================


class TestFilteredDirectoryAdapter:
    @pytest.fixture
    def adapter(self) -> ClaudeAdapter:
        return ClaudeAdapter()

    def test_import_copies_only_included_entries(self, adapter, claude_home: Path, tmp_path: Path) -> None:
        repo_path = tmp_path / "repo"

        result = adapter.import_config(claude_home, repo_path)

        assert result.success is True
        assert result.message == "Imported CLAUDE.md, settings.json, agents"
        assert sorted(p.name for p in repo_path.iterdir()) == ["CLAUDE.md", "agents", "settings.json"]
        assert not (repo_path / ".credentials.json").exists()
        assert not (repo_path / "projects").exists()

    def test_import_replaces_included_directories(self, adapter, claude_home: Path, tmp_path: Path) -> None:
        repo_path = tmp_path / "repo"
        (repo_path / "agents").mkdir(parents=True)
        (repo_path / "agents" / "removed.md").write_text("old")

        adapter.import_config(claude_home, repo_path)

        assert not (repo_path / "agents" / "removed.md").exists()
        assert (repo_path / "agents" / "reviewer.md").exists()

    def test_export_leaves_other_entries_alone(self, adapter, claude_home: Path, tmp_path: Path) -> None:
        repo_path = tmp_path / "repo"
        adapter.import_config(claude_home, repo_path)
        (repo_path / "CLAUDE.md").write_text("# Updated\n")

        result = adapter.export_config(repo_path, claude_home)

        assert result.success is True
        assert (claude_home / "CLAUDE.md").read_text() == "# Updated\n"
        assert (claude_home / ".credentials.json").read_text() == '{"token": "secret"}\n'
        assert (claude_home / "projects" / "-home-me-app" / "session.jsonl").exists()

    def test_nothing_to_sync(self, adapter, home: Path, tmp_path: Path) -> None:
        claude = home / ".claude"
        (claude / "projects").mkdir(parents=True)

        result = adapter.import_config(claude, tmp_path / "repo")

        assert result.success is False
        assert result.message.startswith("Nothing to sync")

    def test_import_removes_entries_deleted_on_system(
        self, adapter, claude_home: Path, tmp_path: Path
    ) -> None:
        (claude_home / "hooks").mkdir()
        (claude_home / "hooks" / "pre-commit.sh").write_text("exit 0\n")
        repo_path = tmp_path / "repo"
        (repo_path / "notes.md").parent.mkdir(parents=True)
        (repo_path / "notes.md").write_text("kept\n")
        adapter.import_config(claude_home, repo_path)

        shutil.rmtree(claude_home / "hooks")
        (claude_home / "settings.json").unlink()
        result = adapter.import_config(claude_home, repo_path)

        assert result.success is True
        assert result.message == "Imported CLAUDE.md, agents (removed settings.json, hooks)"
        assert not (repo_path / "hooks").exists()
        assert not (repo_path / "settings.json").exists()
        assert (repo_path / "notes.md").exists()


# ==============================================================================
# File adapter
# ==============================================================================


class TestFileAdapter:
    def test_import_and_export_single_file(self, home: Path, tmp_path: Path) -> None:
        adapter = GhosttyAdapter()
        system_path = adapter.get_config_path(Platform.LINUX)
        system_path.parent.mkdir(parents=True)
        system_path.write_text("font-size = 14\n")
        repo_path = adapter.get_repo_path(tmp_path)

        imported = adapter.import_config(system_path, repo_path)
        repo_path.write_text("font-size = 16\n")
        exported = adapter.export_config(repo_path, system_path)

        assert imported == SyncResult.ok("Imported config")
        assert exported == SyncResult.ok("Exported config")
        assert system_path.read_text() == "font-size = 16\n"

    def test_import_missing_file(self, home: Path, tmp_path: Path) -> None:
        adapter = GhosttyAdapter()

        result = adapter.import_config(adapter.get_config_path(Platform.LINUX), tmp_path / "config")

        assert result.success is False


# ==============================================================================
# Config paths
# ==============================================================================


class TestConfigPaths:
    def test_cursor_per_platform(self, home: Path) -> None:
        adapter = CursorAdapter()

        assert adapter.get_config_path(Platform.MACOS) == (
            home / "Library" / "Application Support" / "Cursor" / "User"
        )
        assert adapter.get_config_path(Platform.WINDOWS) == home / "AppData" / "Roaming" / "Cursor" / "User"
        assert adapter.get_config_path(Platform.LINUX) == home / ".config" / "Cursor" / "User"

    def test_ghostty_macos(self, home: Path) -> None:
        assert GhosttyAdapter().get_config_path(Platform.MACOS) == (
            home / "Library" / "Application Support" / "com.mitchellh.ghostty" / "config"
        )

    def test_home_directory_agents(self, home: Path) -> None:
        assert ClaudeAdapter().get_config_path(Platform.LINUX) == home / ".claude"
        assert get_adapter("codex").get_config_path(Platform.LINUX) == home / ".codex"
        assert get_adapter("gemini").get_config_path(Platform.LINUX) == home / ".gemini"

    def test_opencode_is_directory_adapter(self) -> None:
        assert isinstance(get_adapter("opencode"), DirectoryAdapter)


# ==============================================================================
# Linked paths
# ==============================================================================


class TestLinkedPaths:
    """A system config symlinked into the repository is already in sync."""

    def test_is_linked(self, tmp_path: Path) -> None:
        repo = tmp_path / "repo"
        (repo / "nested").mkdir(parents=True)
        link = tmp_path / "link"
        link.symlink_to(repo, target_is_directory=True)

        assert is_linked(link, repo) is True
        assert is_linked(repo / "nested", repo) is True
        assert is_linked(repo, tmp_path / "other") is False

    def test_symlinked_directory(self, home: Path, tmp_path: Path) -> None:
        adapter = OpenCodeAdapter()
        repo_path = adapter.get_repo_path(tmp_path / "dotfiles")
        write_tree(repo_path, {"opencode.json": "{}\n", "agent/docs.md": "Docs\n"})
        system_path = adapter.get_config_path(Platform.LINUX)
        system_path.parent.mkdir(parents=True)
        system_path.symlink_to(repo_path, target_is_directory=True)

        imported = adapter.import_config(system_path, repo_path)
        exported = adapter.export_config(repo_path, system_path)

        assert imported.success is True
        assert imported.message.startswith("Already linked")
        assert exported.message.startswith("Already linked")
        assert snapshot(repo_path) == {"opencode.json": "{}\n", "agent/docs.md": "Docs\n"}
        assert system_path.is_symlink()

    def test_symlinked_file(self, home: Path, tmp_path: Path) -> None:
        adapter = GhosttyAdapter()
        repo_path = adapter.get_repo_path(tmp_path / "dotfiles")
        repo_path.parent.mkdir(parents=True)
        repo_path.write_text("font-size = 14\n")
        system_path = adapter.get_config_path(Platform.LINUX)
        system_path.parent.mkdir(parents=True)
        system_path.symlink_to(repo_path)

        result = adapter.import_config(system_path, repo_path)

        assert result.success is True
        assert result.message.startswith("Already linked")
        assert repo_path.read_text() == "font-size = 14\n"
        assert system_path.read_text() == "font-size = 14\n"

    def test_symlinked_entry_in_filtered_directory(self, claude_home: Path, tmp_path: Path) -> None:
        adapter = ClaudeAdapter()
        repo_path = adapter.get_repo_path(tmp_path / "dotfiles")
        repo_path.mkdir(parents=True)
        (repo_path / "CLAUDE.md").write_text("# From dotfiles\n")
        (claude_home / "CLAUDE.md").unlink()
        (claude_home / "CLAUDE.md").symlink_to(repo_path / "CLAUDE.md")

        result = adapter.import_config(claude_home, repo_path)

        assert result.success is True
        assert (repo_path / "CLAUDE.md").read_text() == "# From dotfiles\n"
        assert (repo_path / "settings.json").exists()

    def test_failed_file_copy_keeps_repo_copy(
        self, home: Path, tmp_path: Path, monkeypatch
    ) -> None:
        adapter = GhosttyAdapter()
        system_path = adapter.get_config_path(Platform.LINUX)
        system_path.parent.mkdir(parents=True)
        system_path.write_text("font-size = 16\n")
        repo_path = adapter.get_repo_path(tmp_path / "dotfiles")
        repo_path.parent.mkdir(parents=True)
        repo_path.write_text("font-size = 14\n")

        def fail(*args, **kwargs):
            raise OSError("No space left on device")

        monkeypatch.setattr("syncode.core.adapters.base.shutil.copy2", fail)

        result = adapter.import_config(system_path, repo_path)

        assert result.success is False
        assert repo_path.read_text() == "font-size = 14\n"
        assert [p.name for p in repo_path.parent.iterdir()] == ["ghostty"]


# ==============================================================================
# Round trip
# ==============================================================================


class TestRoundTrip:
    """Exporting P to the system and importing it into a fresh P' reproduces P."""

    @pytest.mark.parametrize(
        ("adapter", "files", "expected"),
        [
            pytest.param(
                OpenCodeAdapter(),
                {"opencode/opencode.json": "{}\n", "opencode/agent/docs.md": "Docs\n"},
                None,
                id="directory",
            ),
            pytest.param(
                GhosttyAdapter(),
                {"ghostty": "font-size = 14\n"},
                None,
                id="file",
            ),
            pytest.param(
                ClaudeAdapter(),
                {
                    "claude/CLAUDE.md": "# Rules\n",
                    "claude/agents/reviewer.md": "Review\n",
                    "claude/notes.txt": "scratch\n",
                },
                {"claude/CLAUDE.md": "# Rules\n", "claude/agents/reviewer.md": "Review\n"},
                id="filtered",
            ),
        ],
    )
    def test_export_then_import(self, adapter, files, expected, tmp_path: Path) -> None:
        original = tmp_path / "original"
        system = tmp_path / "system"
        restored = tmp_path / "restored"
        write_tree(original, files)

        exported = adapter.export_config(original / adapter.id, system / adapter.id)
        imported = adapter.import_config(system / adapter.id, restored / adapter.id)

        assert exported.success is True, exported.message
        assert imported.success is True, imported.message
        assert snapshot(restored) == (expected or snapshot(original))
