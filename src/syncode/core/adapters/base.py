"""
Config adapter protocol, registry and shared copy strategies.

This module defines the ConfigAdapter protocol that every supported agent
implements, enabling pluggable config locations (opencode, Claude Code,
Cursor, ...). Adapters translate between an agent's config location on the
system and its canonical location inside the tracked repository.

Three copy strategies cover every agent:

- DirectoryAdapter: mirror a whole directory tree
- FileAdapter: copy a single file
- FilteredDirectoryAdapter: copy only a listed subset of a directory

Import (system -> repo) replaces the repo copy so the repository mirrors
the machine. Export (repo -> system) copies over the system location
without deleting untracked system files. Paths that already resolve to the
same files (a symlinked dotfiles setup) are never copied.
"""

import logging
import shutil
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from syncode.core.adapters.models import SyncResult
from syncode.core.paths import contract_home
from syncode.core.platform import Platform

logger = logging.getLogger(__name__)

# Directory inside the repository that holds one entry per agent
REPO_CONFIGS_DIR = "configs"

# Never copied in either direction
IGNORED_NAMES = (".DS_Store", "node_modules", ".git")


@runtime_checkable
class ConfigAdapter(Protocol):
    """
    Protocol for agent config adapters.

    Adapters are stateless. They must not raise for expected conditions
    such as a missing source; those are reported as a failed SyncResult.
    """

    @property
    def id(self) -> str:
        """Agent id this adapter handles (e.g. 'opencode')."""
        ...

    @property
    def name(self) -> str:
        """Human-readable agent name."""
        ...

    def get_config_path(self, platform: Platform) -> Path:
        """Location of the agent's config on this machine."""
        ...

    def get_repo_path(self, repo_root: Path) -> Path:
        """Location of the agent's config inside the repository."""
        ...

    def import_config(self, system_path: Path, repo_path: Path) -> SyncResult:
        """Copy config from the system into the repository."""
        ...

    def export_config(self, repo_path: Path, system_path: Path) -> SyncResult:
        """Copy config from the repository onto the system."""
        ...


class AdapterRegistry:
    """
    Keyed collection of adapter instances.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register(OpenCodeAdapter())
        >>> registry.get("opencode").name
        'OpenCode'
        >>> registry.get("unknown") is None
        True
    """

    def __init__(self) -> None:
        self._adapters: dict[str, ConfigAdapter] = {}

    def register(self, adapter: ConfigAdapter) -> ConfigAdapter:
        """Register an adapter under its id, replacing any previous one."""
        self._adapters[adapter.id] = adapter
        return adapter

    def get(self, agent_id: str) -> ConfigAdapter | None:
        """Look up the adapter for an agent id."""
        return self._adapters.get(agent_id)

    def ids(self) -> list[str]:
        """Registered agent ids in registration order."""
        return list(self._adapters)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)

    def __iter__(self) -> Iterator[ConfigAdapter]:
        return iter(self._adapters.values())


# Process-wide registry, populated when syncode.core.adapters is imported
adapter_registry = AdapterRegistry()


def register_adapter(adapter_class: type) -> type:
    """
    Class decorator that registers an adapter implementation.

    Usage:
        @register_adapter
        class OpenCodeAdapter(DirectoryAdapter):
            id = "opencode"
            ...
    """
    adapter_registry.register(adapter_class())
    return adapter_class


def get_adapter(agent_id: str) -> ConfigAdapter | None:
    """Get the registered adapter for an agent id, or None."""
    return adapter_registry.get(agent_id)


def list_adapters() -> list[str]:
    """List all registered adapter ids."""
    return adapter_registry.ids()


# ---------------------------------------------------------------------------
# Copy helpers
# ---------------------------------------------------------------------------


def _exists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def is_linked(source: Path, destination: Path) -> bool:
    """
    Whether two paths resolve to the same location or one contains the other.

    A system config that is a symlink into the repository (or the reverse)
    is already in sync; copying between them would delete the only copy.
    """
    try:
        resolved_source = source.resolve()
        resolved_destination = destination.resolve()
    except OSError:
        return False
    return (
        resolved_source == resolved_destination
        or resolved_source in resolved_destination.parents
        or resolved_destination in resolved_source.parents
    )


def _swap(staging: Path, destination: Path) -> None:
    """Move a fully written staging copy over the destination."""
    if not _exists(destination):
        staging.rename(destination)
        return

    backup = destination.with_name(f".{destination.name}.syncode-old")
    if _exists(backup):
        _remove(backup)
    destination.rename(backup)
    try:
        staging.rename(destination)
    except OSError:
        backup.rename(destination)
        raise
    _remove(backup)


def copy_entry(source: Path, destination: Path, *, replace: bool) -> None:
    """
    Copy a file or directory tree.

    Replacing copies are staged next to the destination and swapped into
    place only once complete, so a failed copy leaves the old destination
    untouched.

    Args:
        source: File or directory to copy
        destination: Target path (created with parents if needed)
        replace: Replace an existing destination, so the result mirrors the
            source exactly. When False, directories are merged.

    Raises:
        OSError: If the copy fails
    """
    logger.debug("Copying %s -> %s (replace=%s)", source, destination, replace)
    destination.parent.mkdir(parents=True, exist_ok=True)

    if not replace and source.is_dir() and destination.is_dir() and not destination.is_symlink():
        shutil.copytree(
            source,
            destination,
            ignore=shutil.ignore_patterns(*IGNORED_NAMES),
            dirs_exist_ok=True,
        )
        return

    staging = destination.with_name(f".{destination.name}.syncode-tmp")
    if _exists(staging):
        _remove(staging)
    try:
        if source.is_dir():
            shutil.copytree(source, staging, ignore=shutil.ignore_patterns(*IGNORED_NAMES))
        else:
            shutil.copy2(source, staging)
        _swap(staging, destination)
    except OSError:
        if _exists(staging):
            _remove(staging)
        raise


def count_files(path: Path) -> int:
    """Count regular files under a path, skipping ignored names."""
    if path.is_file():
        return 1
    count = 0
    for child in path.iterdir():
        if child.name in IGNORED_NAMES:
            continue
        count += count_files(child) if child.is_dir() else 1
    return count


# ---------------------------------------------------------------------------
# Copy strategies
# ---------------------------------------------------------------------------


class BaseAdapter(ABC):
    """Shared behaviour for adapters: identity and repository layout."""

    id: str = ""
    name: str = ""

    def get_repo_path(self, repo_root: Path) -> Path:
        return Path(repo_root) / REPO_CONFIGS_DIR / self.id

    @abstractmethod
    def get_config_path(self, platform: Platform) -> Path: ...

    @abstractmethod
    def import_config(self, system_path: Path, repo_path: Path) -> SyncResult: ...

    @abstractmethod
    def export_config(self, repo_path: Path, system_path: Path) -> SyncResult: ...

    def _not_found(self, path: Path) -> SyncResult:
        return SyncResult.fail(f"{self.name} config not found at {contract_home(path)}")

    def _already_linked(self, source: Path, destination: Path) -> SyncResult | None:
        """Report, without copying, when source and destination are the same files."""
        if not is_linked(source, destination):
            return None
        logger.debug("%s: %s and %s are linked, skipping copy", self.id, source, destination)
        return SyncResult.ok(
            f"Already linked: {contract_home(source)} -> {contract_home(destination)}"
        )

    def _copy(self, source: Path, destination: Path, *, replace: bool) -> SyncResult | None:
        """Run copy_entry, converting OSError into a failed result."""
        try:
            copy_entry(source, destination, replace=replace)
        except OSError as e:
            logger.warning("Copy failed for %s: %s", self.id, e)
            return SyncResult.fail(f"Failed to copy {contract_home(source)}: {e}")
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class DirectoryAdapter(BaseAdapter):
    """Mirror an entire config directory."""

    def import_config(self, system_path: Path, repo_path: Path) -> SyncResult:
        if not system_path.is_dir():
            return self._not_found(system_path)
        if linked := self._already_linked(system_path, repo_path):
            return linked
        if failure := self._copy(system_path, repo_path, replace=True):
            return failure
        return SyncResult.ok(f"Imported {count_files(repo_path)} files")

    def export_config(self, repo_path: Path, system_path: Path) -> SyncResult:
        if not repo_path.is_dir():
            return self._not_found(repo_path)
        if linked := self._already_linked(repo_path, system_path):
            return linked
        if failure := self._copy(repo_path, system_path, replace=False):
            return failure
        return SyncResult.ok(f"Exported {count_files(repo_path)} files")


class FileAdapter(BaseAdapter):
    """Copy a single config file."""

    def import_config(self, system_path: Path, repo_path: Path) -> SyncResult:
        if not system_path.is_file():
            return self._not_found(system_path)
        if linked := self._already_linked(system_path, repo_path):
            return linked
        if failure := self._copy(system_path, repo_path, replace=True):
            return failure
        return SyncResult.ok(f"Imported {system_path.name}")

    def export_config(self, repo_path: Path, system_path: Path) -> SyncResult:
        if not repo_path.is_file():
            return self._not_found(repo_path)
        if linked := self._already_linked(repo_path, system_path):
            return linked
        if failure := self._copy(repo_path, system_path, replace=True):
            return failure
        return SyncResult.ok(f"Exported {system_path.name}")


class FilteredDirectoryAdapter(BaseAdapter):
    """
    Copy only selected entries of a config directory.

    Agents like Claude Code keep caches, session history and credentials
    next to their settings. Only the names listed in ``include`` are synced;
    everything else is left untouched on both sides. Import also removes
    included entries from the repository once they are gone from the system.
    """

    include: tuple[str, ...] = ()

    def _present(self, root: Path) -> list[str]:
        return [entry for entry in self.include if (root / entry).exists()]

    def _nothing_to_sync(self, root: Path) -> SyncResult:
        return SyncResult.fail(
            f"Nothing to sync: none of {', '.join(self.include)} found in {contract_home(root)}"
        )

    def import_config(self, system_path: Path, repo_path: Path) -> SyncResult:
        if not system_path.is_dir():
            return self._not_found(system_path)
        if linked := self._already_linked(system_path, repo_path):
            return linked
        entries = self._present(system_path)
        if not entries:
            return self._nothing_to_sync(system_path)

        for entry in entries:
            if is_linked(system_path / entry, repo_path / entry):
                continue
            if failure := self._copy(system_path / entry, repo_path / entry, replace=True):
                return failure

        # Entries deleted on the system are deleted from the repository too
        removed = [
            entry
            for entry in self.include
            if entry not in entries and _exists(repo_path / entry)
        ]
        for entry in removed:
            try:
                _remove(repo_path / entry)
            except OSError as e:
                logger.warning("Removing %s failed for %s: %s", entry, self.id, e)
                return SyncResult.fail(f"Failed to remove {contract_home(repo_path / entry)}: {e}")

        message = f"Imported {', '.join(entries)}"
        if removed:
            message += f" (removed {', '.join(removed)})"
        return SyncResult.ok(message)

    def export_config(self, repo_path: Path, system_path: Path) -> SyncResult:
        if not repo_path.is_dir():
            return self._not_found(repo_path)
        if linked := self._already_linked(repo_path, system_path):
            return linked
        entries = self._present(repo_path)
        if not entries:
            return self._nothing_to_sync(repo_path)

        for entry in entries:
            if is_linked(repo_path / entry, system_path / entry):
                continue
            if failure := self._copy(repo_path / entry, system_path / entry, replace=False):
                return failure
        return SyncResult.ok(f"Exported {', '.join(entries)}")
