"""
Persisted configuration store.

Load and save are the only two operations. A missing file is the canonical
"not configured" signal and surfaces as NotConfiguredError, never as an
empty default. Saves are atomic: the record is written to a temporary file
and renamed into place.
"""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from syncode.core.config.models import GlobalConfig
from syncode.core.errors import InvalidConfigError, NotConfiguredError
from syncode.core.paths import expand_home, get_xdg_config_home

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """
    Get path to the global configuration file.

    Returns:
        $SYNCODE_CONFIG if set, else ~/.config/syncode/config.json
        (or XDG equivalent)
    """
    if override := os.environ.get("SYNCODE_CONFIG"):
        return expand_home(override)
    return get_xdg_config_home() / "syncode" / "config.json"


class ConfigStore:
    """
    Handle on the persisted GlobalConfig.

    Passed explicitly to every component that reads or writes config.

    Example:
        >>> store = ConfigStore(tmp_path / "config.json")
        >>> store.get_config()
        Traceback (most recent call last):
        ...
        syncode.core.errors.NotConfiguredError: Configuration not found
        >>> store.set_config(GlobalConfig(repo_path="~/dotfiles", agents=["claude"]))
        >>> store.get_config().agents
        ['claude']
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or get_config_path()

    def exists(self) -> bool:
        """Whether a persisted config exists."""
        return self.path.exists()

    def get_config(self) -> GlobalConfig:
        """
        Load the persisted configuration.

        Raises:
            NotConfiguredError: If no config file exists
            InvalidConfigError: If the file is not valid JSON or fails validation
        """
        if not self.path.exists():
            raise NotConfiguredError(self.path)

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise InvalidConfigError(self.path, str(e)) from e

        try:
            return GlobalConfig.model_validate_json(content)
        except ValidationError as e:
            raise InvalidConfigError(self.path, _summarize(e)) from e

    def set_config(self, config: GlobalConfig) -> None:
        """Persist the full record, replacing any previous state atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write atomically via temp file
        temp_path = self.path.with_suffix(".tmp")
        try:
            temp_path.write_text(config.to_json(), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError:
            # Clean up temp file on failure
            if temp_path.exists():
                temp_path.unlink()
            raise
        logger.debug("Saved config to %s", self.path)


def _summarize(error: ValidationError) -> str:
    """One-line summary of a pydantic validation error."""
    first = error.errors()[0]
    if first.get("type") == "json_invalid":
        return "not valid JSON"
    location = ".".join(str(part) for part in first.get("loc", ()))
    detail = first.get("msg", "invalid value")
    return f"{location}: {detail}" if location else detail


__all__ = ["ConfigStore", "get_config_path"]
