"""Environment loading helpers.

Syncode reads a user-level ``.env`` file (``~/.config/syncode/.env``) so
that settings like SYNCODE_CONFIG or SYNCODE_GIT_TIMEOUT can be set once per
machine without exporting them in every shell.

We intentionally do *not* let .env override variables that are already present
in the process environment (e.g. exported in the shell).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from syncode.core.paths import get_xdg_config_home

logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT = 60


def _read_env(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if k is None or v is None:
            continue
        out[str(k)] = str(v)
    return out


def get_user_env_path() -> Path:
    """Path to the user-level .env file."""
    return get_xdg_config_home() / "syncode" / ".env"


def load_layered_env(*, user_env_paths: Iterable[Path] | None = None) -> None:
    """Load environment variables from the user .env file(s).

    Args:
        user_env_paths: explicit env file paths (defaults to the user .env)
    """
    if user_env_paths is None:
        user_env_paths = [get_user_env_path()]

    for p in user_env_paths:
        for k, v in _read_env(Path(p)).items():
            if k not in os.environ:
                os.environ[k] = v


def get_git_timeout() -> int:
    """
    Timeout in seconds applied to every git command.

    Reads SYNCODE_GIT_TIMEOUT; invalid or non-positive values fall back to
    the default.
    """
    raw = os.environ.get("SYNCODE_GIT_TIMEOUT")
    if not raw:
        return DEFAULT_GIT_TIMEOUT
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid SYNCODE_GIT_TIMEOUT value %r, ignoring", raw)
        return DEFAULT_GIT_TIMEOUT
    if value < 1:
        logger.warning("SYNCODE_GIT_TIMEOUT must be >= 1, got %d, ignoring", value)
        return DEFAULT_GIT_TIMEOUT
    return value
