"""
Configuration model, persisted store and migrations.

The persisted GlobalConfig records which repository holds the configs and
which agents this machine tracks.
"""

from .env import get_git_timeout, get_user_env_path, load_layered_env
from .migrations import (
    check_and_migrate_config,
    find_missing_agents,
    get_new_configs_available,
    has_new_configs_available,
)
from .models import GlobalConfig
from .store import ConfigStore, get_config_path

__all__ = [
    # Models
    "GlobalConfig",
    # Store
    "ConfigStore",
    "get_config_path",
    # Environment
    "get_git_timeout",
    "get_user_env_path",
    "load_layered_env",
    # Migrations
    "check_and_migrate_config",
    "find_missing_agents",
    "get_new_configs_available",
    "has_new_configs_available",
]
