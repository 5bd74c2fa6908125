"""
Tests for .env loading and environment-derived settings.
"""

import logging
import os
from pathlib import Path

import pytest

from syncode.core.config import get_git_timeout, get_user_env_path, load_layered_env
from syncode.core.config.env import DEFAULT_GIT_TIMEOUT


class TestLoadLayeredEnv:
    def test_user_env_path(self, home: Path) -> None:
        assert get_user_env_path() == home / ".config" / "syncode" / ".env"

    def test_loads_user_env(self, home: Path, monkeypatch) -> None:
        env_file = get_user_env_path()
        env_file.parent.mkdir(parents=True)
        env_file.write_text("SYNCODE_GIT_TIMEOUT=15\n")
        # Record the variable so monkeypatch removes it afterwards
        monkeypatch.setenv("SYNCODE_GIT_TIMEOUT", "")
        monkeypatch.delenv("SYNCODE_GIT_TIMEOUT")

        load_layered_env()

        assert os.environ["SYNCODE_GIT_TIMEOUT"] == "15"

    def test_does_not_override_process_env(self, tmp_path: Path, monkeypatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SYNCODE_CONFIG=/from/dotenv.json\n")
        monkeypatch.setenv("SYNCODE_CONFIG", "/from/shell.json")

        load_layered_env(user_env_paths=[env_file])

        assert os.environ["SYNCODE_CONFIG"] == "/from/shell.json"

    def test_missing_file_is_ignored(self, tmp_path: Path) -> None:
        load_layered_env(user_env_paths=[tmp_path / "missing.env"])


class TestGitTimeout:
    def test_default(self) -> None:
        assert get_git_timeout() == DEFAULT_GIT_TIMEOUT == 60

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SYNCODE_GIT_TIMEOUT", "5")
        assert get_git_timeout() == 5

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_values_fall_back(self, value: str, monkeypatch, caplog) -> None:
        monkeypatch.setenv("SYNCODE_GIT_TIMEOUT", value)

        with caplog.at_level(logging.WARNING):
            assert get_git_timeout() == DEFAULT_GIT_TIMEOUT

        assert "SYNCODE_GIT_TIMEOUT" in caplog.text
