import logging
import os

import pytest

from todo_app.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    Settings,
    configure_logging,
)


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.host == DEFAULT_HOST
        assert settings.port == DEFAULT_PORT == 8086
        assert settings.log_level == "DEBUG"
        assert settings.assets_dir == os.path.join(os.getcwd(), "assets")

    def test_env_overrides(self):
        settings = Settings.from_env({
            "TODO_HOST": "127.0.0.1",
            "TODO_PORT": "9000",
            "TODO_LOG_LEVEL": "warning",
            "TODO_ASSETS_DIR": "/srv/assets",
        })
        assert settings.host == "127.0.0.1"
        assert settings.port == 9000
        assert settings.log_level == "WARNING"
        assert settings.assets_dir == "/srv/assets"

    def test_invalid_port(self):
        with pytest.raises(ValueError) as exc:
            Settings.from_env({"TODO_PORT": "eighty"})
        assert exc.value.__suppress_context__


class TestConfigureLogging:
    def test_sets_root_level(self):
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_replaces_handlers(self):
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(logging.getLogger().handlers) == 1


def test_settings_assets_dir_defaults_to_none():
    assert Settings().assets_dir is None


def test_relative_and_empty_assets_dir_resolve_against_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Settings.from_env({"TODO_ASSETS_DIR": "static"}).assets_dir == str(tmp_path / "static")
    assert Settings.from_env({"TODO_ASSETS_DIR": ""}).assets_dir == str(tmp_path / "assets")
