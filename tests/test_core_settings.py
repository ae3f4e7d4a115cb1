"""
Tests de rdlauncher.core.settings — carga de .rdlauncher.yaml.
"""

import pytest
import yaml

from rdlauncher.core.errors import ConfigError
from rdlauncher.core.settings import (
    LAUNCH_COMMAND_ENV,
    LauncherSettings,
    load_settings,
    settings_path,
)


@pytest.fixture(autouse=True)
def no_env_override(monkeypatch):
    monkeypatch.delenv(LAUNCH_COMMAND_ENV, raising=False)


def _write(tmp_path, data):
    path = settings_path(tmp_path)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestLauncherSettings:
    def test_defaults(self):
        settings = LauncherSettings()
        assert settings.launch_command == []
        assert settings.launch_timeout == 30

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            LauncherSettings(launch_timeout=0)


class TestLoadSettings:
    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_settings(tmp_path) == LauncherSettings()

    def test_empty_file_returns_defaults(self, tmp_path):
        settings_path(tmp_path).write_text("", encoding="utf-8")
        assert load_settings(tmp_path) == LauncherSettings()

    def test_loads_values(self, tmp_path):
        _write(tmp_path, {"launch_command": ["code", "--debug"], "launch_timeout": 5})
        settings = load_settings(tmp_path)
        assert settings.launch_command == ["code", "--debug"]
        assert settings.launch_timeout == 5

    def test_env_overrides_command(self, tmp_path, monkeypatch):
        _write(tmp_path, {"launch_command": ["code"], "launch_timeout": 5})
        monkeypatch.setenv(LAUNCH_COMMAND_ENV, "vsdbg --launch 'my file'")
        settings = load_settings(tmp_path)
        assert settings.launch_command == ["vsdbg", "--launch", "my file"]
        assert settings.launch_timeout == 5

    def test_invalid_yaml(self, tmp_path):
        settings_path(tmp_path).write_text("launch_command: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)

    def test_not_a_mapping(self, tmp_path):
        settings_path(tmp_path).write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)

    def test_invalid_schema(self, tmp_path):
        _write(tmp_path, {"launch_timeout": "never"})
        with pytest.raises(ConfigError):
            load_settings(tmp_path)
