"""Tests for configuration loading."""

from unittest.mock import patch
import pytest
from arrconf.config import get_parallelism, load_config, load_server_settings
from arrconf.utils.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("LIDARR_URL", raising=False)
    monkeypatch.delenv("LIDARR_API_KEY", raising=False)


FILE_CONFIG = {"server": {"url": "http://file:8686", "api_key": "file-key", "timeout": 5}}


class TestServerSettings:
    """Precedence: CLI, then environment, then files."""

    def test_from_config(self):
        settings = load_server_settings(config=FILE_CONFIG)

        assert settings.url == "http://file:8686"
        assert settings.api_key == "file-key"
        assert settings.timeout == 5

    def test_environment_overrides_files(self, monkeypatch):
        monkeypatch.setenv("LIDARR_URL", "http://env:8686/")
        settings = load_server_settings(config=FILE_CONFIG)

        assert settings.url == "http://env:8686"
        assert settings.api_key == "file-key"

    def test_cli_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("LIDARR_API_KEY", "env-key")
        settings = load_server_settings(url="http://cli", api_key="cli-key", timeout=2.5, config=FILE_CONFIG)

        assert settings.url == "http://cli"
        assert settings.api_key == "cli-key"
        assert settings.timeout == 2.5

    def test_default_timeout(self):
        settings = load_server_settings(url="http://cli", api_key="k", config={})
        assert settings.timeout == 30.0

    def test_empty_url(self):
        with pytest.raises(ConfigError, match="URL cannot be an empty string"):
            load_server_settings(url="", api_key="k", config={})

    def test_empty_api_key(self, monkeypatch):
        monkeypatch.setenv("LIDARR_API_KEY", " ")
        with pytest.raises(ConfigError, match="API key cannot be an empty string"):
            load_server_settings(url="http://cli", config={})

    def test_missing_url(self):
        with pytest.raises(ConfigError, match="Missing server URL"):
            load_server_settings(api_key="k", config={})

    def test_missing_api_key(self):
        with pytest.raises(ConfigError, match="Missing API key"):
            load_server_settings(url="http://cli", config={})


class TestConfigFiles:
    """Two-tier YAML loading."""

    def test_project_overrides_user(self, tmp_path):
        user = tmp_path / "user.yaml"
        project = tmp_path / "project.yaml"
        user.write_text("server:\n  url: http://user\n  api_key: user-key\napply:\n  parallelism: 2\n", encoding="utf-8")
        project.write_text("server:\n  url: http://project\n", encoding="utf-8")

        with patch('arrconf.config.manager.get_user_config_path', return_value=user), \
                patch('arrconf.config.manager.get_project_config_path', return_value=project):
            config = load_config()

        assert config["server"] == {"url": "http://project", "api_key": "user-key"}
        assert get_parallelism(config) == 2

    def test_no_files(self, tmp_path):
        with patch('arrconf.config.manager.get_user_config_path', return_value=tmp_path / "missing.yaml"), \
                patch('arrconf.config.manager.get_project_config_path', return_value=None):
            assert load_config() == {}

    def test_invalid_yaml(self, tmp_path):
        user = tmp_path / "user.yaml"
        user.write_text("server: [oops", encoding="utf-8")
        with patch('arrconf.config.manager.get_user_config_path', return_value=user), \
                patch('arrconf.config.manager.get_project_config_path', return_value=None):
            with pytest.raises(ConfigError, match="Invalid YAML"):
                load_config()

    def test_default_parallelism(self):
        assert get_parallelism({}) == 4

    def test_invalid_parallelism(self):
        with pytest.raises(ConfigError, match="parallelism"):
            get_parallelism({"apply": {"parallelism": 0}})
