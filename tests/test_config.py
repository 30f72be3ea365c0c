"""
Tests for configuration loading.
"""

import json

import pytest

from src.registry_directory.core import Config, constants


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def minimal_config():
    return {
        "registry": {"base_url": "https://registry.example"},
        "cache": {"url": "redis://localhost:6379/0"},
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CONFIG_FILE", "REGISTRY_BASE_URL", "REDIS_URL", "CACHE_KEY", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Test cases for Config."""

    def test_defaults_for_optional_keys(self, write_config, minimal_config):
        config = Config(write_config(minimal_config))

        assert config.registry_base_url == "https://registry.example"
        assert config.registry_objects_endpoint == constants.DEFAULT_OBJECTS_ENDPOINT
        assert config.registry_timeout == constants.DEFAULT_API_TIMEOUT
        assert config.registry_verify_ssl is True
        assert config.cache_key == constants.DEFAULT_CACHE_KEY
        assert config.page_size == constants.PAGE_SIZE
        assert config.log_level == "INFO"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"))

    def test_missing_section_raises(self, write_config):
        with pytest.raises(ValueError, match="cache"):
            Config(write_config({"registry": {"base_url": "https://registry.example"}}))

    def test_missing_key_raises(self, write_config):
        with pytest.raises(ValueError, match="cache.url"):
            Config(write_config({
                "registry": {"base_url": "https://registry.example"},
                "cache": {"key": "orgs"},
            }))

    def test_invalid_page_size_raises(self, write_config, minimal_config):
        minimal_config["pagination"] = {"page_size": 0}

        with pytest.raises(ValueError, match="page_size"):
            Config(write_config(minimal_config))

    def test_env_overrides_file(self, write_config, minimal_config, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://cache:6380/2")
        monkeypatch.setenv("CACHE_KEY", "orgs-v2")
        monkeypatch.setenv("REGISTRY_BASE_URL", "https://mirror.example")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = Config(write_config(minimal_config))

        assert config.cache_url == "redis://cache:6380/2"
        assert config.cache_key == "orgs-v2"
        assert config.registry_base_url == "https://mirror.example"
        assert config.log_level == "DEBUG"

    def test_env_can_supply_required_keys(self, write_config, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://cache:6379/0")

        config = Config(write_config({"registry": {"base_url": "https://registry.example"}}))

        assert config.cache_url == "redis://cache:6379/0"

    def test_config_file_from_env(self, write_config, minimal_config, monkeypatch):
        monkeypatch.setenv("CONFIG_FILE", write_config(minimal_config))

        assert Config().registry_base_url == "https://registry.example"

    def test_dot_notation_get(self, write_config, minimal_config):
        config = Config(write_config(minimal_config))

        assert config.get("registry.base_url") == "https://registry.example"
        assert config.get("registry.missing", "fallback") == "fallback"
        assert config.get("registry.base_url.deeper") is None
