"""Tests for environment-driven configuration."""

import importlib

import pytest

from stackdriver import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module after patching the environment, restoring it afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:
    """Tests for config defaults and overrides."""

    def test_defaults(self, monkeypatch, reload_config) -> None:
        """Without environment variables, defaults apply."""
        for name in ("STACKDRIVER_API_KEY", "STACKDRIVER_CUSTOMER_ID", "STACKDRIVER_REQUEST_TIMEOUT", "STACKDRIVER_MAX_ATTEMPTS"):
            monkeypatch.delenv(name, raising=False)
        reload_config()
        assert config.API_KEY == ""
        assert config.CUSTOMER_ID is None
        assert config.REQUEST_TIMEOUT == 30
        assert config.MAX_ATTEMPTS == 1
        assert config.API_PROTOCOL_VERSION == 1

    def test_environment_overrides(self, monkeypatch, reload_config) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("STACKDRIVER_API_KEY", "env-key")
        monkeypatch.setenv("STACKDRIVER_CUSTOMER_ID", "c-env")
        monkeypatch.setenv("STACKDRIVER_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("STACKDRIVER_MAX_ATTEMPTS", "4")
        monkeypatch.setenv("STACKDRIVER_DEPLOY_EVENT_URL", "https://deploy.test")
        reload_config()
        assert config.API_KEY == "env-key"
        assert config.CUSTOMER_ID == "c-env"
        assert config.REQUEST_TIMEOUT == 2.5
        assert config.MAX_ATTEMPTS == 4
        assert config.DEPLOY_EVENT_URL == "https://deploy.test"
