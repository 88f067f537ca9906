import pytest

import config


def test_get_config_uses_env(monkeypatch):
    monkeypatch.setenv("WASABI_USAGE_LOG_LEVEL", "DEBUG")
    assert config.get_config("WASABI_USAGE_LOG_LEVEL", "WARNING") == "DEBUG"


def test_get_config_default(monkeypatch):
    monkeypatch.delenv("WASABI_USAGE_LOG_LEVEL", raising=False)
    assert config.get_config("WASABI_USAGE_LOG_LEVEL", "WARNING") == "WARNING"


def test_get_config_missing_raises(monkeypatch):
    monkeypatch.delenv("WASABI_UNSET_KEY", raising=False)
    with pytest.raises(RuntimeError, match="WASABI_UNSET_KEY"):
        config.get_config("WASABI_UNSET_KEY")


def test_get_config_warns_for_placeholder(monkeypatch):
    monkeypatch.delenv("PLACEHOLDER_KEY", raising=False)
    with pytest.warns(RuntimeWarning):
        value = config.get_config("PLACEHOLDER_KEY", "xxxxxxxxxx")
    assert value == "xxxxxxxxxx"


def test_get_config_warns_for_env_placeholder(monkeypatch):
    monkeypatch.setenv("PLACEHOLDER_KEY", "changeme")
    with pytest.warns(RuntimeWarning):
        value = config.get_config("PLACEHOLDER_KEY")
    assert value == "changeme"


def test_get_log_level_override_wins(monkeypatch):
    monkeypatch.setenv("WASABI_USAGE_LOG_LEVEL", "ERROR")
    assert config.get_log_level("debug") == "DEBUG"


def test_get_log_level_from_env(monkeypatch):
    monkeypatch.setenv("WASABI_USAGE_LOG_LEVEL", "info")
    assert config.get_log_level() == "INFO"


def test_get_log_level_unknown_falls_back(monkeypatch):
    monkeypatch.delenv("WASABI_USAGE_LOG_LEVEL", raising=False)
    with pytest.warns(RuntimeWarning, match="Unknown log level"):
        assert config.get_log_level("loud") == "WARNING"
