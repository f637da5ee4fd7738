"""Unit tests for environment overrides in config."""

import pytest
import importlib
import logging

import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reloads config after the test sets its environment, and restores it afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch):
    for name in ("ADVENTURE_LOG_LEVEL", "ADVENTURE_PORT", "ADVENTURE_SAVE_FILE"):
        monkeypatch.delenv(name, raising=False)
    reload_config()
    assert config.LOG_LEVEL == "WARNING"
    assert config.SERVER_PORT == 8080
    assert config.SAVE_FILE == "save_game.json"


def test_valid_log_level_override(reload_config, monkeypatch):
    monkeypatch.setenv("ADVENTURE_LOG_LEVEL", "debug")
    reload_config()
    assert config.LOG_LEVEL == "DEBUG"


def test_invalid_log_level_falls_back(reload_config, monkeypatch, capsys):
    monkeypatch.setenv("ADVENTURE_LOG_LEVEL", "verbose")
    reload_config()
    assert config.LOG_LEVEL == "WARNING"
    assert "ADVENTURE_LOG_LEVEL" in capsys.readouterr().out
    # The fallback is always accepted by logging
    logging.getLogger("config_test").setLevel(config.LOG_LEVEL)


def test_invalid_port_falls_back(reload_config, monkeypatch, capsys):
    monkeypatch.setenv("ADVENTURE_PORT", "eighty")
    reload_config()
    assert config.SERVER_PORT == 8080
    assert "ADVENTURE_PORT" in capsys.readouterr().out
