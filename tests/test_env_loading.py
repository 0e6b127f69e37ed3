"""Test environment variable loading from .env files."""

import importlib
from pathlib import Path

from dotenv import load_dotenv

import caltrain.constants as constants


def test_env_loading_from_dotenv(tmp_path, monkeypatch):
    """Test that settings are picked up from a .env file."""
    env_file = tmp_path / ".env"
    config_file = tmp_path / "watch.json"
    env_file.write_text(f"DEBUG_MODE=true\nCALTRAIN_CONFIG_FILE={config_file}\n")

    # Record the current values so load_dotenv's writes are undone afterwards
    for name in ("DEBUG_MODE", "CALTRAIN_CONFIG_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    try:
        load_dotenv(env_file)
        importlib.reload(constants)

        assert constants.DEBUG_MODE is True
        assert constants.CONFIG_FILE == config_file
    finally:
        monkeypatch.undo()
        importlib.reload(constants)


def test_env_loading_without_dotenv(monkeypatch):
    """Test that plain environment variables work and defaults apply."""
    monkeypatch.setenv("DEBUG_MODE", "false")
    monkeypatch.delenv("CALTRAIN_CONFIG_FILE", raising=False)

    try:
        importlib.reload(constants)

        assert constants.DEBUG_MODE is False
        assert constants.CONFIG_FILE.name == "config.json"
        assert constants.CONFIG_FILE.parent.name == "config"
        assert isinstance(constants.CONFIG_FILE, Path)
    finally:
        monkeypatch.undo()
        importlib.reload(constants)
