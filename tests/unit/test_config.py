"""Unit tests for configuration."""

import importlib
import sys

import pytest
from pydantic import ValidationError

from nullsafe.config.settings import LoggingSettings, Settings


def test_default_settings():
    """Test default settings values."""
    settings = Settings()

    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"


def test_logging_settings():
    """Test logging settings."""
    logging_settings = LoggingSettings(level="DEBUG", format="json")

    assert logging_settings.level == "DEBUG"
    assert logging_settings.format == "json"


def test_invalid_format():
    """Test unknown log formats are rejected."""
    with pytest.raises(ValidationError):
        LoggingSettings(format="xml")


def test_settings_from_env(monkeypatch):
    """Test settings loaded from environment variables."""
    monkeypatch.setenv("NULLSAFE_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("NULLSAFE_LOGGING__FORMAT", "json")

    settings = Settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"


def test_unprefixed_env_ignored(monkeypatch):
    """Test bare LEVEL and FORMAT variables do not leak into settings."""
    monkeypatch.setenv("FORMAT", "yaml")
    monkeypatch.setenv("LEVEL", "DEBUG")

    settings = Settings()

    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"


def test_import_does_not_read_env(monkeypatch):
    """Test the package imports with an invalid logging format in the environment."""
    monkeypatch.setenv("NULLSAFE_LOGGING__FORMAT", "yaml")
    monkeypatch.setenv("FORMAT", "yaml")
    for name in [m for m in sys.modules if m == "nullsafe" or m.startswith("nullsafe.")]:
        monkeypatch.delitem(sys.modules, name)

    module = importlib.import_module("nullsafe")

    assert module.fetch_chain({"a": 1}, lambda d: d["a"]) == 1


def test_dotenv_file_ignored(monkeypatch, tmp_path):
    """Test a .env file in the working directory is not read."""
    (tmp_path / ".env").write_text("NULLSAFE_LOGGING__LEVEL=DEBUG\n")
    monkeypatch.chdir(tmp_path)

    assert Settings().logging.level == "WARNING"
