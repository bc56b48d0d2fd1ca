"""Tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from tablekit.config import MEMORY_DATABASE, Environment, Settings, load_settings


def test_environment_values() -> None:
    """Test environment enum values."""
    assert Environment.DEVELOPMENT == "development"
    assert Environment.PRODUCTION == "production"
    assert Environment.TESTING == "testing"


def test_default_settings() -> None:
    """Test default settings values."""
    settings = Settings()

    assert settings.environment == Environment.DEVELOPMENT
    assert settings.log_level == "INFO"
    assert settings.dialect == "sqlite"
    assert settings.database_path == "tablekit.db"
    assert settings.sqlite_timeout == 60.0
    assert settings.is_development is True
    assert settings.database_location == "tablekit.db"


def test_dialect_is_lowercased() -> None:
    """Test dialect normalization."""
    assert Settings(dialect="MySQL").dialect == "mysql"


def test_testing_uses_memory_database() -> None:
    """Test the testing environment never touches a file."""
    settings = Settings(environment=Environment.TESTING, database_path="app.db")

    assert settings.is_testing is True
    assert settings.database_location == MEMORY_DATABASE


def test_load_settings_from_environment() -> None:
    """Test reading TABLEKIT_* variables."""
    env = {
        "TABLEKIT_ENV": "production",
        "TABLEKIT_LOG_LEVEL": "debug",
        "TABLEKIT_DIALECT": "mysql",
        "TABLEKIT_DATABASE_PATH": "/var/lib/app.db",
        "TABLEKIT_SQLITE_TIMEOUT": "5",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = load_settings()

    assert settings.is_production is True
    assert settings.log_level == "DEBUG"
    assert settings.dialect == "mysql"
    assert settings.database_location == "/var/lib/app.db"
    assert settings.sqlite_timeout == 5.0


def test_load_settings_invalid_environment() -> None:
    """Test unknown environment names."""
    with patch.dict(os.environ, {"TABLEKIT_ENV": "staging"}, clear=True):
        with pytest.raises(ValueError):
            load_settings()
