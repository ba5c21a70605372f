"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from za_identity.core.config import AppSettings, LoggingConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.logging.level == "WARNING"


def test_logging_config_defaults():
    config = LoggingConfig()
    assert config.level == "WARNING"
    assert "%(levelname)s" in config.format


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ZA_ID_ENVIRONMENT", "prod")
    monkeypatch.setenv("ZA_ID_LOG_LEVEL", "DEBUG")
    assert AppSettings().environment == "prod"
    assert LoggingConfig().level == "DEBUG"
