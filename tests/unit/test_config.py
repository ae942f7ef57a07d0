"""
Unit tests for settings loading.
"""

from validator_group.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.VALIDATION_DEBUG is False
    assert settings.DEBUG_VALUE_MAX_LENGTH == 0
    assert settings.PROMETHEUS_ENABLED is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("VALIDATION_DEBUG", "true")
    monkeypatch.setenv("log_level", "debug")

    settings = Settings(_env_file=None)

    assert settings.VALIDATION_DEBUG is True
    assert settings.LOG_LEVEL == "debug"


def test_explicit_values(test_settings):
    assert test_settings.PROMETHEUS_ENABLED is False
    assert test_settings.APP_NAME == "Validator Group (Test)"
