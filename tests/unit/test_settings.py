"""Unit tests for environment settings."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from fixture_redact.settings import RedactionSettings, get_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run without a .env file or inherited FIXTURE_REDACT_ variables."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "FIXTURE_REDACT_LOG_LEVEL",
        "FIXTURE_REDACT_JSON_LOGS",
        "FIXTURE_REDACT_LOG_SENSITIVE_VALUES",
        "FIXTURE_REDACT_CREDENTIALS_PLACEHOLDER_PREFIX",
        "FIXTURE_REDACT_PARAMETERS_PLACEHOLDER_PREFIX",
        "FIXTURE_REDACT_INPUT_PLACEHOLDER_PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)


class TestRedactionSettings:
    """Tests for RedactionSettings."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Defaults match the standard placeholder prefixes."""
        settings = get_settings()

        assert settings.log_level == "INFO"
        assert settings.log_level_value == logging.INFO
        assert settings.json_logs is True
        assert settings.log_sensitive_values is False
        assert settings.credentials_placeholder_prefix == "SECURITY_"
        assert settings.parameters_placeholder_prefix == "PARAMS_"
        assert settings.input_placeholder_prefix == "INPUT_"

    @pytest.mark.unit
    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values are read from FIXTURE_REDACT_ variables."""
        monkeypatch.setenv("FIXTURE_REDACT_LOG_LEVEL", "debug")
        monkeypatch.setenv("FIXTURE_REDACT_JSON_LOGS", "false")
        monkeypatch.setenv("FIXTURE_REDACT_INPUT_PLACEHOLDER_PREFIX", "HIDDEN_")

        settings = RedactionSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG
        assert settings.json_logs is False
        assert settings.input_placeholder_prefix == "HIDDEN_"

    @pytest.mark.unit
    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown log levels are rejected."""
        monkeypatch.setenv("FIXTURE_REDACT_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError, match="Unknown log level"):
            RedactionSettings()

    @pytest.mark.unit
    def test_empty_prefix_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Placeholder prefixes cannot be empty."""
        monkeypatch.setenv("FIXTURE_REDACT_CREDENTIALS_PLACEHOLDER_PREFIX", "")

        with pytest.raises(ValidationError):
            RedactionSettings()
