"""Credential redaction for recorded HTTP interaction fixtures."""

from fixture_redact.observability import configure_logging_from_settings
from fixture_redact.replace import (
    check_sensitive_information,
    process_recordings,
    replace_credential_in_definition,
    replace_credentials,
    replace_input_in_definition,
    replace_parameter_in_definition,
)


__all__ = [
    "check_sensitive_information",
    "configure_logging_from_settings",
    "process_recordings",
    "replace_credential_in_definition",
    "replace_credentials",
    "replace_input_in_definition",
    "replace_parameter_in_definition",
]
