"""Observability module for structured logging."""

from fixture_redact.observability.logging import (
    bind_redaction_context,
    clear_redaction_context,
    configure_logging,
    configure_logging_from_settings,
)


__all__ = [
    "bind_redaction_context",
    "clear_redaction_context",
    "configure_logging",
    "configure_logging_from_settings",
]
