"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import structlog

from fixture_redact.settings import RedactionSettings, get_settings


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for fixture redaction.

    Sets up structlog with JSON output format and standard processors
    for timestamps, log levels, and context binding.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: True).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=output,
        level=level,
    )


def configure_logging_from_settings(
    settings: RedactionSettings | None = None,
    output: TextIO = sys.stderr,
) -> RedactionSettings:
    """Configure logging from ``FIXTURE_REDACT_`` environment settings.

    Args:
        settings: Settings to apply (default: read from the environment).
        output: Output stream (default: stderr).

    Returns:
        The settings that were applied.
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level_value,
        output=output,
        json_format=settings.json_logs,
    )
    return settings


def bind_redaction_context(fixture: str) -> None:
    """Bind the fixture being processed to all subsequent log messages.

    Args:
        fixture: Fixture name or path.
    """
    structlog.contextvars.bind_contextvars(fixture=fixture)


def clear_redaction_context() -> None:
    """Clear fixture context from log messages."""
    structlog.contextvars.unbind_contextvars("fixture")
