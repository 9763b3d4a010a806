"""Redaction settings loading."""

from .app import RedactionSettings, get_settings


__all__ = ["RedactionSettings", "get_settings"]
