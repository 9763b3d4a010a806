"""Redaction profile loading."""

from fixture_redact.config.loader import RedactionProfile, load_profile


__all__ = ["RedactionProfile", "load_profile"]
