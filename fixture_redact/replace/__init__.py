"""Replacement of secrets inside recording definitions.

Key components:
- matcher: verbatim and percent-encoded substring replacement
- walker: traversal of every string location of a recording
- locator: scheme-aware substitution passes for security configurations
- replace: credential, parameter and input entry points
- utils: resolution of values and placeholders over whole recordings
- metrics: counters for replacement passes
"""

from fixture_redact.replace.locator import SubstitutionPass, locate
from fixture_redact.replace.matcher import encode_uri_component, includes, scan
from fixture_redact.replace.metrics import RedactionMetrics
from fixture_redact.replace.replace import (
    replace_credential_in_definition,
    replace_input_in_definition,
    replace_parameter_in_definition,
)
from fixture_redact.replace.utils import (
    HIDDEN_CREDENTIALS_PLACEHOLDER,
    HIDDEN_INPUT_PLACEHOLDER,
    HIDDEN_PARAMETERS_PLACEHOLDER,
    PlaceholderKind,
    ResolvedPlaceholder,
    check_sensitive_information,
    process_recordings,
    replace_credentials,
    resolve_credential,
    resolve_placeholder,
)
from fixture_redact.replace.walker import ALL_LOCATIONS, Location, apply, walk


__all__ = [
    "ALL_LOCATIONS",
    "HIDDEN_CREDENTIALS_PLACEHOLDER",
    "HIDDEN_INPUT_PLACEHOLDER",
    "HIDDEN_PARAMETERS_PLACEHOLDER",
    "Location",
    "PlaceholderKind",
    "RedactionMetrics",
    "ResolvedPlaceholder",
    "SubstitutionPass",
    "apply",
    "check_sensitive_information",
    "encode_uri_component",
    "includes",
    "locate",
    "process_recordings",
    "replace_credential_in_definition",
    "replace_credentials",
    "replace_input_in_definition",
    "replace_parameter_in_definition",
    "resolve_credential",
    "resolve_placeholder",
    "scan",
    "walk",
]
