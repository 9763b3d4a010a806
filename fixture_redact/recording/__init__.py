"""Recorded HTTP interaction shapes and input selection."""

from fixture_redact.recording.inputs import InputVariables, Primitive, search_values
from fixture_redact.recording.models import (
    JsonValue,
    RecordingDefinition,
    RecordingDefinitions,
)


__all__ = [
    "InputVariables",
    "JsonValue",
    "Primitive",
    "RecordingDefinition",
    "RecordingDefinitions",
    "search_values",
]
