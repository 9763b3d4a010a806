"""Structural traversal of recording definitions.

The walker knows where strings live inside a recording (scope, path,
request headers, raw headers and the JSON trees of body and responses) and
applies a string transform at every leaf it visits. It is independent of
any security scheme.
"""

from collections.abc import Callable, Collection
from enum import Enum
from functools import partial
from typing import Any, cast
from urllib.parse import urlsplit

from fixture_redact.recording.models import JsonValue, RecordingDefinition
from fixture_redact.replace.matcher import scan


Transform = Callable[[str], str]


class Location(str, Enum):
    """Structurally distinct parts of a recording definition."""

    SCOPE = "scope"
    PATH = "path"
    REQHEADERS = "reqheaders"
    RAW_HEADERS = "rawHeaders"
    BODY = "body"
    RESPONSE = "response"
    DECODED_RESPONSE = "decodedResponse"


ALL_LOCATIONS: frozenset[Location] = frozenset(Location)
HEADER_LOCATIONS: frozenset[Location] = frozenset(
    {Location.REQHEADERS, Location.RAW_HEADERS}
)
RESPONSE_LOCATIONS: frozenset[Location] = frozenset(
    {Location.RESPONSE, Location.DECODED_RESPONSE}
)
_JSON_LOCATIONS = (Location.BODY, Location.RESPONSE, Location.DECODED_RESPONSE)


class _LeafVisitor:
    """Applies a transform to string leaves, mutating containers in place."""

    def __init__(self, transform: Transform) -> None:
        self._transform = transform
        self.changed = 0

    def visit_string(self, value: str) -> str:
        result = self._transform(value)
        if result != value:
            self.changed += 1
        return result

    def visit(self, value: JsonValue) -> JsonValue:
        if isinstance(value, str):
            return self.visit_string(value)
        if isinstance(value, dict):
            # Keys are kept as recorded
            for key in value:
                value[key] = self.visit(value[key])
        elif isinstance(value, list):
            for index, item in enumerate(value):
                value[index] = self.visit(item)
        return value


def split_base_prefix(path: str, base_url: str | None) -> tuple[str, str]:
    """Split the part of a recorded path that belongs to the base URL.

    Proxy-style recordings echo the whole base URL at the start of the path;
    base URLs with a path (``https://host/api``) make every recorded path
    start with that prefix. Neither prefix is part of the request proper.

    Args:
        path: Recorded path with query string.
        base_url: Base URL of the service, if known.

    Returns:
        Tuple of (prefix to keep untouched, remainder to scan).
    """
    if not base_url:
        return "", path

    base = base_url.rstrip("/")
    if path.startswith(base):
        return base, path[len(base) :]

    base_path = urlsplit(base).path
    if base_path and (
        path == base_path
        or path.startswith(base_path + "/")
        or path.startswith(base_path + "?")
    ):
        return base_path, path[len(base_path) :]

    return "", path


def _is_selected(header_name: object, header_names: set[str] | None) -> bool:
    if header_names is None:
        return True
    return isinstance(header_name, str) and header_name.lower() in header_names


def walk(
    definition: RecordingDefinition,
    transform: Transform,
    *,
    locations: Collection[Location] = ALL_LOCATIONS,
    header_names: Collection[str] | None = None,
    base_url: str | None = None,
) -> int:
    """Apply a string transform across a recording definition in place.

    Args:
        definition: Recording to mutate.
        transform: Function applied to every visited string.
        locations: Parts of the recording to visit.
        header_names: Restrict header locations to these names
            (case-insensitive). None visits every header.
        base_url: Base URL whose prefix in ``path`` is left untouched.

    Returns:
        Number of string leaves whose value changed.
    """
    record = cast(dict[str, Any], definition)
    visitor = _LeafVisitor(transform)
    names = None if header_names is None else {n.lower() for n in header_names}

    scope = record.get("scope")
    if Location.SCOPE in locations and isinstance(scope, str):
        record["scope"] = visitor.visit_string(scope)

    path = record.get("path")
    if Location.PATH in locations and isinstance(path, str):
        prefix, rest = split_base_prefix(path, base_url)
        record["path"] = prefix + visitor.visit_string(rest)

    reqheaders = record.get("reqheaders")
    if Location.REQHEADERS in locations and isinstance(reqheaders, dict):
        for name in reqheaders:
            if _is_selected(name, names):
                reqheaders[name] = visitor.visit(reqheaders[name])

    raw_headers = record.get("rawHeaders")
    if Location.RAW_HEADERS in locations and isinstance(raw_headers, list):
        # Even indexes hold names, odd indexes hold values
        for index in range(1, len(raw_headers), 2):
            if _is_selected(raw_headers[index - 1], names):
                raw_headers[index] = visitor.visit(raw_headers[index])

    for location in _JSON_LOCATIONS:
        if location in locations and location.value in record:
            record[location.value] = visitor.visit(record[location.value])

    return visitor.changed


def apply(
    definition: RecordingDefinition,
    search_value: str,
    replacement: str,
    *,
    locations: Collection[Location] = ALL_LOCATIONS,
    header_names: Collection[str] | None = None,
    base_url: str | None = None,
) -> int:
    """Replace a value everywhere in a recording definition.

    Args:
        definition: Recording to mutate.
        search_value: Value to search for; empty means no-op.
        replacement: Replacement text.
        locations: Parts of the recording to visit.
        header_names: Restrict header locations to these names.
        base_url: Base URL whose prefix in ``path`` is left untouched.

    Returns:
        Number of string leaves whose value changed.
    """
    if not search_value:
        return 0

    return walk(
        definition,
        partial(scan, value=search_value, replacement=replacement),
        locations=locations,
        header_names=header_names,
        base_url=base_url,
    )
