"""Shape of a recorded HTTP interaction.

Recordings are loaded from JSON fixtures and handled as plain dictionaries,
so the shape is described with a ``TypedDict`` rather than a model class.
Every key is optional.
"""

from typing import Any, TypedDict


JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class RecordingDefinition(TypedDict, total=False):
    """A single recorded request/response pair.

    Attributes:
        scope: Origin of the request, e.g. ``https://api.example.com:443``.
        path: Request path including the query string.
        method: HTTP method.
        status: Response status code.
        reqheaders: Request headers by name.
        rawHeaders: Response headers as alternating name, value entries.
        body: Request body.
        response: Response body as recorded.
        decodedResponse: Response body after decompression.
    """

    scope: str
    path: str
    method: str
    status: int
    reqheaders: dict[str, str | list[str]]
    rawHeaders: list[str]
    body: JsonValue
    response: JsonValue
    decodedResponse: JsonValue


RecordingDefinitions = list[RecordingDefinition]
