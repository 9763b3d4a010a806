"""Selection of input values that must be hidden in recordings."""

from collections.abc import Mapping
from typing import Any

from fixture_redact.errors import InputValueError


Primitive = str | int | float | bool
InputVariables = dict[str, Primitive]


def _is_primitive(value: Any) -> bool:
    return isinstance(value, str | int | float | bool)


def _get_value(data: Mapping[str, Any], keys: list[str]) -> Any:
    current: Any = data
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


def search_values(
    input_data: Mapping[str, Any],
    accessors: list[str] | None,
) -> InputVariables | None:
    """Collect primitive input values addressed by accessors.

    Nested values are addressed with dotted accessors (``"obj.val"``); the
    accessor itself is used as the key of the result.

    Args:
        input_data: Use case input.
        accessors: Properties to collect, or None.

    Returns:
        Mapping of accessor to value, or None when accessors is None.

    Raises:
        InputValueError: If a property is missing or not a primitive value.
    """
    if accessors is None:
        return None

    result: InputVariables = {}
    for accessor in accessors:
        value = _get_value(input_data, accessor.split("."))

        if value is None:
            msg = f"Input property: {accessor} is not defined"
            raise InputValueError(msg, accessor)

        if not _is_primitive(value):
            msg = f"Input property: {accessor} is not primitive value"
            raise InputValueError(msg, accessor)

        result[accessor] = value

    return result
