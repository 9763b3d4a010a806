"""Verbatim and percent-encoded substring replacement.

A secret shows up plain in JSON bodies and headers but percent-encoded in
URLs. Both forms are searched in a single left-to-right pass; an encoded
occurrence is replaced by the encoded replacement so that the surrounding
URL stays valid.
"""

import re
from urllib.parse import quote


# Characters left unescaped by JavaScript's encodeURIComponent, besides
# ASCII letters, digits and "-_.~" which quote() always keeps.
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a string as a URI component.

    Args:
        value: Plain text.

    Returns:
        UTF-8 percent-encoded text.
    """
    return quote(value, safe=_URI_COMPONENT_SAFE)


def includes(haystack: str, value: str) -> bool:
    """Check whether a value occurs verbatim or percent-encoded.

    Args:
        haystack: Text to search.
        value: Value to look for.

    Returns:
        True if either form occurs. Always False for an empty value.
    """
    if not value:
        return False
    return value in haystack or encode_uri_component(value) in haystack


def scan(haystack: str, value: str, replacement: str) -> str:
    """Replace every occurrence of a value, keeping its encoding form.

    Args:
        haystack: Text to rewrite.
        value: Value to search for. An empty value matches nothing.
        replacement: Text to put in place of each occurrence.

    Returns:
        Rewritten text.
    """
    if not value:
        return haystack

    encoded = encode_uri_component(value)
    # An ASCII-safe value has one form: restoring a placeholder inserts the
    # replacement verbatim, even where the secret was recorded encoded.
    if encoded == value:
        return haystack.replace(value, replacement)

    encoded_replacement = encode_uri_component(replacement)
    # Encoded form first: a value containing "%" can be a prefix of its own
    # encoded form.
    pattern = re.compile(f"{re.escape(encoded)}|{re.escape(value)}")

    def _substitute(match: re.Match[str]) -> str:
        if match.group() == encoded:
            return encoded_replacement
        return replacement

    return pattern.sub(_substitute, haystack)
