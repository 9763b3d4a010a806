"""Security configuration models.

Describes how a credential travels over the wire: an API key placed in a
header, body, path or query, or one of the HTTP authentication schemes
(basic, bearer, digest).
"""

from fixture_redact.security.models import (
    DEFAULT_AUTHORIZATION_HEADER,
    DEFAULT_CHALLENGE_HEADER,
    ApiKeyPlacement,
    ApiKeySecurity,
    BasicSecurity,
    BearerSecurity,
    DigestSecurity,
    HttpSecurity,
    SecurityConfiguration,
    parse_security,
)


__all__ = [
    "DEFAULT_AUTHORIZATION_HEADER",
    "DEFAULT_CHALLENGE_HEADER",
    "ApiKeyPlacement",
    "ApiKeySecurity",
    "BasicSecurity",
    "BearerSecurity",
    "DigestSecurity",
    "HttpSecurity",
    "SecurityConfiguration",
    "parse_security",
]
