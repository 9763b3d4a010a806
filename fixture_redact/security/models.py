"""Data models for security configurations.

Security configurations form a discriminated union: first on ``type``
(``apiKey`` or ``http``) and, for HTTP schemes, on ``scheme``. The value
fields (``apikey``, ``username``, ``password``, ``token``) are optional and
only consulted when resolving the credential, which fails when they are
absent; a value starting with ``$`` names an environment variable.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


DEFAULT_AUTHORIZATION_HEADER = "Authorization"
DEFAULT_CHALLENGE_HEADER = "WWW-Authenticate"


class ApiKeyPlacement(str, Enum):
    """Where an API key is placed in the request.

    - HEADER: Named request header
    - BODY: Request body
    - PATH: Path segment
    - QUERY: Query string parameter
    """

    HEADER = "header"
    BODY = "body"
    PATH = "path"
    QUERY = "query"


class _SecurityBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    id: Annotated[str, Field(min_length=1, description="Security scheme id")]


class ApiKeySecurity(_SecurityBase):
    """API key transmitted in a header, body, path or query."""

    type: Literal["apiKey"] = "apiKey"
    placement: ApiKeyPlacement = Field(alias="in")
    name: str | None = Field(default=None, description="Header or query name")
    apikey: str | None = None


class BasicSecurity(_SecurityBase):
    """HTTP basic authentication."""

    type: Literal["http"] = "http"
    scheme: Literal["basic"] = "basic"
    username: str | None = None
    password: str | None = None


class BearerSecurity(_SecurityBase):
    """HTTP bearer token authentication."""

    type: Literal["http"] = "http"
    scheme: Literal["bearer"] = "bearer"
    token: str | None = None


class DigestSecurity(_SecurityBase):
    """HTTP digest authentication with optional custom header names."""

    type: Literal["http"] = "http"
    scheme: Literal["digest"] = "digest"
    username: str | None = None
    password: str | None = None
    challenge_header: str | None = Field(default=None, alias="challengeHeader")
    authorization_header: str | None = Field(
        default=None, alias="authorizationHeader"
    )

    @property
    def effective_challenge_header(self) -> str:
        """Header carrying the server challenge."""
        return self.challenge_header or DEFAULT_CHALLENGE_HEADER

    @property
    def effective_authorization_header(self) -> str:
        """Header carrying the client authorization."""
        return self.authorization_header or DEFAULT_AUTHORIZATION_HEADER


HttpSecurity = Annotated[
    BasicSecurity | BearerSecurity | DigestSecurity,
    Field(discriminator="scheme"),
]

SecurityConfiguration = Annotated[
    ApiKeySecurity | HttpSecurity,
    Field(discriminator="type"),
]

_SECURITY_ADAPTER: TypeAdapter[SecurityConfiguration] = TypeAdapter(
    SecurityConfiguration
)


def parse_security(data: dict[str, Any]) -> SecurityConfiguration:
    """Validate a raw mapping into a security configuration.

    Args:
        data: Mapping such as ``{"id": "key", "type": "apiKey", "in": "query"}``.

    Returns:
        The matching security configuration variant.

    Raises:
        pydantic.ValidationError: If the mapping matches no variant.
    """
    return _SECURITY_ADAPTER.validate_python(data)
