"""Scheme-aware placement of credentials inside recordings.

Each security scheme puts its credential somewhere else: API keys in a
header, the body, the path or the query; HTTP schemes in an authorization
header framed as ``<Scheme> <credential>``. The locator turns a security
configuration into substitution passes that the walker runs in order.
"""

from collections.abc import Collection
from dataclasses import dataclass
from typing import assert_never

from fixture_redact.recording.models import RecordingDefinition
from fixture_redact.replace.matcher import scan
from fixture_redact.replace.walker import (
    HEADER_LOCATIONS,
    RESPONSE_LOCATIONS,
    Location,
    walk,
)
from fixture_redact.security.models import (
    DEFAULT_AUTHORIZATION_HEADER,
    DEFAULT_CHALLENGE_HEADER,
    ApiKeyPlacement,
    ApiKeySecurity,
    BasicSecurity,
    BearerSecurity,
    DigestSecurity,
    SecurityConfiguration,
)


BASIC_PREFIX = "Basic "
BEARER_PREFIX = "Bearer "
DIGEST_PREFIX = "Digest "


def replace_scheme_token(payload: str, prefix: str, replacement: str) -> str:
    """Replace the whole token following an authorization scheme prefix.

    Args:
        payload: Header value, e.g. ``Digest username="user", ...``.
        prefix: Scheme prefix including the trailing space.
        replacement: Full replacement value, starting with the prefix.

    Returns:
        Replacement with the original prefix casing, or payload unchanged
        when it does not carry the scheme.
    """
    head = payload[: len(prefix)]
    if len(payload) <= len(prefix) or head.lower() != prefix.lower():
        return payload
    return head + replacement[len(prefix) :]


@dataclass(frozen=True)
class SubstitutionPass:
    """One search/replace run over selected parts of a recording.

    Attributes:
        search_value: Text searched for.
        replacement: Text it becomes.
        locations: Parts of the recording in scope.
        header_names: Header names in scope, None for all headers.
        base_url: Base URL whose prefix in ``path`` is kept.
        token_prefix: When set, any value carrying this scheme prefix has
            its whole token replaced instead of a substring match.
    """

    search_value: str
    replacement: str
    locations: frozenset[Location]
    header_names: frozenset[str] | None = None
    base_url: str | None = None
    token_prefix: str | None = None

    def transform(self, payload: str) -> str:
        """Rewrite a single string leaf."""
        if self.token_prefix is not None:
            return replace_scheme_token(payload, self.token_prefix, self.replacement)
        return scan(payload, self.search_value, self.replacement)

    def run(self, definition: RecordingDefinition) -> int:
        """Apply the pass to a recording in place.

        Returns:
            Number of string leaves changed.
        """
        if not self.search_value:
            return 0
        return walk(
            definition,
            self.transform,
            locations=self.locations,
            header_names=self.header_names,
            base_url=self.base_url,
        )


def _api_key_pass(
    security: ApiKeySecurity,
    credential: str,
    placeholder: str,
    base_url: str | None,
) -> SubstitutionPass:
    placement = security.placement
    if placement is ApiKeyPlacement.HEADER:
        names = frozenset({security.name}) if security.name else None
        return SubstitutionPass(credential, placeholder, HEADER_LOCATIONS, names)
    if placement is ApiKeyPlacement.BODY:
        return SubstitutionPass(credential, placeholder, frozenset({Location.BODY}))
    if placement is ApiKeyPlacement.PATH or placement is ApiKeyPlacement.QUERY:
        return SubstitutionPass(
            credential,
            placeholder,
            frozenset({Location.PATH}),
            base_url=base_url,
        )
    assert_never(placement)


def _framed_header_passes(
    prefix: str,
    credential: str,
    placeholder: str,
    header_names: Collection[str],
    *,
    whole_token: bool = False,
) -> list[SubstitutionPass]:
    names = frozenset(header_names)
    return [
        SubstitutionPass(
            prefix + credential,
            prefix + placeholder,
            HEADER_LOCATIONS,
            names,
            token_prefix=prefix if whole_token else None,
        ),
        # Raw headers often carry the bare token
        SubstitutionPass(credential, placeholder, HEADER_LOCATIONS, names),
    ]


def digest_header_names(security: DigestSecurity) -> frozenset[str]:
    """Headers that may carry a digest challenge or authorization."""
    return frozenset(
        {
            DEFAULT_AUTHORIZATION_HEADER,
            DEFAULT_CHALLENGE_HEADER,
            security.effective_authorization_header,
            security.effective_challenge_header,
        }
    )


def locate(
    security: SecurityConfiguration,
    credential: str,
    placeholder: str,
    base_url: str | None = None,
) -> list[SubstitutionPass]:
    """Compute the substitution passes for a security scheme.

    Every scheme ends with a pass over ``response`` and ``decodedResponse``
    for the bare credential, since APIs echo submitted credentials back.

    Args:
        security: Security configuration of the call.
        credential: Value being searched for.
        placeholder: Value it becomes.
        base_url: Base URL of the service.

    Returns:
        Ordered list of passes.
    """
    passes: list[SubstitutionPass]
    if isinstance(security, ApiKeySecurity):
        passes = [_api_key_pass(security, credential, placeholder, base_url)]
    elif isinstance(security, BasicSecurity):
        passes = _framed_header_passes(
            BASIC_PREFIX, credential, placeholder, [DEFAULT_AUTHORIZATION_HEADER]
        )
    elif isinstance(security, BearerSecurity):
        passes = _framed_header_passes(
            BEARER_PREFIX, credential, placeholder, [DEFAULT_AUTHORIZATION_HEADER]
        )
    elif isinstance(security, DigestSecurity):
        passes = _framed_header_passes(
            DIGEST_PREFIX,
            credential,
            placeholder,
            digest_header_names(security),
            whole_token=True,
        )
    else:
        assert_never(security)

    passes.append(SubstitutionPass(credential, placeholder, RESPONSE_LOCATIONS))
    return passes
