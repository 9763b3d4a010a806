"""Unit tests for the scheme locator."""

import pytest

from fixture_redact.recording.models import RecordingDefinition
from fixture_redact.replace.locator import (
    SubstitutionPass,
    digest_header_names,
    locate,
    replace_scheme_token,
)
from fixture_redact.replace.walker import (
    HEADER_LOCATIONS,
    RESPONSE_LOCATIONS,
    Location,
)
from fixture_redact.security.models import (
    ApiKeyPlacement,
    ApiKeySecurity,
    BasicSecurity,
    BearerSecurity,
    DigestSecurity,
)


class TestLocateApiKey:
    """Tests for API key placement."""

    @pytest.mark.parametrize(
        ("placement", "locations"),
        [
            (ApiKeyPlacement.HEADER, HEADER_LOCATIONS),
            (ApiKeyPlacement.BODY, frozenset({Location.BODY})),
            (ApiKeyPlacement.PATH, frozenset({Location.PATH})),
            (ApiKeyPlacement.QUERY, frozenset({Location.PATH})),
        ],
    )
    def test_placement_locations(
        self, placement: ApiKeyPlacement, locations: frozenset[Location]
    ) -> None:
        """Each placement targets its own location, then the responses."""
        security = ApiKeySecurity(id="key", placement=placement, name="api_key")

        passes = locate(security, "secret", "PH")

        assert [p.locations for p in passes] == [locations, RESPONSE_LOCATIONS]
        assert all(p.search_value == "secret" for p in passes)
        assert all(p.replacement == "PH" for p in passes)

    def test_header_placement_restricts_header_name(self) -> None:
        """Header API key only scans the named header."""
        security = ApiKeySecurity(
            id="key", placement=ApiKeyPlacement.HEADER, name="X-Api-Key"
        )

        passes = locate(security, "secret", "PH")

        assert passes[0].header_names == frozenset({"X-Api-Key"})

    def test_header_placement_without_name_scans_all_headers(self) -> None:
        """Unnamed header API key scans every header."""
        security = ApiKeySecurity(id="key", placement=ApiKeyPlacement.HEADER)

        passes = locate(security, "secret", "PH")

        assert passes[0].header_names is None

    def test_path_placement_carries_base_url(self) -> None:
        """Path and query placements protect the base path prefix."""
        security = ApiKeySecurity(id="key", placement=ApiKeyPlacement.QUERY)

        passes = locate(security, "secret", "PH", "https://host/api")

        assert passes[0].base_url == "https://host/api"


class TestLocateHttp:
    """Tests for HTTP authentication schemes."""

    @pytest.mark.parametrize(
        ("security", "prefix"),
        [
            (BasicSecurity(id="basic", username="u", password="p"), "Basic "),
            (BearerSecurity(id="bearer", token="t"), "Bearer "),
        ],
    )
    def test_framed_search_value(
        self, security: BasicSecurity | BearerSecurity, prefix: str
    ) -> None:
        """Scheme prefix frames the credential in Authorization."""
        passes = locate(security, "secret", "PH")

        framed, bare, response = passes
        assert framed.search_value == f"{prefix}secret"
        assert framed.replacement == f"{prefix}PH"
        assert framed.header_names == frozenset({"Authorization"})
        assert framed.locations == HEADER_LOCATIONS
        assert framed.token_prefix is None
        assert bare.search_value == "secret"
        assert bare.header_names == frozenset({"Authorization"})
        assert response.locations == RESPONSE_LOCATIONS

    def test_digest_uses_whole_token(self) -> None:
        """Digest pass replaces whatever follows the scheme prefix."""
        security = DigestSecurity(id="digest", username="u", password="p")

        framed = locate(security, "Unknown", "PH")[0]

        assert framed.token_prefix == "Digest "
        assert framed.search_value == "Digest Unknown"
        assert framed.transform('Digest username="u", nonce="n"') == "Digest PH"

    def test_digest_header_names_include_defaults_and_custom(self) -> None:
        """Default headers are always scanned alongside custom ones."""
        security = DigestSecurity(
            id="digest",
            challenge_header="X-Challenge",
            authorization_header="X-Auth",
        )

        assert digest_header_names(security) == frozenset(
            {"Authorization", "WWW-Authenticate", "X-Challenge", "X-Auth"}
        )


class TestReplaceSchemeToken:
    """Tests for replace_scheme_token."""

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ("Digest secret", "Digest PH"),
            ("digest secret", "digest PH"),
            ("Digest PH", "Digest PH"),
            ("Digest ", "Digest "),
            ("Basic secret", "Basic secret"),
            ("secret", "secret"),
        ],
    )
    def test_replaces_token(self, payload: str, expected: str) -> None:
        """Only values carrying the scheme are rewritten."""
        assert replace_scheme_token(payload, "Digest ", "Digest PH") == expected


class TestSubstitutionPass:
    """Tests for SubstitutionPass.run."""

    def test_empty_search_value_is_noop(self) -> None:
        """A pass with nothing to search for changes nothing."""
        definition: RecordingDefinition = {"reqheaders": {"Authorization": "Digest x"}}
        replacement_pass = SubstitutionPass(
            "", "Digest PH", HEADER_LOCATIONS, token_prefix="Digest "
        )

        assert replacement_pass.run(definition) == 0
        assert definition == {"reqheaders": {"Authorization": "Digest x"}}

    def test_run_returns_changed_leaves(self) -> None:
        """Run reports how many leaves changed."""
        definition: RecordingDefinition = {
            "response": {"a": "secret", "b": ["secret", "other"]}
        }
        replacement_pass = SubstitutionPass("secret", "PH", RESPONSE_LOCATIONS)

        assert replacement_pass.run(definition) == 2
        assert definition == {"response": {"a": "PH", "b": ["PH", "other"]}}
