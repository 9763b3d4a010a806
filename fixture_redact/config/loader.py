"""Redaction profile loader.

A profile lists everything that must be hidden in the recordings of one
provider: its security schemes with their values, integration parameters
and the input properties to hide.

Example profile::

    base_url: https://api.example.com/v1
    security:
      - id: api-key
        type: apiKey
        in: query
        name: api_key
        apikey: $EXAMPLE_API_KEY
    integration_parameters:
      tenant: acme
    hide_input:
      - user.email
"""

import hashlib
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fixture_redact.errors import ProfileValidationError
from fixture_redact.security.models import SecurityConfiguration


logger = structlog.get_logger()


class RedactionProfile(BaseModel):
    """Values to hide in the recordings of one provider."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(min_length=1)
    security: list[SecurityConfiguration] = Field(default_factory=list)
    integration_parameters: dict[str, str] = Field(default_factory=dict)
    hide_input: list[str] | None = None


def load_profile(path: Path) -> RedactionProfile:
    """Load and validate a YAML redaction profile.

    Args:
        path: Path to the profile file.

    Returns:
        Validated profile.

    Raises:
        ProfileValidationError: If the file is missing, is not valid YAML or
            does not match the profile schema.
    """
    log = logger.bind(component="config", file_path=str(path))
    log.info("loading_profile")

    try:
        content_bytes = path.read_bytes()
    except FileNotFoundError as e:
        log.error("profile_not_found", error=str(e))
        raise ProfileValidationError(
            [{"loc": "file", "msg": str(e), "type": "file_not_found"}], str(path)
        ) from e

    try:
        data = yaml.safe_load(content_bytes.decode("utf-8")) or {}
    except yaml.YAMLError as e:
        log.error("profile_yaml_parse_error", error=str(e))
        raise ProfileValidationError(
            [{"loc": "yaml", "msg": str(e), "type": "yaml_parse_error"}], str(path)
        ) from e

    try:
        profile = RedactionProfile.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(loc) for loc in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        log.error(
            "profile_validation_failed",
            validation_error_count=len(errors),
            errors=errors,
        )
        raise ProfileValidationError(errors, str(path)) from e

    log.info(
        "profile_loaded",
        file_sha256=hashlib.sha256(content_bytes).hexdigest(),
        security_count=len(profile.security),
        parameter_count=len(profile.integration_parameters),
    )
    return profile
