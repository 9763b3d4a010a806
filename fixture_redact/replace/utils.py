"""Running redaction over whole recordings.

Resolves credential values and placeholders for every security scheme,
integration parameter and hidden input value, runs the entry points over
each definition, and warns about configured values that are still present.
"""

import base64
import json
import os
from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple, assert_never

import structlog
from structlog.contextvars import bound_contextvars

from fixture_redact.config.loader import RedactionProfile
from fixture_redact.errors import UnexpectedSecurityValueError
from fixture_redact.observability import (
    bind_redaction_context,
    clear_redaction_context,
)
from fixture_redact.recording.inputs import InputVariables, Primitive, search_values
from fixture_redact.recording.models import RecordingDefinitions
from fixture_redact.replace.metrics import RedactionMetrics
from fixture_redact.replace.replace import (
    replace_credential_in_definition,
    replace_input_in_definition,
    replace_parameter_in_definition,
)
from fixture_redact.security.models import (
    ApiKeySecurity,
    BasicSecurity,
    BearerSecurity,
    DigestSecurity,
    SecurityConfiguration,
)
from fixture_redact.settings import get_settings


logger = structlog.get_logger()

HIDDEN_CREDENTIALS_PLACEHOLDER = "SECURITY_"
HIDDEN_PARAMETERS_PLACEHOLDER = "PARAMS_"
HIDDEN_INPUT_PLACEHOLDER = "INPUT_"


class PlaceholderKind(str, Enum):
    """Source of a value hidden in recordings."""

    CREDENTIAL = "credential"
    PARAMETER = "parameter"
    INPUT = "input"


class ResolvedPlaceholder(NamedTuple):
    """Search value and replacement for one redaction pass."""

    credential: str
    placeholder: str


_DEFAULT_PREFIXES: dict[PlaceholderKind, str] = {
    PlaceholderKind.CREDENTIAL: HIDDEN_CREDENTIALS_PLACEHOLDER,
    PlaceholderKind.PARAMETER: HIDDEN_PARAMETERS_PLACEHOLDER,
    PlaceholderKind.INPUT: HIDDEN_INPUT_PLACEHOLDER,
}


def _resolve_env(value: str, environ: Mapping[str, str]) -> str:
    if value.startswith("$"):
        return environ.get(value[1:], "")
    return value


def resolve_credential(
    security: SecurityConfiguration,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Resolve the credential value a security scheme sends over the wire.

    Values starting with ``$`` are read from the environment; a missing
    variable resolves to an empty string. Basic and digest credentials are
    the base64 encoding of ``username:password``.

    Args:
        security: Security configuration with its values.
        environ: Environment to read from (default: os.environ).

    Returns:
        Resolved credential.

    Raises:
        UnexpectedSecurityValueError: If the value field of the scheme is
            not configured.
    """
    env = os.environ if environ is None else environ
    logger.debug("resolving_security_value", security_id=security.id)

    if isinstance(security, ApiKeySecurity):
        if security.apikey is None:
            raise UnexpectedSecurityValueError(security.id)
        return _resolve_env(security.apikey, env)

    if isinstance(security, BasicSecurity | DigestSecurity):
        if security.username is None or security.password is None:
            raise UnexpectedSecurityValueError(security.id)
        user = _resolve_env(security.username, env)
        password = _resolve_env(security.password, env)
        return base64.b64encode(f"{user}:{password}".encode()).decode("ascii")

    if isinstance(security, BearerSecurity):
        if security.token is None:
            raise UnexpectedSecurityValueError(security.id)
        return _resolve_env(security.token, env)

    assert_never(security)


def resolve_placeholder(
    name: str,
    value: str,
    before_save: bool,
    kind: PlaceholderKind,
    prefixes: Mapping[PlaceholderKind, str] | None = None,
) -> ResolvedPlaceholder:
    """Resolve the search value and replacement for a named value.

    The placeholder is the kind prefix followed by the name. Before saving,
    the real value is replaced by the placeholder; when loading, the other
    way round.

    Args:
        name: Security scheme id, parameter name or input accessor.
        value: Real value.
        before_save: True when redacting, False when restoring.
        kind: Source of the value.
        prefixes: Placeholder prefix per kind.

    Returns:
        Pair to pass to an entry point.
    """
    prefix = (prefixes or _DEFAULT_PREFIXES)[kind]
    placeholder = prefix + name

    if before_save:
        return ResolvedPlaceholder(credential=value, placeholder=placeholder)
    return ResolvedPlaceholder(credential=placeholder, placeholder=value)


def stringify_input(value: Primitive) -> str:
    """Render an input primitive the way it appears in serialized traffic."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _settings_prefixes() -> dict[PlaceholderKind, str]:
    settings = get_settings()
    return {
        PlaceholderKind.CREDENTIAL: settings.credentials_placeholder_prefix,
        PlaceholderKind.PARAMETER: settings.parameters_placeholder_prefix,
        PlaceholderKind.INPUT: settings.input_placeholder_prefix,
    }


def replace_credentials(
    definitions: RecordingDefinitions,
    security: list[SecurityConfiguration],
    integration_parameters: Mapping[str, str],
    before_save: bool,
    base_url: str,
    input_variables: InputVariables | None = None,
) -> None:
    """Hide or restore every configured value in a list of recordings.

    Args:
        definitions: Recordings to mutate.
        security: Security configurations with their values.
        integration_parameters: Integration parameters by name.
        before_save: True when redacting, False when restoring.
        base_url: Base URL of the service.
        input_variables: Input values to hide, by accessor.
    """
    settings = get_settings()
    prefixes = _settings_prefixes()
    log = logger.bind(component="replace", before_save=before_save)
    log.debug("replacing_credentials", definitions=len(definitions))

    for index, definition in enumerate(definitions):
        with bound_contextvars(definition_index=index):
            for security_config in security:
                log.debug(
                    "processing_security_scheme",
                    security_id=security_config.id,
                    security_type=security_config.type,
                )
                resolved = resolve_placeholder(
                    security_config.id,
                    resolve_credential(security_config),
                    before_save,
                    PlaceholderKind.CREDENTIAL,
                    prefixes,
                )
                if settings.log_sensitive_values:
                    log.debug(
                        "sensitive_value_replaced",
                        credential=resolved.credential,
                        placeholder=resolved.placeholder,
                    )
                replace_credential_in_definition(
                    definition,
                    security_config,
                    base_url,
                    resolved.credential,
                    resolved.placeholder,
                )

            for name, value in integration_parameters.items():
                log.debug("processing_integration_parameter", parameter=name)
                resolved = resolve_placeholder(
                    name, value, before_save, PlaceholderKind.PARAMETER, prefixes
                )
                replace_parameter_in_definition(
                    definition, base_url, resolved.credential, resolved.placeholder
                )

            for name, input_value in (input_variables or {}).items():
                log.debug("processing_input_value", input=name)
                resolved = resolve_placeholder(
                    name,
                    stringify_input(input_value),
                    before_save,
                    PlaceholderKind.INPUT,
                    prefixes,
                )
                replace_input_in_definition(
                    definition, base_url, resolved.credential, resolved.placeholder
                )


def check_sensitive_information(
    definitions: RecordingDefinitions,
    security: list[SecurityConfiguration],
    params: Mapping[str, str],
    input_variables: InputVariables | None = None,
) -> list[str]:
    """Warn about configured values still present in recorded traffic.

    Args:
        definitions: Recordings to inspect.
        security: Security configurations with their values.
        params: Integration parameters by name.
        input_variables: Hidden input values, by accessor.

    Returns:
        Warning messages, one per value found per definition.
    """
    metrics = RedactionMetrics.get_instance()
    log = logger.bind(component="replace")
    warnings: list[str] = []

    def _warn(message: str) -> None:
        metrics.record_sensitive_value_found()
        log.warning("sensitive_value_found", message=message)
        warnings.append(message)

    for index, definition in enumerate(definitions):
        with bound_contextvars(definition_index=index):
            serialized = json.dumps(definition, ensure_ascii=False)

            for security_config in security:
                credential = resolve_credential(security_config)
                if credential and credential in serialized:
                    _warn(
                        f"Value for security scheme '{security_config.id}' of type "
                        f"'{security_config.type}' was found in recorded HTTP traffic."
                    )

            for name, value in params.items():
                if value and value in serialized:
                    _warn(
                        f"Value for integration parameter '{name}' was found "
                        "in recorded HTTP traffic."
                    )

            for name, input_value in (input_variables or {}).items():
                text = stringify_input(input_value)
                if text and text in serialized:
                    _warn(
                        f"Value for input variable '{name}' was found "
                        "in recorded HTTP traffic."
                    )

    return warnings


def process_recordings(
    definitions: RecordingDefinitions,
    profile: RedactionProfile,
    input_data: Mapping[str, Any] | None = None,
    before_save: bool = True,
    fixture: str | None = None,
) -> list[str]:
    """Hide or restore every value a profile names.

    When hiding, the recordings are checked afterwards for values that are
    still present.

    Args:
        definitions: Recordings to mutate.
        profile: Redaction profile of the provider.
        input_data: Use case input the profile's ``hide_input`` points into.
        before_save: True when redacting, False when restoring.
        fixture: Fixture name bound to every log event of the run.

    Returns:
        Warning messages for values still present (always empty on restore).

    Raises:
        InputValueError: If a hidden input property is missing or not primitive.
        UnexpectedSecurityValueError: If a security scheme has no value.
    """
    if fixture is not None:
        bind_redaction_context(fixture)

    try:
        input_variables = (
            search_values(input_data, profile.hide_input)
            if input_data is not None
            else None
        )

        replace_credentials(
            definitions,
            profile.security,
            profile.integration_parameters,
            before_save,
            profile.base_url,
            input_variables,
        )

        if not before_save:
            return []

        if profile.security or profile.integration_parameters or input_variables:
            return check_sensitive_information(
                definitions,
                profile.security,
                profile.integration_parameters,
                input_variables,
            )
        return []
    finally:
        if fixture is not None:
            clear_redaction_context()
