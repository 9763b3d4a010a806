"""Entry points replacing values inside a recording definition.

All three operations mutate the definition in place and do nothing when the
value to replace is empty: an empty string would match everywhere.
"""

import structlog

from fixture_redact.recording.models import RecordingDefinition
from fixture_redact.replace.locator import locate
from fixture_redact.replace.metrics import RedactionMetrics
from fixture_redact.replace.walker import apply
from fixture_redact.security.models import SecurityConfiguration


logger = structlog.get_logger()


def replace_credential_in_definition(
    definition: RecordingDefinition,
    security: SecurityConfiguration,
    base_url: str,
    credential: str,
    placeholder: str,
) -> None:
    """Replace a security credential according to its scheme.

    Args:
        definition: Recording to mutate.
        security: Security configuration describing where the credential goes.
        base_url: Base URL of the service.
        credential: Value to search for.
        placeholder: Value it becomes.
    """
    metrics = RedactionMetrics.get_instance()
    log = logger.bind(
        component="replace",
        kind="credential",
        security_id=security.id,
        security_type=security.type,
    )

    if credential == "":
        metrics.record_skipped_empty()
        log.debug("replacement_skipped_empty_value")
        return

    replaced = sum(
        replacement_pass.run(definition)
        for replacement_pass in locate(security, credential, placeholder, base_url)
    )
    metrics.record_pass("credential", replaced)
    log.debug("credential_replaced", leaves_replaced=replaced)


def _replace_value(
    kind: str,
    definition: RecordingDefinition,
    base_url: str,
    credential: str,
    placeholder: str,
) -> None:
    metrics = RedactionMetrics.get_instance()
    log = logger.bind(component="replace", kind=kind, base_url=base_url)

    if credential == "":
        metrics.record_skipped_empty()
        log.debug("replacement_skipped_empty_value")
        return

    # Every location, scope included
    replaced = apply(definition, credential, placeholder)
    metrics.record_pass(kind, replaced)
    log.debug(f"{kind}_replaced", leaves_replaced=replaced)


def replace_parameter_in_definition(
    definition: RecordingDefinition,
    base_url: str,
    credential: str,
    placeholder: str,
) -> None:
    """Replace an integration parameter value everywhere in a recording.

    Args:
        definition: Recording to mutate.
        base_url: Base URL of the service.
        credential: Value to search for.
        placeholder: Value it becomes.
    """
    _replace_value("parameter", definition, base_url, credential, placeholder)


def replace_input_in_definition(
    definition: RecordingDefinition,
    base_url: str,
    credential: str,
    placeholder: str,
) -> None:
    """Replace a use case input value everywhere in a recording.

    Args:
        definition: Recording to mutate.
        base_url: Base URL of the service.
        credential: Value to search for.
        placeholder: Value it becomes.
    """
    _replace_value("input", definition, base_url, credential, placeholder)
