"""
Secrets Payload Parsing.

The secrets input is the JSON rendering of a workflow's ``secrets`` or
``vars`` context: a flat object mapping names to string values.

Design Notes:
    - Fail-fast: anything but a JSON object aborts the run
    - Key order of the payload is preserved for reproducible traces
    - Non-string values are rendered the way the Actions toolkit does
      when exporting (null -> "", others -> JSON)
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from secrets_to_env.validation.errors import MalformedSecretsPayload

logger = logging.getLogger(__name__)


def parse_secrets(payload: str) -> Dict[str, str]:
    """
    Parse the secrets input into an ordered name -> value mapping.

    Args:
        payload: JSON text of the secrets object

    Returns:
        Mapping of secret name to string value, in payload order

    Raises:
        MalformedSecretsPayload: If the payload is not a JSON object
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise MalformedSecretsPayload(str(e)) from e

    if not isinstance(data, dict):
        raise MalformedSecretsPayload(
            f"expected a JSON object, got {type(data).__name__}"
        )

    secrets = {str(key): _to_command_value(value) for key, value in data.items()}
    logger.debug(f"Parsed {len(secrets)} secrets from payload")
    return secrets


def _to_command_value(value: Any) -> str:
    """Render a JSON value as an environment variable value."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)
