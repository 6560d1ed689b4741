"""
Validation Package - Error Types and Payload Parsing.

Components:
    - ConfigurationError: Base class for every fatal run error
    - MissingRequiredInput, MalformedSecretsPayload, InvalidPattern
    - parse_secrets: Secrets payload parser
"""

from secrets_to_env.validation.errors import (
    ConfigurationError,
    InvalidPattern,
    MalformedSecretsPayload,
    MissingRequiredInput,
)
from secrets_to_env.validation.payload import parse_secrets

__all__ = [
    "ConfigurationError",
    "InvalidPattern",
    "MalformedSecretsPayload",
    "MissingRequiredInput",
    "parse_secrets",
]
