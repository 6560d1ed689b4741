"""
Configuration Errors.

Every failure of a run is a configuration problem: an input that is
missing, a secrets payload that is not a JSON object, or a filter
pattern that does not compile. Per-key decisions are never errors.

Design Notes:
    - One base class so the top-level runner catches a single type
    - Errors carry the offending input name for clear messages
"""

from __future__ import annotations

from typing import Optional


class ConfigurationError(Exception):
    """Raised when the run cannot start because of its configuration."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class MissingRequiredInput(ConfigurationError):
    """Raised when a required input was not supplied."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Input required and not supplied: {name}", field=name)


class MalformedSecretsPayload(ConfigurationError):
    """Raised when the secrets input is not a JSON object."""

    HINT = (
        "Make sure you add the following to this action:\n"
        "\n"
        "with:\n"
        "      secrets: ${{ toJSON(secrets) }}\n"
        "or:\n"
        "      secrets: ${{ toJSON(vars) }}\n"
    )

    def __init__(self, detail: str = "") -> None:
        message = "Cannot parse JSON secrets."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(f"{message}\n{self.HINT}", field="secrets")


class InvalidPattern(ConfigurationError):
    """Raised when an include or exclude pattern is not a valid regex."""

    def __init__(self, pattern: str, reason: str, field: Optional[str] = None) -> None:
        super().__init__(
            f"Invalid {field or 'filter'} pattern {pattern!r}: {reason}",
            field=field,
        )
        self.pattern = pattern
