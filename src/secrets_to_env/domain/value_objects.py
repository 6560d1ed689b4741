"""
Value Objects for Domain Layer.

Small immutable types shared by the pipeline and its collaborators.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Secret values indexed by original key, in input order
SecretMap = Dict[str, str]


class LogLevel(str, Enum):
    """Severity of a trace message sent to the host."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class CaseConversion(str, Enum):
    """Case applied to the final key."""

    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"

    def apply(self, key: str) -> str:
        """Convert key to this case."""
        if self is CaseConversion.LOWER:
            return key.lower()
        if self is CaseConversion.UPPER:
            return key.upper()
        return key
