"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. Field aliases
match the action input names so the same model reads action inputs, YAML
files and plain dicts.

Absent options are normalized to None (or an empty list for excludes),
so "not configured" never hides behind an empty string.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from secrets_to_env.domain.value_objects import CaseConversion

logger = logging.getLogger(__name__)


def split_patterns(value: Any) -> List[str]:
    """Split a comma-separated pattern list, dropping blank entries."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(item).strip() for item in value if str(item).strip()]


class ExportConfig(BaseModel):
    """Options controlling which secrets are exported and under which names."""

    include_patterns: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("include", "include_patterns"),
        description="Regex sources; a key must match one of them",
    )
    exclude_patterns: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("exclude", "exclude_patterns"),
        description="Regex sources; a key matching any of them is dropped",
    )
    add_prefix: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("add-prefix", "prefix", "add_prefix"),
    )
    add_suffix: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("add-suffix", "add_suffix"),
    )
    remove_prefix: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("remove-prefix", "removeprefix", "remove_prefix"),
    )
    remove_suffix: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("remove-suffix", "remove_suffix"),
    )
    case_conversion: CaseConversion = Field(
        default=CaseConversion.UPPER,
        validation_alias=AliasChoices("convert", "case_conversion"),
    )
    override_existing: bool = Field(
        default=False,
        validation_alias=AliasChoices("override", "override_existing"),
    )
    trace_logging: bool = Field(
        default=False,
        validation_alias=AliasChoices("tracelog", "trace_logging"),
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("include_patterns", mode="before")
    @classmethod
    def _parse_include(cls, value: Any) -> Optional[List[str]]:
        patterns = split_patterns(value)
        return patterns or None

    @field_validator("exclude_patterns", mode="before")
    @classmethod
    def _parse_exclude(cls, value: Any) -> List[str]:
        return split_patterns(value)

    @field_validator(
        "add_prefix", "add_suffix", "remove_prefix", "remove_suffix", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    @field_validator("case_conversion", mode="before")
    @classmethod
    def _parse_convert(cls, value: Any) -> Any:
        if isinstance(value, CaseConversion):
            return value
        if value is None or value == "":
            return CaseConversion.UPPER
        normalized = str(value).strip().lower()
        if normalized in (c.value for c in CaseConversion):
            return CaseConversion(normalized)
        logger.warning(f"Unknown convert value {value!r}, using upper case")
        return CaseConversion.UPPER

    @field_validator("override_existing", "trace_logging", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> Any:
        # Action inputs only enable a flag with the literal "true"
        if isinstance(value, str):
            return value.strip() == "true"
        return value
