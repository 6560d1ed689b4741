"""
Exclusion Filter Implementation.

Drops keys matching the reserved runner token or any exclude pattern.
The reserved rule always comes first and cannot be configured away.
"""

from __future__ import annotations

from typing import List, Tuple

from secrets_to_env.config.models import ExportConfig
from secrets_to_env.filters.rules import (
    FilterRule,
    ReservedKeyRule,
    compile_rules,
    first_match,
)


class ExcludeFilter:
    """Filter keys by the exclude list."""

    def __init__(self, config: ExportConfig) -> None:
        """
        Initialize with configuration.

        Args:
            config: Export configuration

        Raises:
            InvalidPattern: If an exclude pattern does not compile
        """
        self.rules: List[FilterRule] = [ReservedKeyRule()]
        self.rules.extend(compile_rules(config.exclude_patterns, "exclude"))

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "exclude_filter"

    def check(self, key: str) -> Tuple[bool, str]:
        """Check if a single key survives the exclude list."""
        rule = first_match(self.rules, key)
        if rule is None:
            return True, ""
        if isinstance(rule, ReservedKeyRule):
            return False, "reserved key, already exported by the runner"
        return False, f"in exclude list (pattern {rule.source!r})"
