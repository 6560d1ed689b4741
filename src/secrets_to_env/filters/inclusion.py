"""
Inclusion Filter Implementation.

Keeps only keys matching at least one include pattern. Without include
patterns every key passes.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from secrets_to_env.config.models import ExportConfig
from secrets_to_env.filters.rules import PatternRule, compile_rules, first_match


class IncludeFilter:
    """Filter keys by the include list."""

    def __init__(self, config: ExportConfig) -> None:
        """
        Initialize with configuration.

        Args:
            config: Export configuration

        Raises:
            InvalidPattern: If an include pattern does not compile
        """
        self.rules: Optional[List[PatternRule]] = None
        if config.include_patterns:
            self.rules = compile_rules(config.include_patterns, "include")

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "include_filter"

    @property
    def enabled(self) -> bool:
        """False when no include patterns are configured."""
        return self.rules is not None

    def check(self, key: str) -> Tuple[bool, str]:
        """Check if a single key passes the include list."""
        if not self.enabled:
            return True, ""

        rule = first_match(self.rules, key)
        if rule is None:
            return False, "not in include list"
        return True, f"matched include pattern {rule.source!r}"
