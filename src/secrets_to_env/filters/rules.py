"""
Filter Rules.

A filter rule decides whether a key matches. Two kinds exist:
    - ReservedKeyRule: the built-in exclusion of the runner token
    - PatternRule: a user-supplied regex, matched with re.search

Patterns are compiled once, when a filter stage is built, so a broken
pattern aborts the run before any secret is processed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from secrets_to_env.validation.errors import InvalidPattern

logger = logging.getLogger(__name__)

# Exported by the runner itself, never re-exported from secrets
RESERVED_KEY = "github_token"


@dataclass(frozen=True)
class ReservedKeyRule:
    """Case-insensitive exact match on the reserved key."""

    name: str = RESERVED_KEY

    @property
    def source(self) -> str:
        return self.name

    def matches(self, key: str) -> bool:
        return key.lower() == self.name.lower()


@dataclass(frozen=True)
class PatternRule:
    """User pattern; matches anywhere in the key."""

    pattern: "re.Pattern[str]"

    @property
    def source(self) -> str:
        return self.pattern.pattern

    def matches(self, key: str) -> bool:
        return self.pattern.search(key) is not None


FilterRule = Union[ReservedKeyRule, PatternRule]


def compile_rules(
    patterns: Optional[Iterable[str]],
    field: str,
) -> List[PatternRule]:
    """
    Compile regex sources into pattern rules, keeping their order.

    Args:
        patterns: Regex sources, may be None
        field: Input the patterns came from, for error messages

    Returns:
        One PatternRule per source

    Raises:
        InvalidPattern: If any source fails to compile
    """
    rules: List[PatternRule] = []
    for source in patterns or ():
        try:
            rules.append(PatternRule(re.compile(source)))
        except re.error as e:
            raise InvalidPattern(source, str(e), field=field) from e
    logger.debug(f"Compiled {len(rules)} {field} patterns")
    return rules


def first_match(rules: Iterable[FilterRule], key: str) -> Optional[FilterRule]:
    """Return the first rule matching key, or None."""
    for rule in rules:
        if rule.matches(key):
            return rule
    return None
