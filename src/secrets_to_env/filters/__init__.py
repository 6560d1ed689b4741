"""
Filters Package - Key Filter Stages.

Each stage exposes check(key) -> (passes, reason) and is applied per key
by the export pipeline, inclusion first.

Filters:
    - IncludeFilter: Keeps keys matching an include pattern
    - ExcludeFilter: Drops the reserved key and keys matching an exclude pattern

Rules:
    - ReservedKeyRule, PatternRule, compile_rules
"""

from secrets_to_env.filters.exclusion import ExcludeFilter
from secrets_to_env.filters.inclusion import IncludeFilter
from secrets_to_env.filters.rules import (
    RESERVED_KEY,
    FilterRule,
    PatternRule,
    ReservedKeyRule,
    compile_rules,
)

__all__ = [
    "ExcludeFilter",
    "FilterRule",
    "IncludeFilter",
    "PatternRule",
    "RESERVED_KEY",
    "ReservedKeyRule",
    "compile_rules",
]
