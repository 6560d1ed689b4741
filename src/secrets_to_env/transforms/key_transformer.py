"""
Key Transformer.

Renames a key that survived filtering. Steps run in a fixed order, each
one independently optional:
    1. Remove prefix (only if the key starts with it)
    2. Remove suffix (only if the key ends with it)
    3. Add prefix
    4. Add suffix
    5. Case conversion (upper by default)

Removal and addition are not exclusive: configuring both a removal and
an addition applies both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from secrets_to_env.config.models import ExportConfig


@dataclass
class RenamedKey:
    """Final key plus a description of every step that changed it."""

    original: str
    final: str
    steps: List[str] = field(default_factory=list)


class KeyTransformer:
    """Apply prefix, suffix and case rules to keys."""

    def __init__(self, config: ExportConfig) -> None:
        self.config = config

    def transform(self, key: str) -> RenamedKey:
        """
        Compute the final environment variable name of key.

        Args:
            key: Original secret name

        Returns:
            RenamedKey with the final name and applied steps
        """
        config = self.config
        renamed = RenamedKey(original=key, final=key)

        if config.remove_prefix and renamed.final.startswith(config.remove_prefix):
            self._step(
                renamed,
                "prefix removal",
                renamed.final[len(config.remove_prefix):],
            )

        if config.remove_suffix and renamed.final.endswith(config.remove_suffix):
            self._step(
                renamed,
                "suffix removal",
                renamed.final[: -len(config.remove_suffix)],
            )

        if config.add_prefix:
            self._step(renamed, "prefix add", config.add_prefix + renamed.final)

        if config.add_suffix:
            self._step(renamed, "suffix add", renamed.final + config.add_suffix)

        converted = config.case_conversion.apply(renamed.final)
        if converted != renamed.final:
            self._step(renamed, f"{config.case_conversion.value} case", converted)

        return renamed

    def _step(self, renamed: RenamedKey, label: str, new_key: str) -> None:
        renamed.steps.append(f"{label} {renamed.final} -> {new_key}")
        renamed.final = new_key
