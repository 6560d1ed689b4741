"""
Core Domain Entities.

This module defines the outcome of processing secrets: one TransformResult
per input key and the ExportReport that collects them for a run.

Secret values are never stored on these entities.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class TransformAction(str, Enum):
    """What happened to a single secret."""

    PUBLISHED = "published"
    SKIPPED_FILTERED = "skipped_filtered"
    SKIPPED_EXISTING = "skipped_existing"


class TransformResult(BaseModel):
    """Outcome for one input key."""

    original_key: str = Field(..., description="Key as supplied in the payload")
    final_key: Optional[str] = Field(
        default=None, description="Environment variable name, None when filtered"
    )
    action: TransformAction = Field(..., description="Publish or skip decision")
    reason: str = Field(default="", description="Human-readable decision reason")
    overridden: bool = Field(
        default=False, description="True when an existing value was replaced"
    )

    model_config = {"frozen": True}

    @property
    def is_published(self) -> bool:
        return self.action == TransformAction.PUBLISHED

    @classmethod
    def filtered(cls, key: str, reason: str) -> "TransformResult":
        """Build a result for a key dropped by a filter stage."""
        return cls(
            original_key=key,
            action=TransformAction.SKIPPED_FILTERED,
            reason=reason,
        )


class ExportReport(BaseModel):
    """All results of one pipeline run."""

    run_id: str = Field(..., description="Unique id of this run")
    started_at: datetime = Field(default_factory=datetime.now)
    duration_seconds: float = Field(default=0.0, ge=0)
    results: List[TransformResult] = Field(default_factory=list)

    @property
    def published_keys(self) -> List[str]:
        """Final keys that were exported, in export order."""
        return [r.final_key for r in self.results if r.is_published and r.final_key]

    def count(self, action: TransformAction) -> int:
        return sum(1 for r in self.results if r.action == action)

    def summary(self) -> Dict[str, int]:
        """Number of results per action."""
        return {action.value: self.count(action) for action in TransformAction}
