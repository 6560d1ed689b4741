"""
Domain Layer - Result Entities and Value Objects.

Entities:
    - TransformResult: Per-key publish/skip decision
    - ExportReport: Ordered results of one run

Value Objects:
    - CaseConversion: Case applied to final keys
    - LogLevel: Trace message severity
    - SecretMap: Name -> value mapping
"""

from secrets_to_env.domain.entities import (
    ExportReport,
    TransformAction,
    TransformResult,
)
from secrets_to_env.domain.value_objects import CaseConversion, LogLevel, SecretMap

__all__ = [
    "CaseConversion",
    "ExportReport",
    "LogLevel",
    "SecretMap",
    "TransformAction",
    "TransformResult",
]
