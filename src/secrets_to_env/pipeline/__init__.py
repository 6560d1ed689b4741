"""
Pipeline Package - Orchestration.

This package contains the orchestration logic that filters, renames and
exports secrets.

Components:
    - SecretsExportPipeline: Per-key filter/rename/export orchestrator
    - run_pipeline: One-shot convenience wrapper

Design Principles:
    - All dependencies injected via constructor
    - No direct access to os.environ or stdout
"""

from secrets_to_env.pipeline.export_pipeline import SecretsExportPipeline, run_pipeline

__all__ = ["SecretsExportPipeline", "run_pipeline"]
