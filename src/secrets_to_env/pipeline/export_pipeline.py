"""
Export Pipeline - Main Orchestrator.

The SecretsExportPipeline turns a secret map into environment variables.
Each key runs through, in order:
    1. Inclusion filter
    2. Exclusion filter
    3. Key transformation
    4. Conflict check against the environment
    5. Export or skip

Keys are processed one at a time in input order. The environment is
probed right before each decision, so an export made for an earlier key
is visible to later keys of the same run.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import List, Optional

from secrets_to_env.config.models import ExportConfig
from secrets_to_env.domain.entities import (
    ExportReport,
    TransformAction,
    TransformResult,
)
from secrets_to_env.domain.value_objects import LogLevel, SecretMap
from secrets_to_env.filters.exclusion import ExcludeFilter
from secrets_to_env.filters.inclusion import IncludeFilter
from secrets_to_env.interfaces.host import EnvironmentSnapshot, ExportSink, TraceLogger
from secrets_to_env.transforms.key_transformer import KeyTransformer

logger = logging.getLogger(__name__)


class _NullTraceLogger:
    """Sends trace output to the module logger only."""

    def log(self, level: LogLevel, message: str) -> None:
        logger.debug(f"[{level.value}] {message}")


class SecretsExportPipeline:
    """Filters, renames and exports secrets."""

    def __init__(
        self,
        config: ExportConfig,
        environment: EnvironmentSnapshot,
        exporter: ExportSink,
        trace_logger: Optional[TraceLogger] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Filter patterns are compiled here, so an invalid pattern fails
        before any secret is exported.

        Args:
            config: Export configuration
            environment: Probe for already-set variables
            exporter: Sink receiving exported variables
            trace_logger: Receiver of trace output (optional)

        Raises:
            InvalidPattern: If an include or exclude pattern is invalid
        """
        self.config = config
        self.environment = environment
        self.exporter = exporter
        self.trace_logger = trace_logger or _NullTraceLogger()

        self.include_filter = IncludeFilter(config)
        self.exclude_filter = ExcludeFilter(config)
        self.transformer = KeyTransformer(config)

    def run(self, secrets: SecretMap) -> ExportReport:
        """
        Process every secret.

        Args:
            secrets: Secret values by original key

        Returns:
            ExportReport with one result per key, in input order
        """
        start_time = time.perf_counter()
        report = ExportReport(run_id=str(uuid.uuid4()), started_at=datetime.now())

        if self.config.trace_logging:
            self._trace_config()

        for key, value in secrets.items():
            report.results.append(self._process(key, value))

        report.duration_seconds = time.perf_counter() - start_time
        logger.info(
            f"Processed {len(report.results)} secrets in "
            f"{report.duration_seconds:.3f}s: {report.summary()}"
        )
        return report

    def _process(self, key: str, value: str) -> TransformResult:
        """Run one key through filters, renaming and conflict check."""
        trace = self.config.trace_logging

        passed, reason = self.include_filter.check(key)
        if not passed:
            if trace:
                self._trace(LogLevel.INFO, f"excluding {key} as not in includelist")
            return TransformResult.filtered(key, reason)

        passed, reason = self.exclude_filter.check(key)
        if not passed:
            if trace:
                self._trace(LogLevel.DEBUG, f"excluding {key} as {reason}")
            return TransformResult.filtered(key, reason)

        renamed = self.transformer.transform(key)
        if trace:
            for step in renamed.steps:
                self._trace(LogLevel.DEBUG, step)

        new_key = renamed.final
        if not new_key:
            self._trace(LogLevel.WARNING, f"Skip {key}: name is empty after renaming")
            return TransformResult.filtered(key, "empty name after renaming")

        overridden = False
        if self.environment.get_env(new_key):
            if not self.config.override_existing:
                self._trace(LogLevel.INFO, f"Skip overwriting secret {new_key}")
                return TransformResult(
                    original_key=key,
                    final_key=new_key,
                    action=TransformAction.SKIPPED_EXISTING,
                    reason="already set in environment",
                )
            self._trace(
                LogLevel.WARNING,
                f'Will re-write "{new_key}" environment variable.',
            )
            overridden = True

        self.exporter.export_variable(new_key, value)
        self._trace(LogLevel.INFO, f"Exported envvar -> {new_key}")
        return TransformResult(
            original_key=key,
            final_key=new_key,
            action=TransformAction.PUBLISHED,
            reason="overrode existing value" if overridden else "",
            overridden=overridden,
        )

    def _trace_config(self) -> None:
        """Describe the resolved configuration."""
        config = self.config
        include = ""
        if self.include_filter.enabled:
            include = ", ".join(r.source for r in self.include_filter.rules)
        self._trace(LogLevel.DEBUG, f"Using include list: {include}")
        self._trace(
            LogLevel.DEBUG,
            "Using exclude list: "
            f"{', '.join(r.source for r in self.exclude_filter.rules)}",
        )
        self._trace(LogLevel.DEBUG, f"Adding prefix: {config.add_prefix or ''}")
        self._trace(LogLevel.DEBUG, f"Adding suffix: {config.add_suffix or ''}")
        self._trace(LogLevel.DEBUG, f"Removing prefix: {config.remove_prefix or ''}")
        self._trace(LogLevel.DEBUG, f"Removing suffix: {config.remove_suffix or ''}")
        self._trace(LogLevel.DEBUG, f"Override: {str(config.override_existing).lower()}")
        self._trace(LogLevel.DEBUG, f"Convert: {config.case_conversion.value}")

    def _trace(self, level: LogLevel, message: str) -> None:
        self.trace_logger.log(level, message)


def run_pipeline(
    secrets: SecretMap,
    config: ExportConfig,
    environment: EnvironmentSnapshot,
    exporter: ExportSink,
    trace_logger: Optional[TraceLogger] = None,
) -> List[TransformResult]:
    """
    Convenience function to run the pipeline once.

    Args:
        secrets: Secret values by original key
        config: Export configuration
        environment: Probe for already-set variables
        exporter: Sink receiving exported variables
        trace_logger: Receiver of trace output (optional)

    Returns:
        One TransformResult per key, in input order
    """
    pipeline = SecretsExportPipeline(config, environment, exporter, trace_logger)
    return pipeline.run(secrets).results
