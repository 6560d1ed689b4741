"""
Action Entry Point.

Reads inputs from the host, runs the export pipeline, and converts any
error into a single terminal failure on the host.
"""

from __future__ import annotations

import logging
from typing import Optional

from secrets_to_env.config.loader import ConfigLoader
from secrets_to_env.config.models import ExportConfig
from secrets_to_env.domain.entities import ExportReport
from secrets_to_env.interfaces.host import ActionHost
from secrets_to_env.pipeline.export_pipeline import SecretsExportPipeline
from secrets_to_env.validation.errors import ConfigurationError
from secrets_to_env.validation.payload import parse_secrets

logger = logging.getLogger(__name__)


def run_action(
    host: ActionHost,
    config: Optional[ExportConfig] = None,
    secrets_payload: Optional[str] = None,
) -> Optional[ExportReport]:
    """
    Execute one run against a host.

    Args:
        host: Task runner collaborator
        config: Configuration to use instead of the action inputs
        secrets_payload: JSON payload to use instead of the secrets input

    Returns:
        ExportReport, or None when the run failed
    """
    try:
        if secrets_payload is None:
            secrets_payload = host.get_input("secrets", required=True)
        if config is None:
            config = ConfigLoader().load_from_inputs(host)

        secrets = parse_secrets(secrets_payload)
        pipeline = SecretsExportPipeline(
            config=config,
            environment=host,
            exporter=host,
            trace_logger=host,
        )
        return pipeline.run(secrets)

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        host.set_failed(e.message)
    except Exception as e:
        logger.exception("Unexpected error while exporting secrets")
        host.set_failed(str(e))
    return None
