"""
secrets-to-env - Export Secrets as Environment Variables.

Takes the JSON rendering of a workflow's secrets (or vars) and exports
each entry as an environment variable, after filtering and renaming.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Configuration validated by Pydantic

Main Components:
    - domain: Result entities (TransformResult, ExportReport)
    - interfaces: Host protocols (inputs, environment, exports, trace)
    - filters: Include and exclude filter stages
    - transforms: Key renaming
    - pipeline: Per-key orchestration
    - adapters: GitHub Actions and in-memory hosts
    - config: Configuration model and loader

Example:
    >>> from secrets_to_env.adapters import InMemoryHost
    >>> from secrets_to_env.action import run_action
    >>> host = InMemoryHost(inputs={"secrets": '{"foo": "bar"}'})
    >>> report = run_action(host)
    >>> host.exports
    {'FOO': 'bar'}

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for secrets-to-env.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("secrets_to_env").setLevel(level)
