"""
Command Line Interface.

Without arguments the command behaves as the GitHub Action: options and
secrets come from INPUT_* variables and exports go to GITHUB_ENV.

Usage:
    secrets-to-env
    secrets-to-env --config export.yaml --secrets-file secrets.json
    secrets-to-env --config export.yaml --secrets-file secrets.json --dry-run
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from secrets_to_env import __version__, configure_logging
from secrets_to_env.action import run_action
from secrets_to_env.adapters.github_actions import GitHubActionsHost, input_env_name
from secrets_to_env.adapters.in_memory import InMemoryHost
from secrets_to_env.config.loader import OPTION_INPUTS, ConfigLoader
from secrets_to_env.domain.entities import ExportReport
from secrets_to_env.validation.errors import ConfigurationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secrets-to-env",
        description="Export a JSON map of secrets as environment variables.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with export options (default: action inputs)",
    )
    parser.add_argument(
        "--secrets-file",
        type=Path,
        help="JSON file with the secrets (default: the 'secrets' input)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print decisions without exporting anything",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.dry_run:
        host = InMemoryHost(
            inputs=_inputs_from_environ(os.environ),
            environ=dict(os.environ),
            stream=sys.stdout,
        )
    else:
        host = GitHubActionsHost()

    try:
        config = ConfigLoader().load(args.config) if args.config else None
        payload = (
            args.secrets_file.read_text(encoding="utf-8") if args.secrets_file else None
        )
    except (ConfigurationError, OSError) as e:
        logger.debug("Cannot read command line files", exc_info=True)
        host.set_failed(str(e))
        return 1

    report = run_action(host, config=config, secrets_payload=payload)
    if report is None:
        return 1

    if args.dry_run:
        _print_report(report)
    return 0


def _inputs_from_environ(environ: Mapping[str, str]) -> Dict[str, str]:
    """Action inputs set as INPUT_* variables, keyed by input name."""
    inputs = {}
    for name in ("secrets",) + OPTION_INPUTS:
        env_name = input_env_name(name)
        if env_name in environ:
            inputs[name] = environ[env_name]
    return inputs


def _print_report(report: ExportReport) -> None:
    for result in report.results:
        target = result.final_key or "-"
        print(f"{result.original_key:30} {result.action.value:17} {target}")
    print(f"Summary: {report.summary()}")


if __name__ == "__main__":
    sys.exit(main())
