"""
GitHub Actions Host.

Implements the host protocols on top of the GitHub Actions runner
contract:
    - Inputs arrive as INPUT_<NAME> environment variables
    - Exports are appended to the file named by GITHUB_ENV
      (or issued as ::set-env:: when no such file is configured)
    - Trace output and failures are workflow commands on stdout
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from typing import MutableMapping, Optional, TextIO

from secrets_to_env.domain.value_objects import LogLevel
from secrets_to_env.validation.errors import MissingRequiredInput

logger = logging.getLogger(__name__)

_COMMANDS = {
    LogLevel.DEBUG: "debug",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
}


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsHost:
    """Host backed by the GitHub Actions runner environment."""

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the host.

        Args:
            environ: Process environment (default: os.environ)
            stdout: Stream receiving workflow commands (default: sys.stdout)
        """
        self.environ = os.environ if environ is None else environ
        self.stdout = stdout or sys.stdout
        self.exit_code = 0

    def get_input(self, name: str, required: bool = False) -> str:
        """Read INPUT_<NAME>, trimmed."""
        value = self.environ.get(input_env_name(name), "").strip()
        if required and not value:
            raise MissingRequiredInput(name)
        return value

    def get_env(self, name: str) -> Optional[str]:
        return self.environ.get(name)

    def export_variable(self, key: str, value: str) -> None:
        """
        Export key=value for this step and all following steps.

        Raises:
            ValueError: If key or value contains the heredoc delimiter
        """
        self.environ[key] = value

        env_file = self.environ.get("GITHUB_ENV", "")
        if env_file:
            self._append_env_file(env_file, key, value)
        else:
            self._issue(f"::set-env name={escape_property(key)}::{escape_data(value)}")

    def log(self, level: LogLevel, message: str) -> None:
        command = _COMMANDS.get(level)
        if command is None:
            self._issue(message)
        else:
            self._issue(f"::{command}::{escape_data(message)}")

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self.log(LogLevel.ERROR, message)

    def _append_env_file(self, path: str, key: str, value: str) -> None:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in key:
            raise ValueError(
                f'Unexpected input: name should not contain the delimiter "{delimiter}"'
            )
        if delimiter in value:
            raise ValueError(
                f'Unexpected input: value should not contain the delimiter "{delimiter}"'
            )
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")

    def _issue(self, line: str) -> None:
        try:
            self.stdout.write(line + "\n")
            self.stdout.flush()
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot write to stdout: {e}")
