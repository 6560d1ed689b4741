"""
In-Memory Host.

A host that keeps inputs, environment and exports in dictionaries.
Used by tests and by the CLI dry-run mode.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, TextIO, Tuple

from secrets_to_env.domain.value_objects import LogLevel
from secrets_to_env.validation.errors import MissingRequiredInput


class InMemoryHost:
    """Simple dictionary-backed host."""

    def __init__(
        self,
        inputs: Optional[Dict[str, str]] = None,
        environ: Optional[Dict[str, str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize in-memory host.

        Args:
            inputs: Action inputs by name
            environ: Initial environment; exports are written into it
            stream: If given, trace messages are also printed there
        """
        self.inputs: Dict[str, str] = dict(inputs or {})
        self.environ: Dict[str, str] = dict(environ or {})
        self.exports: Dict[str, str] = {}
        self.export_order: List[str] = []
        self.messages: List[Tuple[LogLevel, str]] = []
        self.failures: List[str] = []
        self._stream = stream

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def get_input(self, name: str, required: bool = False) -> str:
        value = self.inputs.get(name, "").strip()
        if required and not value:
            raise MissingRequiredInput(name)
        return value

    def get_env(self, name: str) -> Optional[str]:
        return self.environ.get(name)

    def export_variable(self, key: str, value: str) -> None:
        self.environ[key] = value
        self.exports[key] = value
        self.export_order.append(key)

    def log(self, level: LogLevel, message: str) -> None:
        self.messages.append((level, message))
        if self._stream is not None:
            timestamp = datetime.now().strftime("%H:%M:%S")
            print(f"[{timestamp}] [{level.value.upper():7}] {message}", file=self._stream)

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
        self.log(LogLevel.ERROR, message)

    def messages_at(self, level: LogLevel) -> List[str]:
        """Trace messages logged at one level."""
        return [message for lvl, message in self.messages if lvl == level]
