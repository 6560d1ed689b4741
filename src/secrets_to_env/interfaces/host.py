"""
Host Protocols.

Defines the abstract interface of the task runner hosting a run. The
pipeline never touches the process environment or stdout directly: it
probes an EnvironmentSnapshot, publishes through an ExportSink and
reports through a TraceLogger.

The host is responsible for:
    - Supplying action inputs
    - Exposing the current environment (a live view is expected)
    - Publishing exported variables for the rest of the job
    - Rendering trace messages and the terminal failure

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Small, focused protocols; ActionHost combines them
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from secrets_to_env.domain.value_objects import LogLevel


@runtime_checkable
class InputSource(Protocol):
    """Source of string-valued action inputs."""

    def get_input(self, name: str, required: bool = False) -> str:
        """
        Read an input value.

        Args:
            name: Input name as declared by the action
            required: Fail when the input is absent

        Returns:
            The trimmed value, or "" when absent and not required

        Raises:
            MissingRequiredInput: If required and absent
        """
        ...


@runtime_checkable
class EnvironmentSnapshot(Protocol):
    """Read-only probe of the current environment."""

    def get_env(self, name: str) -> Optional[str]:
        """Return the current value of name, or None when unset."""
        ...


@runtime_checkable
class ExportSink(Protocol):
    """Publishes environment variables."""

    def export_variable(self, key: str, value: str) -> None:
        """Make key=value visible for the remainder of the job."""
        ...


@runtime_checkable
class TraceLogger(Protocol):
    """Receives human-readable trace output."""

    def log(self, level: "LogLevel", message: str) -> None:
        """Emit one trace message. Must not raise."""
        ...


@runtime_checkable
class ActionHost(InputSource, EnvironmentSnapshot, ExportSink, TraceLogger, Protocol):
    """Everything a run needs from the task runner."""

    def set_failed(self, message: str) -> None:
        """Mark the run as failed with a terminal message."""
        ...
