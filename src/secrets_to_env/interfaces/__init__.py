"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for
the host collaborator. High-level modules depend on these abstractions,
not on GitHub Actions or os.environ.

Protocols:
    - InputSource: Action input access
    - EnvironmentSnapshot: Existing environment probe
    - ExportSink: Variable publication
    - TraceLogger: Trace output
    - ActionHost: All of the above plus set_failed
"""

from secrets_to_env.interfaces.host import (
    ActionHost,
    EnvironmentSnapshot,
    ExportSink,
    InputSource,
    TraceLogger,
)

__all__ = [
    "ActionHost",
    "EnvironmentSnapshot",
    "ExportSink",
    "InputSource",
    "TraceLogger",
]
