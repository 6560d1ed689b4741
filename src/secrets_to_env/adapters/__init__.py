"""
Adapters Package - Host Implementations.

Adapters:
    - GitHubActionsHost: INPUT_* inputs, GITHUB_ENV exports, workflow commands
    - InMemoryHost: Dictionary-backed host for tests and dry runs
"""

from secrets_to_env.adapters.github_actions import GitHubActionsHost
from secrets_to_env.adapters.in_memory import InMemoryHost

__all__ = ["GitHubActionsHost", "InMemoryHost"]
