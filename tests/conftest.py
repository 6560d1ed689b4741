"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import pytest

from secrets_to_env.adapters.in_memory import InMemoryHost
from secrets_to_env.config.models import ExportConfig


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def sample_secrets() -> Dict[str, str]:
    """Secrets covering lower-case, prefixed and suffixed names."""
    return {
        "alice_bob": "low_value",
        "FOO": "BAR",
        "PREFIX_SECRET_1": "VALUE_1",
        "PREFIX_SECRET_2": "VALUE_2",
        "SECRET_1_SUFFIX": "VALUE_1",
        "SECRET_2_SUFFIX": "VALUE_2",
    }


@pytest.fixture
def sample_payload(sample_secrets: Dict[str, str]) -> str:
    """Sample secrets rendered like toJSON(secrets)."""
    return json.dumps(sample_secrets)


@pytest.fixture
def default_config() -> ExportConfig:
    """Create default export configuration."""
    return ExportConfig()


@pytest.fixture
def host() -> InMemoryHost:
    """Create an empty in-memory host."""
    return InMemoryHost()
