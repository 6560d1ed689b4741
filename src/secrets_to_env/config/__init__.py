"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of secrets-to-env:
    - Pydantic model for type-safe configuration
    - Loader reading action inputs, YAML files or dicts

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - One model, one set of names for every source
"""

from secrets_to_env.config.loader import ConfigLoader, load_config
from secrets_to_env.config.models import ExportConfig

__all__ = ["ConfigLoader", "ExportConfig", "load_config"]
