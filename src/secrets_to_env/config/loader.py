"""
Configuration Loader - Action Inputs, YAML and Dict Sources.

Builds ExportConfig from the action inputs of the host, from a YAML file,
or from a dictionary, and validates it using the Pydantic model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from secrets_to_env.config.models import ExportConfig
from secrets_to_env.validation.errors import ConfigurationError

if TYPE_CHECKING:
    from secrets_to_env.interfaces.host import InputSource

logger = logging.getLogger(__name__)

# Input names in lookup order; legacy aliases come after the current name
OPTION_INPUTS = (
    "include",
    "exclude",
    "add-prefix",
    "prefix",
    "add-suffix",
    "remove-prefix",
    "removeprefix",
    "remove-suffix",
    "convert",
    "override",
    "tracelog",
)


class ConfigLoader:
    """Loads and validates configuration from inputs, YAML files or dicts."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(self, config_path: Union[str, Path]) -> ExportConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            Validated ExportConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the file is not a mapping or is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        logger.debug(f"Loaded config file {path}")
        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ExportConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated ExportConfig object

        Raises:
            ConfigurationError: If the values do not validate
        """
        try:
            return ExportConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def load_from_inputs(self, inputs: "InputSource") -> ExportConfig:
        """
        Load configuration from action inputs.

        Unset inputs are left out so model defaults apply and a legacy
        alias is only consulted when the current input name is empty.

        Args:
            inputs: Host exposing get_input()

        Returns:
            Validated ExportConfig object
        """
        config_dict: Dict[str, str] = {}
        for name in OPTION_INPUTS:
            value = inputs.get_input(name)
            if value:
                config_dict[name] = value
        return self.load_from_dict(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Any:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            try:
                return yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Cannot parse config file {path}: {e}") from e


def load_config(
    config_path: Union[str, Path],
    base_path: Optional[Path] = None,
) -> ExportConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        base_path: Base path for resolving relative paths

    Returns:
        Validated ExportConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path)
