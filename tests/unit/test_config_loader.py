"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Loading from inputs, YAML and dicts
    ✅ Error Handling: Invalid YAML, missing files, invalid values
"""

from __future__ import annotations

from pathlib import Path

import pytest

from secrets_to_env.adapters.in_memory import InMemoryHost
from secrets_to_env.config.loader import ConfigLoader, load_config
from secrets_to_env.config.models import ExportConfig
from secrets_to_env.domain.value_objects import CaseConversion
from secrets_to_env.validation.errors import ConfigurationError


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_valid_yaml(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: ExportConfig object created
        """
        # Arrange
        loader = ConfigLoader(base_path=sample_config_path.parent)

        # Act
        config = loader.load(sample_config_path.name)

        # Assert
        assert isinstance(config, ExportConfig)
        assert config.include_patterns == ["^PREFIX_", "_SUFFIX$"]
        assert config.exclude_patterns == ["SECRET_2"]
        assert config.remove_prefix == "PREFIX_"
        assert config.add_suffix == "_CI"
        assert config.case_conversion == CaseConversion.LOWER
        assert config.override_existing is True

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")

        assert config == ExportConfig()

    def test_whitespace_only_prefix_is_ignored(self, tmp_path: Path) -> None:
        config_file = tmp_path / "blank.yaml"
        config_file.write_text('add-prefix: "   "\nremove-suffix: " "\n')

        config = ConfigLoader(base_path=tmp_path).load("blank.yaml")

        assert config.add_prefix is None
        assert config.remove_suffix is None

    def test_rejects_non_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- include\n- exclude\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader(base_path=tmp_path).load("list.yaml")

    def test_rejects_invalid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: File is not valid YAML
        EXPECTED: ConfigurationError raised
        """
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("include: [unclosed\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader(base_path=tmp_path).load("broken.yaml")

    def test_validates_invalid_config(self) -> None:
        """
        SCENARIO: Config with a value of the wrong type
        EXPECTED: Pydantic error wrapped in ConfigurationError
        """
        with pytest.raises(ConfigurationError):
            ConfigLoader().load_from_dict({"override": {"nested": 1}})

    def test_file_not_found(self, tmp_path: Path) -> None:
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load("nonexistent.yaml")

    def test_absolute_path_ignores_base(self, sample_config_path: Path, tmp_path: Path) -> None:
        config = ConfigLoader(base_path=tmp_path).load(sample_config_path.resolve())

        assert config.remove_prefix == "PREFIX_"

    def test_load_config_function(self, sample_config_path: Path) -> None:
        config = load_config(sample_config_path)

        assert config.add_suffix == "_CI"


class TestLoadFromInputs:
    """Test cases for reading action inputs."""

    def test_reads_all_inputs(self) -> None:
        # Arrange
        host = InMemoryHost(
            inputs={
                "include": "A,B",
                "exclude": "C",
                "add-prefix": "P_",
                "add-suffix": "_S",
                "remove-prefix": "R_",
                "remove-suffix": "_T",
                "convert": "lower",
                "override": "true",
                "tracelog": "true",
            }
        )

        # Act
        config = ConfigLoader().load_from_inputs(host)

        # Assert
        assert config.include_patterns == ["A", "B"]
        assert config.exclude_patterns == ["C"]
        assert config.add_prefix == "P_"
        assert config.add_suffix == "_S"
        assert config.remove_prefix == "R_"
        assert config.remove_suffix == "_T"
        assert config.case_conversion == CaseConversion.LOWER
        assert config.override_existing is True
        assert config.trace_logging is True

    def test_empty_current_input_falls_back_to_legacy(self) -> None:
        """
        SCENARIO: add-prefix empty, legacy prefix set
        EXPECTED: Legacy value used
        """
        host = InMemoryHost(inputs={"add-prefix": "", "prefix": "OLD_"})

        config = ConfigLoader().load_from_inputs(host)

        assert config.add_prefix == "OLD_"

    def test_no_inputs_gives_defaults(self, host: InMemoryHost) -> None:
        assert ConfigLoader().load_from_inputs(host) == ExportConfig()
