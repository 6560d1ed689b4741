"""
Unit Tests for KeyTransformer.

Test Aspects Covered:
    ✅ Business Logic: Step order, independent prefix/suffix steps
    ✅ Edge Cases: Removal only when present, default case conversion
"""

from __future__ import annotations

import pytest

from secrets_to_env.config.models import ExportConfig
from secrets_to_env.domain.value_objects import CaseConversion
from secrets_to_env.transforms.key_transformer import KeyTransformer


def transform(key: str, **options: object) -> str:
    """Helper returning the final key for a config built from options."""
    return KeyTransformer(ExportConfig(**options)).transform(key).final


class TestKeyTransformer:
    """Test cases for KeyTransformer."""

    def test_defaults_to_upper_case(self) -> None:
        """
        SCENARIO: No options configured
        EXPECTED: Key is upper-cased
        """
        assert transform("alice_bob") == "ALICE_BOB"

    def test_lower_case(self) -> None:
        assert transform("FOO", convert="lower") == "foo"

    def test_no_case_conversion(self) -> None:
        assert transform("Mixed_Case", convert="none") == "Mixed_Case"

    def test_removes_prefix(self) -> None:
        """
        SCENARIO: Key starts with the configured prefix
        EXPECTED: Prefix stripped
        """
        assert transform("PREFIX_SECRET_1", **{"remove-prefix": "PREFIX_"}) == "SECRET_1"

    def test_keeps_key_without_prefix(self) -> None:
        assert transform("FOO", **{"remove-prefix": "PREFIX_"}) == "FOO"

    def test_removes_suffix(self) -> None:
        assert transform("SECRET_1_SUFFIX", **{"remove-suffix": "_SUFFIX"}) == "SECRET_1"

    def test_adds_prefix_and_suffix(self) -> None:
        result = transform("FOO", **{"add-prefix": "ABC_", "add-suffix": "_XYZ"})

        assert result == "ABC_FOO_XYZ"

    def test_removal_and_addition_both_apply(self) -> None:
        """
        SCENARIO: Remove-prefix and add-prefix both configured
        EXPECTED: Prefix is swapped, steps are independent
        """
        result = transform(
            "OLD_NAME_SUFFIX",
            **{
                "remove-prefix": "OLD_",
                "remove-suffix": "_SUFFIX",
                "add-prefix": "NEW_",
                "add-suffix": "_END",
            },
        )

        assert result == "NEW_NAME_END"

    def test_suffix_removal_sees_prefix_removal(self) -> None:
        """
        SCENARIO: Prefix and suffix overlap in a short key
        EXPECTED: Suffix check runs on the key after prefix removal
        """
        result = transform("AB", **{"remove-prefix": "A", "remove-suffix": "AB"})

        assert result == "B"

    def test_case_conversion_runs_last(self) -> None:
        result = transform("foo", **{"add-prefix": "Abc_", "convert": "lower"})

        assert result == "abc_foo"

    def test_legacy_input_names(self) -> None:
        result = transform("PREFIX_FOO", removeprefix="PREFIX_", prefix="X_")

        assert result == "X_FOO"

    def test_records_steps(self) -> None:
        # Arrange
        transformer = KeyTransformer(
            ExportConfig(remove_prefix="PREFIX_", case_conversion=CaseConversion.LOWER)
        )

        # Act
        renamed = transformer.transform("PREFIX_SECRET")

        # Assert
        assert renamed.final == "secret"
        assert renamed.steps == [
            "prefix removal PREFIX_SECRET -> SECRET",
            "lower case SECRET -> secret",
        ]

    def test_unchanged_key_has_no_steps(self) -> None:
        renamed = KeyTransformer(ExportConfig()).transform("FOO")

        assert renamed.final == "FOO"
        assert renamed.steps == []

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("PREFIX_SECRET_1", "SECRET_1"),
            ("PREFIX_SECRET_2", "SECRET_2"),
            ("FOO", "FOO"),
        ],
    )
    def test_remove_prefix_scenarios(self, key: str, expected: str) -> None:
        assert transform(key, **{"remove-prefix": "PREFIX_"}) == expected
