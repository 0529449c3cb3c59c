"""Unit tests for configuration schema validation."""

from __future__ import annotations

import dataclasses

import pytest

from describo.config.schema import (
    DEFAULT_CONFIG,
    FIELD_NAMES,
    ConfigValidationError,
    DescriboConfig,
    assert_valid_config,
    default_config,
    validate_config,
)


def test_default_config_values() -> None:
    config = default_config()

    assert config is DEFAULT_CONFIG
    assert config.default_message == "Invalid."
    assert config.invalid_properties_message == "One or more properties are invalid."
    assert config.unexpected_error_message == "Unexpected error."
    assert config.debug is False


def test_field_names() -> None:
    assert FIELD_NAMES == {
        "default_message",
        "invalid_properties_message",
        "unexpected_error_message",
        "debug",
    }


def test_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.debug = True  # type: ignore[misc]


def test_validate_accepts_partial_mappings() -> None:
    result = validate_config({"default_message": "Nope."})

    assert result.is_valid
    assert result.config == DescriboConfig(default_message="Nope.")


def test_validate_passes_config_instances_through() -> None:
    config = DescriboConfig(debug=True)

    assert validate_config(config).config is config


def test_validate_rejects_non_mappings() -> None:
    result = validate_config(["debug"])

    assert not result.is_valid
    assert [(issue.path, issue.message) for issue in result.issues] == [
        ("<root>", "config must be a mapping")
    ]


def test_validate_collects_every_issue() -> None:
    result = validate_config(
        {
            "zeta": 1,
            "alpha": 2,
            "default_message": 3,
            "unexpected_error_message": " ",
            "debug": "yes",
        }
    )

    assert result.config is None
    assert [(issue.path, issue.message) for issue in result.issues] == [
        ("alpha", "unknown config field"),
        ("zeta", "unknown config field"),
        ("default_message", "must be a string"),
        ("unexpected_error_message", "must be non-empty"),
        ("debug", "must be a boolean"),
    ]


def test_assert_valid_config_renders_issues() -> None:
    with pytest.raises(ConfigValidationError, match="- debug: must be a boolean"):
        assert_valid_config({"debug": 1})


def test_with_overrides_returns_a_new_config() -> None:
    config = DEFAULT_CONFIG.with_overrides(debug=True)

    assert config.debug is True
    assert DEFAULT_CONFIG.debug is False


def test_with_overrides_validates() -> None:
    with pytest.raises(ConfigValidationError):
        DEFAULT_CONFIG.with_overrides(default_message="")
