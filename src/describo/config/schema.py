"""
describo — configuration schema

File: src/describo/config/schema.py
Last updated: 2026-10-19

Purpose
- Define the immutable configuration carried by validators and descriptions.
- Validate raw mappings into ``DescriboConfig`` with structured issues.

Functional requirements
- Defaults are usable without any loading step.
- Validation reports every issue with a deterministic field path.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Final

from describo.constants import DEFAULT_MESSAGE, INVALID_PROPERTIES_MESSAGE, UNEXPECTED_ERROR_MESSAGE


@dataclass(frozen=True, slots=True)
class DescriboConfig:
    """Messages and switches shared by a family of descriptions."""

    default_message: str = DEFAULT_MESSAGE
    invalid_properties_message: str = INVALID_PROPERTIES_MESSAGE
    unexpected_error_message: str = UNEXPECTED_ERROR_MESSAGE
    debug: bool = False

    def with_overrides(self, **overrides: object) -> DescriboConfig:
        """Return a copy with ``overrides`` applied after validation."""

        merged = {**self.to_dict(), **overrides}
        return assert_valid_config(merged)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG: Final[DescriboConfig] = DescriboConfig()

_STRING_FIELDS: Final[tuple[str, ...]] = (
    "default_message",
    "invalid_properties_message",
    "unexpected_error_message",
)
_BOOL_FIELDS: Final[tuple[str, ...]] = ("debug",)
FIELD_NAMES: Final[frozenset[str]] = frozenset(item.name for item in fields(DescriboConfig))


@dataclass(frozen=True, slots=True)
class ConfigValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ConfigValidationResult:
    """Validation result with the built config when no issues were found."""

    config: DescriboConfig | None
    issues: tuple[ConfigValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.config is not None and not self.issues


class ConfigValidationError(ValueError):
    """Raised when strict config validation fails."""

    def __init__(self, issues: Sequence[ConfigValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid config:\n{rendered}")


def default_config() -> DescriboConfig:
    return DEFAULT_CONFIG


def validate_config(config: Mapping[str, object] | object) -> ConfigValidationResult:
    """Validate a raw mapping and return structured issues with deterministic paths."""

    if isinstance(config, DescriboConfig):
        return ConfigValidationResult(config=config, issues=())
    if not isinstance(config, Mapping):
        issue = ConfigValidationIssue(path="<root>", message="config must be a mapping")
        return ConfigValidationResult(config=None, issues=(issue,))

    issues: list[ConfigValidationIssue] = []
    values: dict[str, Any] = {}

    for key in sorted(config, key=str):
        if key not in FIELD_NAMES:
            issues.append(ConfigValidationIssue(path=str(key), message="unknown config field"))

    for name in _STRING_FIELDS:
        if name not in config:
            continue
        value = config[name]
        if not isinstance(value, str):
            issues.append(ConfigValidationIssue(path=name, message="must be a string"))
        elif not value.strip():
            issues.append(ConfigValidationIssue(path=name, message="must be non-empty"))
        else:
            values[name] = value

    for name in _BOOL_FIELDS:
        if name not in config:
            continue
        value = config[name]
        if not isinstance(value, bool):
            issues.append(ConfigValidationIssue(path=name, message="must be a boolean"))
        else:
            values[name] = value

    if issues:
        return ConfigValidationResult(config=None, issues=tuple(issues))
    return ConfigValidationResult(config=replace(DEFAULT_CONFIG, **values), issues=())


def assert_valid_config(config: Mapping[str, object] | object) -> DescriboConfig:
    """Validate config and raise ``ConfigValidationError`` on failure."""

    result = validate_config(config)
    if result.config is None:
        raise ConfigValidationError(result.issues)
    return result.config


__all__ = [
    "DEFAULT_CONFIG",
    "FIELD_NAMES",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "DescriboConfig",
    "assert_valid_config",
    "default_config",
    "validate_config",
]
