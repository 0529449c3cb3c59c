"""
describo config package public API.

File: src/describo/config/__init__.py
Last updated: 2026-10-19

Purpose
- Export the config type, its defaults, validation helpers, and the env loader.
"""

from describo.config.loader import (
    ConfigLoadError,
    dump_effective_config,
    effective_config,
    env_name_for_field,
    load_config,
)
from describo.config.schema import (
    DEFAULT_CONFIG,
    FIELD_NAMES,
    ConfigValidationError,
    ConfigValidationIssue,
    ConfigValidationResult,
    DescriboConfig,
    assert_valid_config,
    default_config,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "FIELD_NAMES",
    "ConfigLoadError",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "DescriboConfig",
    "assert_valid_config",
    "default_config",
    "dump_effective_config",
    "effective_config",
    "env_name_for_field",
    "load_config",
    "validate_config",
]
