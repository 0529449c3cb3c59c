"""
describo — runtime config loader.

File: src/describo/config/loader.py
Last updated: 2026-10-19

Purpose
- Build the effective ``DescriboConfig`` from defaults, ``DESCRIBO_`` env vars, and
  explicit overrides.

Functional requirements
- Precedence: explicit overrides > env (``DESCRIBO_``) > defaults.
- Deterministic environment variable mapping and coercion.
- Fail fast with errors naming the offending variable.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Final, Literal

from describo.config.schema import DEFAULT_CONFIG, DescriboConfig, assert_valid_config
from describo.constants import ENV_PREFIX

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})


@dataclass(frozen=True, slots=True)
class _Binding:
    field_name: str
    value_type: Literal["str", "bool"]


class ConfigLoadError(ValueError):
    """Raised when overrides cannot be coerced into a valid config."""


def load_config(
    overrides: Mapping[str, object] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    base: DescriboConfig = DEFAULT_CONFIG,
) -> DescriboConfig:
    """Load effective config with deterministic precedence: overrides > env > base."""

    env_map = dict(os.environ if environ is None else environ)
    merged: dict[str, Any] = base.to_dict()
    merged.update(_collect_env_overrides(env_map))
    merged.update(dict(overrides or {}))
    return assert_valid_config(merged)


def effective_config(config: DescriboConfig) -> dict[str, Any]:
    """Return a plain mapping representation suitable for logging."""

    return config.to_dict()


def dump_effective_config(config: DescriboConfig) -> str:
    """Return deterministic JSON dump of the effective config."""

    return json.dumps(
        effective_config(config), sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )


def env_name_for_field(field_name: str) -> str:
    return ENV_PREFIX + field_name.upper()


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    bindings = _build_bindings()
    overrides: dict[str, Any] = {}
    for env_name in sorted(bindings):
        raw = environ.get(env_name)
        if raw is None:
            continue
        binding = bindings[env_name]
        overrides[binding.field_name] = _coerce_env(raw, binding.value_type, env_name)
    return overrides


def _build_bindings() -> dict[str, _Binding]:
    bindings: dict[str, _Binding] = {}
    for item in fields(DescriboConfig):
        value = getattr(DEFAULT_CONFIG, item.name)
        kind: Literal["str", "bool"] = "bool" if isinstance(value, bool) else "str"
        bindings[env_name_for_field(item.name)] = _Binding(field_name=item.name, value_type=kind)
    return bindings


def _coerce_env(raw: str, value_type: Literal["str", "bool"], env_name: str) -> object:
    if value_type == "str":
        if not raw.strip():
            raise ConfigLoadError(f"{env_name} must be non-empty")
        return raw

    lowered = raw.strip().lower()
    if lowered in _BOOLEAN_TRUE:
        return True
    if lowered in _BOOLEAN_FALSE:
        return False
    raise ConfigLoadError(f"{env_name} must be a boolean (true/false/1/0/yes/no/on/off)")


__all__ = [
    "ConfigLoadError",
    "dump_effective_config",
    "effective_config",
    "env_name_for_field",
    "load_config",
]
