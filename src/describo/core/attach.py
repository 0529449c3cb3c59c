"""
describo — validator helpers on descriptions

File: src/describo/core/attach.py
Last updated: 2026-10-19

Purpose
- ``attach(validator, target)`` exposes ``target.<validator.name>(*params, message)``
  which builds a ``Validation`` and adds it through the receiver's ``add_validation``.
  Called on a ``not_`` view, the added validation is negated.

Targets
- Description classes: helpers are visible on every instance of the class and its
  subclasses.
- Description instances: helpers are visible on that instance (and its ``not_``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from describo.config.schema import DEFAULT_CONFIG, DescriboConfig
from describo.core.errors import ConfigurationError
from describo.core.validation import Validation
from describo.core.validator import Message, Validator
from describo.observability.logging import get_logger

_CLASS_REGISTRY = "_helpers"
_INSTANCE_REGISTRY = "_instance_helpers"

_logger = get_logger(__name__)


def attach(
    validator: Validator,
    *targets: Any,
    config: DescriboConfig | None = None,
) -> Validator:
    """Register ``validator`` as a helper method on each target; returns the validator."""

    if not isinstance(validator, Validator):
        raise ConfigurationError("invalid validator")
    if not targets:
        raise ConfigurationError(f"at least one target is required ({validator.name})")

    cfg = config or DEFAULT_CONFIG
    for target in targets:
        if isinstance(target, (list, tuple)):
            attach(validator, *target, config=config)
            continue
        registry = _registry_for(target)
        if cfg.debug and (validator.name in registry or hasattr(target, validator.name)):
            _logger.warning("validator_helper_overridden", helper=validator.name)
        registry[validator.name] = validator
    return validator


def detach(name: str, *targets: Any) -> None:
    """Remove helper ``name`` from each target's own registry, if present."""

    for target in targets:
        _registry_for(target).pop(name, None)


def lookup_helper(receiver: object, name: str) -> Validator | None:
    """Find helper ``name`` on the receiver instance, then along its class MRO."""

    own = vars(receiver).get(_INSTANCE_REGISTRY)
    if own and name in own:
        return own[name]
    for cls in type(receiver).__mro__:
        helpers = cls.__dict__.get(_CLASS_REGISTRY)
        if helpers and name in helpers:
            return helpers[name]
    return None


def bind_helper(receiver: Any, validator: Validator) -> Callable[..., Any]:
    """Build the helper callable that adds ``validator`` validations to ``receiver``."""

    def helper(*args: Any, message: Message | None = None) -> Any:
        params = list(args[: validator.param_count])
        extra = args[validator.param_count :]
        if len(extra) > 1:
            raise ConfigurationError(
                f"{validator.name} takes {validator.param_count} params and a message, "
                f"got {len(args)} arguments"
            )
        if extra:
            if message is not None:
                raise ConfigurationError(f"message given twice ({validator.name})")
            message = extra[0]
        receiver.add_validation(Validation(validator, params, message))
        return receiver

    helper.__name__ = validator.name
    helper.__qualname__ = f"{type(receiver).__name__}.{validator.name}"
    return helper


def _registry_for(target: Any) -> dict[str, Validator]:
    if isinstance(target, type):
        if not callable(getattr(target, "add_validation", None)):
            raise ConfigurationError(f"invalid attach target: {target!r}")
        if _CLASS_REGISTRY not in target.__dict__:
            setattr(target, _CLASS_REGISTRY, {})
        registry: dict[str, Validator] = target.__dict__[_CLASS_REGISTRY]
        return registry

    if not callable(getattr(target, "add_validation", None)):
        raise ConfigurationError(f"invalid attach target: {target!r}")
    own: dict[str, Validator] = vars(target).setdefault(_INSTANCE_REGISTRY, {})
    return own


__all__ = ["attach", "bind_helper", "detach", "lookup_helper"]
