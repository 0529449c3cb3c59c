"""
describo — object descriptions

File: src/describo/core/object_description.py
Last updated: 2026-10-19

Purpose
- Describe structured values: named properties, each with its own description, plus
  the object's own ("self") validations run against the whole value.

Orchestration
- Properties phase: every property validated concurrently; full join, so each
  failing property contributes its own message.
- Self phase: runs only after the properties phase, and only when no property
  failed or errored.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from describo.config.schema import DescriboConfig
from describo.core.description import Description, ResultCallback
from describo.core.errors import ConfigurationError
from describo.core.results import ResultKind, ValidationResult
from describo.observability.logging import get_logger
from describo.utils.concurrency import Report, run_parallel_settled, run_series

_PROPERTIES_PHASE = "properties"
_SELF_PHASE = "self"

_logger = get_logger(__name__)


class ObjectDescription(Description):
    """Description with named property descriptions, validated before the object itself."""

    def __init__(self, message: str | None = None, *, config: DescriboConfig | None = None) -> None:
        self._property_names: list[str] = []
        self._properties: dict[str, Description] = {}
        super().__init__(message, config=config)

    def __getattr__(self, name: str) -> Any:
        properties = vars(self).get("_properties")
        if properties is not None and name in properties:
            return properties[name]
        return super().__getattr__(name)

    @property
    def properties(self) -> Mapping[str, Description]:
        """Read-only view of the authoritative description per property name."""

        return MappingProxyType(self._properties)

    @property
    def property_names(self) -> tuple[str, ...]:
        """Property names in declaration order, once per ``add_property`` call."""

        return tuple(self._property_names)

    def add_property(
        self,
        name: str,
        message_or_description: str | Description | None = None,
    ) -> Description:
        """Declare property ``name`` and return its description (not this object)."""

        if not isinstance(name, str) or not name:
            raise ConfigurationError("property name is required")

        if isinstance(message_or_description, Description):
            description = message_or_description
        else:
            description = Description(message_or_description, config=self.config)

        if self._shadows_attribute(name):
            raise ConfigurationError(f"overriding API ({name})")

        if self.config.debug and name in self._properties:
            _logger.warning("property_description_overridden", property=name)

        self._property_names.append(name)
        self._properties[name] = description
        return description

    has = add_property

    def evaluate(self, value: Any, message: str | None, on_result: ResultCallback) -> None:
        phases: list[tuple[str, Callable[[Report[ValidationResult]], None]]] = [
            (_PROPERTIES_PHASE, lambda report: self._validate_properties(value, report)),
            (_SELF_PHASE, lambda report: Description.evaluate(self, value, None, report)),
        ]

        def _settle(outcomes: dict[str, ValidationResult]) -> None:
            result = self._conclude_phases(message, outcomes)
            if self.config.debug:
                _logger.debug(
                    "object_validated",
                    kind=result.kind.value,
                    properties=len(self._properties),
                    failed_properties=sorted(result.properties),
                )
            on_result(result)

        run_series(
            phases,
            _settle,
            halt=lambda result: not result.valid,
            on_duplicate=self._on_duplicate,
        )

    def _validate_properties(self, value: Any, report: Report[ValidationResult]) -> None:
        tasks: dict[str, Callable[[Report[ValidationResult]], None]] = {}
        for name in self._property_names:
            tasks[name] = self._property_task(name, read_property(value, name))

        run_parallel_settled(
            tasks,
            lambda outcomes: report(self._merge_property_results(outcomes)),
            on_duplicate=self._on_duplicate,
        )

    def _property_task(
        self, name: str, property_value: Any
    ) -> Callable[[Report[ValidationResult]], None]:
        description = self._properties[name]

        def _task(report: Report[ValidationResult]) -> None:
            description.evaluate(property_value, None, report)

        return _task

    def _merge_property_results(self, outcomes: Mapping[str, ValidationResult]) -> ValidationResult:
        for result in outcomes.values():
            if result.is_error:
                return result

        failures = {
            name: result.message or self.config.default_message
            for name, result in outcomes.items()
            if not result.valid
        }
        if failures:
            return ValidationResult.failed_properties(
                self.config.invalid_properties_message, failures
            )
        return ValidationResult.passed()

    def _conclude_phases(
        self,
        message: str | None,
        outcomes: Mapping[str, ValidationResult],
    ) -> ValidationResult:
        properties_result = outcomes[_PROPERTIES_PHASE]
        if properties_result.is_error:
            return ValidationResult.errored(
                properties_result.error, self.config.unexpected_error_message
            )
        if properties_result.kind is ResultKind.INVALID_PROPERTIES:
            return ValidationResult.failed_properties(
                message or self.config.invalid_properties_message,
                properties_result.properties,
            )

        self_result = outcomes[_SELF_PHASE]
        if self_result.is_error:
            return ValidationResult.errored(self_result.error, self.config.unexpected_error_message)
        if not self_result.valid:
            return ValidationResult.failed(message or self_result.message or "")
        return ValidationResult.passed()

    def _shadows_attribute(self, name: str) -> bool:
        if name in self._properties:
            return False
        if hasattr(type(self), name) or name in vars(self):
            existing = getattr(self, name, None)
            return not isinstance(existing, Description)
        existing = getattr(self, name, None)
        return existing is not None and not isinstance(existing, Description)


def read_property(value: Any, name: str) -> Any:
    """Read ``name`` from a mapping key or an attribute; missing reads as ``None``."""

    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


__all__ = ["ObjectDescription", "read_property"]
