"""
describo — validation result envelope

File: src/describo/core/results.py
Last updated: 2026-10-19

Purpose
- Tagged result type shared by descriptions, object descriptions, and the asyncio
  bridge. Each variant maps to exactly one callback argument shape.

Callback shapes
- ``VALID``              -> ``(None, True)``
- ``INVALID``            -> ``(None, False, message)``
- ``INVALID_PROPERTIES`` -> ``(None, False, message, {name: message})``
- ``ERROR``              -> ``(error, False, message)``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any


class ResultKind(StrEnum):
    """Outcome of validating one value."""

    VALID = "valid"
    INVALID = "invalid"
    INVALID_PROPERTIES = "invalid_properties"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of a description or object description validation."""

    kind: ResultKind
    message: str | None = None
    error: Any = None
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.properties, MappingProxyType):
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def passed(cls) -> ValidationResult:
        return cls(kind=ResultKind.VALID)

    @classmethod
    def failed(cls, message: str) -> ValidationResult:
        return cls(kind=ResultKind.INVALID, message=message)

    @classmethod
    def failed_properties(cls, message: str, properties: Mapping[str, str]) -> ValidationResult:
        return cls(kind=ResultKind.INVALID_PROPERTIES, message=message, properties=properties)

    @classmethod
    def errored(cls, error: Any, message: str) -> ValidationResult:
        return cls(kind=ResultKind.ERROR, message=message, error=error)

    @property
    def valid(self) -> bool:
        return self.kind is ResultKind.VALID

    @property
    def is_error(self) -> bool:
        return self.kind is ResultKind.ERROR

    def callback_args(self) -> tuple[Any, ...]:
        """Positional arguments delivered to a ``validate`` callback."""

        if self.kind is ResultKind.VALID:
            return (None, True)
        if self.kind is ResultKind.INVALID_PROPERTIES:
            return (None, False, self.message, dict(self.properties))
        if self.kind is ResultKind.ERROR:
            return (self.error, False, self.message)
        return (None, False, self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "valid": self.valid,
            "message": self.message,
            "error": None if self.error is None else repr(self.error),
            "properties": dict(self.properties),
        }


__all__ = ["ResultKind", "ValidationResult"]
