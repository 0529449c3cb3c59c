"""
describo — descriptions

File: src/describo/core/description.py
Last updated: 2026-10-19

Purpose
- A description is an ordered collection of validations for a single value.
- ``validate`` starts every validation in attachment order and settles on the first
  error or failure it observes, else once all of them passed.

Negation
- ``description.not_`` is a ``NegatedDescription`` sharing the same validation list;
  anything added through it is negated. Every other attribute is read from the base
  description, so ``description.not_.validate`` validates the whole description.

Concurrency
- Validations may complete synchronously or later, in any order. Nothing is
  cancelled: completions arriving after the outcome is settled are ignored.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from describo.config.schema import DEFAULT_CONFIG, DescriboConfig
from describo.core.attach import bind_helper, lookup_helper
from describo.core.errors import ConfigurationError
from describo.core.results import ValidationResult
from describo.core.validation import Validation
from describo.observability.logging import get_logger
from describo.utils.concurrency import Report, await_callback, run_parallel
from describo.utils.formatting import format_message

ResultCallback = Callable[[ValidationResult], None]

_logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class _CheckOutcome:
    validation: Validation
    error: Any
    valid: bool

    @property
    def decisive(self) -> bool:
        return self.error is not None or not self.valid


class Description:
    """Ordered validations describing one value."""

    def __init__(self, message: str | None = None, *, config: DescriboConfig | None = None) -> None:
        if message is not None and not isinstance(message, str):
            raise ConfigurationError("invalid message")

        self.config = config or DEFAULT_CONFIG
        self._message: str | None = None
        self._validations: list[Validation] = []
        self.set_message(message)
        self.not_ = NegatedDescription(self)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        validator = lookup_helper(self, name)
        if validator is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return bind_helper(self, validator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(validations={len(self._validations)})"

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def validations(self) -> tuple[Validation, ...]:
        return tuple(self._validations)

    def add_validation(self, validation: Validation) -> Description:
        if not isinstance(validation, Validation):
            raise ConfigurationError("invalid validation")
        self._validations.append(validation)
        return self

    def set_message(self, message: str | None = None) -> Description:
        """Set the message preferred over validation and validator messages."""

        self._message = message or None
        return self

    def get_message(
        self,
        value: Any,
        message: str | None = None,
        validation: Validation | None = None,
    ) -> str:
        """Resolve a failure message and substitute ``value`` into its placeholders.

        The first non-empty of: ``message``, this description's message, the
        validation's message, ``config.default_message``.
        """

        resolved = (
            message
            or self._message
            or (validation.message if validation is not None else None)
            or self.config.default_message
        )
        return format_message(resolved, value)

    def validate(
        self,
        value: Any,
        message: str | Callable[..., None] | None = None,
        callback: Callable[..., None] | None = None,
    ) -> None:
        """Validate ``value`` and report through ``callback(error, valid[, message])``.

        ``validate(value, callback)`` is accepted. Raises ``ConfigurationError``
        when no callback is given.
        """

        if callback is None and callable(message):
            callback, message = message, None
        if not callable(callback):
            raise ConfigurationError("callback is required")

        resolved_callback = callback
        self.evaluate(value, message, lambda result: resolved_callback(*result.callback_args()))

    async def validate_async(self, value: Any, message: str | None = None) -> ValidationResult:
        """Await the validation of ``value`` and return its ``ValidationResult``."""

        (result,) = await await_callback(lambda done: self.evaluate(value, message, done))
        return result

    def evaluate(self, value: Any, message: str | None, on_result: ResultCallback) -> None:
        """Callback-style validation delivering a single ``ValidationResult``."""

        tasks = [self._check_task(value, validation) for validation in self._validations]

        def _settle(outcome: _CheckOutcome | None) -> None:
            result = self._conclude(value, message, outcome)
            if self.config.debug:
                _logger.debug(
                    "description_validated",
                    kind=result.kind.value,
                    validations=len(tasks),
                )
            on_result(result)

        run_parallel(
            tasks,
            _settle,
            short_circuit=lambda outcome: outcome.decisive,
            on_duplicate=self._on_duplicate,
        )

    def _check_task(self, value: Any, validation: Validation) -> Callable[[Report[_CheckOutcome]], None]:
        def _task(report: Report[_CheckOutcome]) -> None:
            def _done(error: Any = None, valid: bool = False) -> None:
                report(_CheckOutcome(validation=validation, error=error, valid=bool(valid)))

            validation.validate(value, _done)

        return _task

    def _conclude(
        self,
        value: Any,
        message: str | None,
        outcome: _CheckOutcome | None,
    ) -> ValidationResult:
        if outcome is None:
            return ValidationResult.passed()
        if outcome.error is not None:
            return ValidationResult.errored(outcome.error, self.config.unexpected_error_message)
        return ValidationResult.failed(self.get_message(value, message, outcome.validation))

    def _on_duplicate(self, key: object) -> None:
        if self.config.debug:
            _logger.warning("duplicate_completion", task=key, description=repr(self))


class NegatedDescription:
    """View over a description whose ``add_validation`` negates what it adds."""

    def __init__(self, base: Description) -> None:
        self._base = base
        # Shared by reference, never copied.
        self._validations = base._validations

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        validator = lookup_helper(self, name) or lookup_helper(self._base, name)
        if validator is not None:
            return bind_helper(self, validator)
        return getattr(self._base, name)

    def __repr__(self) -> str:
        return f"NegatedDescription({self._base!r})"

    @property
    def base(self) -> Description:
        return self._base

    @property
    def validations(self) -> tuple[Validation, ...]:
        return tuple(self._validations)

    def add_validation(self, validation: Validation) -> NegatedDescription:
        if not isinstance(validation, Validation):
            raise ConfigurationError("invalid validation")
        validation.set_negate(True)
        self._base.add_validation(validation)
        return self


__all__ = ["Description", "NegatedDescription", "ResultCallback"]
