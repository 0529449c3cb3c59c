"""Validations bind a validator to params, a failure message, and a negation flag."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from describo.core.errors import ConfigurationError
from describo.core.validator import Callback, Message, Validator
from describo.utils.formatting import coerce_message


class Validation:
    """A validator configured for one use inside a description."""

    def __init__(
        self,
        validator: Validator,
        params: list[Any] | tuple[Any, ...] | Message | None = None,
        message: Message | None = None,
    ) -> None:
        if not isinstance(validator, Validator):
            raise ConfigurationError("invalid validator")

        # Validation(validator, message) shorthand.
        if not message and (isinstance(params, str) or callable(params)):
            message, params = params, None

        if params is not None and not isinstance(params, (list, tuple)):
            raise ConfigurationError(f"params must be a list or tuple ({validator.name})")
        if params is not None and len(params) > validator.param_count:
            raise ConfigurationError(
                f"{validator.name} takes {validator.param_count} params, got {len(params)}"
            )

        self.validator = validator
        self.params: tuple[Any, ...] = tuple(params or ())
        self.negate = False
        self._message: str | None = None
        self.set_message(message)

    def __repr__(self) -> str:
        return (
            f"Validation(validator={self.validator.name!r}, params={self.params!r}, "
            f"negate={self.negate})"
        )

    @property
    def message(self) -> str | None:
        """Own resolved message, else the validator's message rendered with ``params``."""

        if self._message:
            return self._message
        return self.validator.resolve_message(self.params)

    def set_message(self, message: Message | None) -> Validation:
        """Set the failure message. Factories are called now, with ``params``."""

        if message is not None and not isinstance(message, str) and not callable(message):
            raise ConfigurationError(f"message must be a string or callable ({self.validator.name})")
        if callable(message):
            self._message = coerce_message(message(*self.params))
        else:
            self._message = message or None
        return self

    def set_negate(self, negate: bool) -> Validation:
        self.negate = bool(negate)
        return self

    def validate(self, value: Any, callback: Callback | None = None) -> None:
        """Run the validator against ``value``, inverting the verdict when negated."""

        if not callable(callback):
            raise ConfigurationError(f"callback is required ({self.validator.name})")

        inner: Callable[..., None] = callback
        if self.negate:
            inner = _negated(callback)
        self.validator.validate(value, *self.params, callback=inner)


def _negated(callback: Callback) -> Callback:
    def _invert(error: Any = None, valid: bool = False) -> None:
        if error is not None:
            callback(error, False)
        else:
            callback(None, not valid)

    return _invert


__all__ = ["Validation"]
