"""
describo — validators

File: src/describo/core/validator.py
Last updated: 2026-10-19

Purpose
- A validator is a named, reusable test definition: a test function, an optional
  failure message (string or message factory), and an allows-empty switch.

Test function contract
- Callback style: ``fn(value, *params, callback)`` calls ``callback(error, valid)``
  exactly once, before returning or later.
- Coroutine style: ``async def fn(value, *params) -> bool``. The result (or the
  raised exception) is reported through the same callback contract; requires a
  running event loop.
- ``param_count`` declares how many params sit between value and callback. Missing
  params are passed as ``None``.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from describo.core.errors import ConfigurationError
from describo.utils.concurrency import spawn
from describo.utils.emptiness import is_empty
from describo.utils.formatting import coerce_message

Callback = Callable[..., None]
MessageFactory = Callable[..., str]
Message = str | MessageFactory


class Validator:
    """Named test definition shared by any number of validations."""

    def __init__(
        self,
        name: str,
        message: Message | None = None,
        fn: Callable[..., Any] | None = None,
        *,
        param_count: int = 0,
        allows_empty: bool = True,
    ) -> None:
        if not name:
            raise ConfigurationError("validator name is required")

        if fn is None:
            if callable(message):
                fn, message = message, None
            else:
                raise ConfigurationError(f"test function is required ({name})")

        if not callable(fn):
            raise ConfigurationError(f"test function must be callable ({name})")
        if isinstance(param_count, bool) or not isinstance(param_count, int) or param_count < 0:
            raise ConfigurationError(f"param_count must be an integer >= 0 ({name})")

        self.name = name
        self.fn = fn
        self.param_count = param_count
        self.is_coroutine = inspect.iscoroutinefunction(fn)
        self.allows_empty = True
        self.message: Message | None = None
        self.set_message(message)
        self.set_allows_empty(allows_empty)

    def __repr__(self) -> str:
        return f"Validator(name={self.name!r}, param_count={self.param_count})"

    def set_allows_empty(self, allows: bool) -> Validator:
        """Let empty values pass without running the test function."""

        self.allows_empty = bool(allows)
        return self

    def set_message(self, message: Message | None) -> Validator:
        """Store the failure message as given; factories are resolved by validations."""

        if message is not None and not isinstance(message, str) and not callable(message):
            raise ConfigurationError(f"message must be a string or callable ({self.name})")
        self.message = message
        return self

    def resolve_message(self, params: tuple[Any, ...]) -> str | None:
        """Render this validator's message for a validation bound to ``params``."""

        if callable(self.message):
            return coerce_message(self.message(*params))
        return self.message or None

    def validate(self, value: Any, *args: Any, callback: Callback | None = None) -> None:
        """Test ``value``; ``callback`` is the keyword argument or the last positional one."""

        params = list(args)
        if callback is None and params:
            callback = params.pop()
        if not callable(callback):
            raise ConfigurationError(f"callback is required ({self.name})")
        if len(params) > self.param_count:
            raise ConfigurationError(
                f"{self.name} takes {self.param_count} params, got {len(params)}"
            )
        params.extend([None] * (self.param_count - len(params)))

        if self.allows_empty and is_empty(value):
            callback(None, True)
            return

        if self.is_coroutine:
            self._run_coroutine(value, params, callback)
        else:
            self.fn(value, *params, callback)

    def _run_coroutine(self, value: Any, params: list[Any], callback: Callback) -> None:
        def _done(error: BaseException | None, result: object) -> None:
            if error is not None:
                callback(error, False)
            else:
                callback(None, bool(result))

        try:
            spawn(self.fn(value, *params), _done)
        except RuntimeError as exc:
            raise ConfigurationError(
                f"coroutine test function needs a running event loop ({self.name})"
            ) from exc


__all__ = ["Callback", "Message", "MessageFactory", "Validator"]
