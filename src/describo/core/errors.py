"""Error types raised synchronously on API misuse."""

from __future__ import annotations

__all__ = ["ConfigurationError"]


class ConfigurationError(ValueError):
    """Raised when the library is used incorrectly.

    Never delivered through a validation callback: a missing callback, name, test
    function or validator, or a property shadowing a description attribute, is
    the caller's contract violation and not a property of the validated data.
    """
