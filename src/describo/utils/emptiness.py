"""Emptiness predicate consumed by validators that let empty values pass."""

from __future__ import annotations

import numbers
from collections.abc import Sized

__all__ = ["is_empty"]


def is_empty(value: object) -> bool:
    """Return ``True`` when ``value`` carries no content.

    Numbers and booleans are never empty. ``None`` and ``""`` are empty. Sized
    values are empty when their length is zero. Plain objects are empty when
    they hold no instance attributes. Everything else is not empty.
    """

    if isinstance(value, numbers.Number):
        return False
    if value is None:
        return True
    if isinstance(value, str):
        return not value
    if isinstance(value, Sized):
        return len(value) == 0
    if callable(value):
        return False
    attributes = getattr(value, "__dict__", None)
    if isinstance(attributes, dict):
        return not attributes
    return False
