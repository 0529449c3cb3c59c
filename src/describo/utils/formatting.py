"""
describo — message formatting

File: src/describo/utils/formatting.py
Last updated: 2026-10-19

Purpose
- Substitute the validated value into failure-message templates.

Functional requirements
- Templates without ``%`` are returned unchanged without touching the regex engine.
- ``%s``/``%d``/``%i``/``%f``/``%j`` and their positional forms (``%1$s``) all refer
  to the single value; ``%%`` renders a literal percent sign.
- Unknown conversions are left untouched.
"""

from __future__ import annotations

import json
import numbers
import re
from typing import Final

__all__ = ["coerce_message", "format_message", "has_placeholder"]

_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"%%|%(?:(\d+)\$)?([sdifj])")


def has_placeholder(template: str) -> bool:
    return "%" in template


def format_message(template: str, value: object) -> str:
    """Render ``template`` with every placeholder bound to ``value``."""

    # Most messages carry no placeholder; skip the substitution pass entirely.
    if not has_placeholder(template):
        return template

    def _replace(match: re.Match[str]) -> str:
        if match.group(0) == "%%":
            return "%"
        return _convert(match.group(2), value)

    return _PLACEHOLDER_RE.sub(_replace, template)


def _convert(conversion: str, value: object) -> str:
    if conversion in ("d", "i"):
        if isinstance(value, numbers.Real):
            return str(int(value))
        return str(value)
    if conversion == "f":
        if isinstance(value, numbers.Real):
            return str(float(value))
        return str(value)
    if conversion == "j":
        return json.dumps(value, default=str, ensure_ascii=False, sort_keys=True)
    return str(value)


def coerce_message(value: object) -> str | None:
    """Normalize a message factory's return value to ``str`` (``None`` stays ``None``)."""

    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
