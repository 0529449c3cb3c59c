"""Stable constants shared across the description engine."""

from __future__ import annotations

from typing import Final

# Fallback messages.
DEFAULT_MESSAGE: Final[str] = "Invalid."
INVALID_PROPERTIES_MESSAGE: Final[str] = "One or more properties are invalid."
UNEXPECTED_ERROR_MESSAGE: Final[str] = "Unexpected error."

# Environment variable prefix for config overrides.
ENV_PREFIX: Final[str] = "DESCRIBO_"

# Root logger name for engine events.
LOGGER_NAME: Final[str] = "describo"

__all__ = [
    "DEFAULT_MESSAGE",
    "ENV_PREFIX",
    "INVALID_PROPERTIES_MESSAGE",
    "LOGGER_NAME",
    "UNEXPECTED_ERROR_MESSAGE",
]
