"""Structured logging setup on top of ``structlog`` with JSON-lines output."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import IO, Any, Final

import structlog

from describo.constants import LOGGER_NAME

_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Configuration for structlog rendering."""

    level: int | str = "INFO"
    json_lines: bool = True
    stream: IO[str] = field(default_factory=lambda: sys.stderr)
    utc_timestamps: bool = True


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog processors, level filtering and the output stream."""

    cfg = config or LoggingConfig()
    renderer: Any
    if cfg.json_lines:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=cfg.utc_timestamps),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(cfg.level)),
        logger_factory=structlog.PrintLoggerFactory(file=cfg.stream),
        cache_logger_on_first_use=False,
    )


def shutdown_logging() -> None:
    """Restore structlog defaults and drop any bound context variables."""

    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Return a lazily-configured logger tagged with ``component=name``."""

    return structlog.get_logger(component=name)


@contextmanager
def validation_scope(**fields: object) -> Iterator[None]:
    """Temporarily bind context fields for every log event emitted in scope."""

    with structlog.contextvars.bound_contextvars(**fields):
        yield


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    normalized = level.strip().upper()
    if normalized not in _LEVELS:
        raise ValueError(f"unknown log level: {level!r}")
    return _LEVELS[normalized]


__all__ = [
    "LoggingConfig",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    "validation_scope",
]
