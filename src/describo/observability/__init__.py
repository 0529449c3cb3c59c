"""Public observability primitives: structured logging helpers."""

from describo.observability.logging import (
    LoggingConfig,
    get_logger,
    setup_logging,
    shutdown_logging,
    validation_scope,
)

__all__ = [
    "LoggingConfig",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    "validation_scope",
]
